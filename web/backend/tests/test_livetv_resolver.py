"""
Tests for channel aggregation and stream dispatch.
"""
import pytest

from app.services.livetv import LiveTVResolver
from app.services.registry import ProviderRegistry


class TestChannelAggregation:

    @pytest.mark.asyncio
    async def test_priority_order_survives_slow_first_provider(self, make_provider):
        """A slow high-priority provider is still listed first."""
        slow = make_provider("first", 1, channel_ids=("f1", "f2"), delay=0.1)
        fast = make_provider("second", 2, channel_ids=("s1",))
        resolver = LiveTVResolver(ProviderRegistry([fast, slow]))

        channels = await resolver.get_all_live_channels()

        assert [(ch.provider, ch.id) for ch in channels] == [
            ("first", "f1"),
            ("first", "f2"),
            ("second", "s1"),
        ]

    @pytest.mark.asyncio
    async def test_failing_provider_is_isolated(self, make_provider, make_failing_provider):
        registry = ProviderRegistry([
            make_provider("a", 1, channel_ids=("a1",)),
            make_failing_provider("broken", 2, channel_ids=("b1",)),
            make_provider("c", 3, channel_ids=("c1", "c2")),
        ])
        resolver = LiveTVResolver(registry)

        channels = await resolver.get_all_live_channels()

        assert [ch.id for ch in channels] == ["a1", "c1", "c2"]
        assert all(ch.provider != "broken" for ch in channels)

    @pytest.mark.asyncio
    async def test_every_provider_failing_gives_empty_list(self, make_failing_provider):
        resolver = LiveTVResolver(ProviderRegistry([
            make_failing_provider("x", 1),
            make_failing_provider("y", 2),
        ]))

        assert await resolver.get_all_live_channels() == []

    @pytest.mark.asyncio
    async def test_empty_registry(self):
        resolver = LiveTVResolver(ProviderRegistry([]))

        assert await resolver.get_all_live_channels() == []

    @pytest.mark.asyncio
    async def test_same_channel_id_from_two_providers(self, make_provider):
        resolver = LiveTVResolver(ProviderRegistry([
            make_provider("one", 1, channel_ids=("main",)),
            make_provider("two", 2, channel_ids=("main",)),
        ]))

        channels = await resolver.get_all_live_channels()

        assert [(ch.provider, ch.id) for ch in channels] == [("one", "main"), ("two", "main")]


class TestStreamDispatch:

    @pytest.mark.asyncio
    async def test_unknown_provider_is_a_miss(self, make_provider, hls_stream):
        provider = make_provider("known", 1, stream=hls_stream)
        resolver = LiveTVResolver(ProviderRegistry([provider]))

        assert await resolver.resolve_live_stream("unknown", "anything") is None
        assert provider.resolve_calls == []

    @pytest.mark.asyncio
    async def test_none_passes_through(self, make_provider):
        resolver = LiveTVResolver(ProviderRegistry([make_provider("p", 1)]))

        assert await resolver.resolve_live_stream("p", "ch") is None

    @pytest.mark.asyncio
    async def test_stream_passes_through(self, make_provider, hls_stream):
        resolver = LiveTVResolver(ProviderRegistry([make_provider("p", 1, stream=hls_stream)]))

        assert await resolver.resolve_live_stream("p", "ch") is hls_stream

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, make_failing_provider):
        resolver = LiveTVResolver(ProviderRegistry([make_failing_provider("bad", 1)]))

        with pytest.raises(RuntimeError, match="garbage"):
            await resolver.resolve_live_stream("bad", "ch")

    @pytest.mark.asyncio
    async def test_listed_channels_route_to_their_provider(self, make_provider):
        """(provider, id) from a listing always reaches the provider that listed it."""
        one = make_provider("one", 1, channel_ids=("main", "extra"))
        two = make_provider("two", 2, channel_ids=("main",))
        resolver = LiveTVResolver(ProviderRegistry([one, two]))

        for channel in await resolver.get_all_live_channels():
            await resolver.resolve_live_stream(channel.provider, channel.id)

        assert one.resolve_calls == ["main", "extra"]
        assert two.resolve_calls == ["main"]


def test_provider_summaries(make_provider):
    resolver = LiveTVResolver(ProviderRegistry([make_provider("b", 2), make_provider("a", 1)]))

    summaries = resolver.providers()

    assert [(s.id, s.name, s.priority) for s in summaries] == [("a", "A", 1), ("b", "B", 2)]
