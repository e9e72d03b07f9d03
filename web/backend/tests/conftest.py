"""
Pytest configuration and fixtures for Live TV backend tests.
"""
import asyncio
from typing import Optional

import pytest

from app.models.channel import Channel, ResolvedStream
from app.services.providers.base import LiveProvider
from app.services.rate_limit import limiter


class StaticProvider(LiveProvider):
    """Provider returning canned channels and a canned stream."""

    def __init__(
        self,
        provider_id: str,
        priority: int,
        channel_ids: tuple[str, ...] = (),
        stream: Optional[ResolvedStream] = None,
        delay: float = 0.0,
    ):
        self.id = provider_id
        self.name = provider_id.title()
        self.priority = priority
        self.channel_ids = channel_ids
        self.stream = stream
        self.delay = delay
        self.resolve_calls: list[str] = []

    async def get_channels(self) -> list[Channel]:
        if self.delay:
            await asyncio.sleep(self.delay)
        return [
            Channel(id=channel_id, name=channel_id.title(), category="sports", provider=self.id)
            for channel_id in self.channel_ids
        ]

    async def resolve_stream(self, channel_id: str) -> Optional[ResolvedStream]:
        self.resolve_calls.append(channel_id)
        return self.stream


class FailingProvider(StaticProvider):
    """Provider whose every call raises."""

    async def get_channels(self) -> list[Channel]:
        raise RuntimeError(f"{self.id} upstream is down")

    async def resolve_stream(self, channel_id: str) -> Optional[ResolvedStream]:
        self.resolve_calls.append(channel_id)
        raise RuntimeError(f"{self.id} returned garbage")


@pytest.fixture
def make_provider():
    """Factory for StaticProvider instances."""
    return StaticProvider


@pytest.fixture
def make_failing_provider():
    """Factory for FailingProvider instances."""
    return FailingProvider


@pytest.fixture
def hls_stream():
    return ResolvedStream(url="https://cdn.example.com/live/index.m3u8", type="hls")


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Give every test a fresh rate limit budget."""
    limiter.reset()
    yield
