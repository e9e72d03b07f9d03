"""
Live TV aggregation service.

Single entry point for listing channels across every provider and for
resolving one provider's channel to a playable stream.
"""
import asyncio
import logging
from typing import Optional

from app.models.channel import Channel, ProviderSummary, ResolvedStream
from app.services.providers.base import LiveProvider
from app.services.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class LiveTVResolver:
    """Aggregates channel listings and dispatches stream resolution."""

    def __init__(self, registry: ProviderRegistry):
        self.registry = registry

    async def get_all_live_channels(self) -> list[Channel]:
        """
        List channels from all providers.

        Providers are queried concurrently. The result is ordered by
        provider priority, whatever order the calls finish in. A provider
        that fails contributes no channels.
        """
        results = await asyncio.gather(
            *(self._channels_from(provider) for provider in self.registry)
        )
        return [channel for channels in results for channel in channels]

    async def _channels_from(self, provider: LiveProvider) -> list[Channel]:
        try:
            return list(await provider.get_channels())
        except Exception as e:
            logger.warning(f"Provider {provider.id} failed to list channels: {e}", exc_info=True)
            return []

    async def resolve_live_stream(self, provider_id: str, channel_id: str) -> Optional[ResolvedStream]:
        """
        Resolve a channel through the provider that owns it.

        Returns None for an unknown provider or when the provider has no
        stream. Errors raised by the provider are not caught.
        """
        provider = self.registry.get(provider_id)
        if provider is None:
            logger.debug(f"Unknown provider requested: {provider_id}")
            return None
        return await provider.resolve_stream(channel_id)

    def providers(self) -> list[ProviderSummary]:
        """Describe the registered providers in priority order."""
        return [
            ProviderSummary(id=p.id, name=p.name, priority=p.priority)
            for p in self.registry
        ]
