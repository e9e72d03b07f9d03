"""
Base class for live channel providers.

A provider is one independent source of live channels. It is the only
party that can turn one of its own channel ids into a playable stream.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from app.models.channel import Channel, LiveCategory, ResolvedStream

logger = logging.getLogger(__name__)


class LiveProvider(ABC):
    """
    Abstract live channel source.

    Subclasses set `id`, `name` and `priority` as class attributes. A lower
    priority is listed (and therefore offered) first.
    """

    id: str
    name: str
    priority: int

    @abstractmethod
    async def get_channels(self) -> list[Channel]:
        """
        Return the provider's current channel catalog.

        Must be free of side effects and safe to call concurrently.
        """
        ...

    @abstractmethod
    async def resolve_stream(self, channel_id: str) -> Optional[ResolvedStream]:
        """
        Resolve one of this provider's channels to a playable stream.

        Returns:
            The stream, or None when nothing is playable right now.

        Raises:
            Any exception when the provider itself misbehaves.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} priority={self.priority}>"


class ListingOnlyProvider(LiveProvider):
    """
    Provider whose channels are listed but not yet resolvable.

    Subclasses declare CHANNELS as (id, name, category) tuples.
    """

    CHANNELS: list[tuple[str, str, LiveCategory]] = []

    async def get_channels(self) -> list[Channel]:
        return [
            Channel(id=channel_id, name=name, category=category, provider=self.id)
            for channel_id, name, category in self.CHANNELS
        ]

    async def resolve_stream(self, channel_id: str) -> Optional[ResolvedStream]:
        logger.debug(f"[{self.name}] no stream source for {channel_id}")
        return None
