"""
Live channel, stream, and mirror data models.
Shared by every provider and by the aggregation layer.
"""
from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field
from typing import Literal, Optional


LiveCategory = Literal["sports", "general", "news"]
StreamType = Literal["hls", "dash", "iframe"]


class ChannelMeta(BaseModel):
    """Event metadata attached to a scheduled broadcast."""
    league: str
    kickoff_utc: datetime = Field(
        validation_alias=AliasChoices("kickoff_utc", "kickoffUTC"),
        serialization_alias="kickoffUTC",
    )
    order: int
    badge: Optional[str] = None


class Channel(BaseModel):
    """
    A live channel listing entry.

    `id` is only unique inside its provider; use the (provider, id) pair
    to address a channel across an aggregated listing.
    """
    id: str
    name: str
    category: LiveCategory
    provider: str
    meta: Optional[ChannelMeta] = None


class ResolvedStream(BaseModel):
    """A directly playable stream. Never a redirect the client must follow."""
    url: str
    type: StreamType


class MirrorCandidate(BaseModel):
    """One backing endpoint a provider may try while resolving a channel."""
    id: str
    label: str
    priority: int  # lower is tried first


# Response models for API
class ProviderSummary(BaseModel):
    """Public description of a registered provider."""
    id: str
    name: str
    priority: int


class ChannelListResponse(BaseModel):
    """Aggregated channel listing response."""
    success: bool = True
    channels: list[Channel]


class ResolveResponse(BaseModel):
    """Successful stream resolution response."""
    success: bool = True
    stream: ResolvedStream
