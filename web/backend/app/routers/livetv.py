"""
Live TV API endpoints.
Lists aggregated channels and resolves a (provider, channel) pair to a stream.
"""
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from typing import Optional

from app.models.channel import ChannelListResponse, ResolveResponse
from app.services.livetv import LiveTVResolver
from app.services.rate_limit import limiter, resolve_rate_limit

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/livetv", tags=["livetv"])


def get_livetv_resolver(request: Request) -> LiveTVResolver:
    """Resolver built during application startup."""
    return request.app.state.livetv


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


@router.get("/channels")
async def list_channels(
    category: Optional[str] = Query(None, description="Filter by category (sports, general, news)"),
    provider: Optional[str] = Query(None, description="Filter by provider id (e.g., sport-hd)"),
    resolver: LiveTVResolver = Depends(get_livetv_resolver),
):
    """
    List live channels from every provider, in provider priority order.

    - **category**: only channels in this category
    - **provider**: only channels from this provider
    """
    try:
        channels = await resolver.get_all_live_channels()
    except Exception as e:
        logger.error(f"LiveTV channels error: {e}", exc_info=True)
        return _error(500, "FAILED_TO_LOAD_CHANNELS")

    if category:
        channels = [ch for ch in channels if ch.category == category]
    if provider:
        channels = [ch for ch in channels if ch.provider == provider]

    return ChannelListResponse(channels=channels).model_dump(mode="json", by_alias=True)


@router.get("/providers")
async def list_providers(resolver: LiveTVResolver = Depends(get_livetv_resolver)):
    """
    List registered live providers.
    """
    providers = resolver.providers()
    return {
        "providers": [p.model_dump() for p in providers],
        "count": len(providers)
    }


@router.post("/resolve")
@limiter.limit(resolve_rate_limit)
async def resolve_stream(request: Request, resolver: LiveTVResolver = Depends(get_livetv_resolver)):
    """
    Resolve a channel to a playable stream.

    Body: `{"provider": "<provider id>", "channelId": "<channel id>"}`
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}

    provider_id = payload.get("provider")
    channel_id = payload.get("channelId") or payload.get("channel_id")

    if not isinstance(provider_id, str) or not isinstance(channel_id, str) or not provider_id or not channel_id:
        return _error(400, "INVALID_PAYLOAD")

    try:
        stream = await resolver.resolve_live_stream(provider_id, channel_id)
    except Exception as e:
        logger.error(f"LiveTV resolve error for {provider_id}/{channel_id}: {e}", exc_info=True)
        return _error(500, "RESOLVE_FAILED")

    if stream is None:
        return _error(404, "STREAM_UNAVAILABLE")

    return ResolveResponse(stream=stream).model_dump(mode="json")
