"""
Sport HD provider.

Lists scheduled La Liga fixtures and resolves them through a set of
mirrors. Each mirror is an HLS origin configured by base URL; a mirror
without a configured base URL never yields a stream.
"""
import asyncio
import logging
from typing import Optional

import httpx

from app.models.channel import Channel, ChannelMeta, MirrorCandidate, ResolvedStream
from app.services.mirror_resolver import DEFAULT_TIMEOUT_MS, resolve_with_fallbacks
from app.services.providers.base import LiveProvider

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

FIXTURES = [
    # (id, name, kickoff, order)
    ("laliga-real-barca", "Real Madrid vs Barcelona", "2026-02-14T20:00:00Z", 1),
    ("laliga-atleti-sevilla", "Atletico Madrid vs Sevilla", "2026-02-15T17:30:00Z", 2),
    ("laliga-valencia-villarreal", "Valencia vs Villarreal", "2026-02-16T19:00:00Z", 3),
]


class SportHDProvider(LiveProvider):
    """Sport HD fixtures with mirror fallback resolution."""

    id = "sport-hd"
    name = "Sport HD"
    priority = 1

    LEAGUE = "La Liga"

    def __init__(
        self,
        mirror_urls: Optional[dict[str, str]] = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._mirror_urls = dict(mirror_urls or {})
        self._timeout_ms = timeout_ms
        self._user_agent = user_agent
        self._transport = transport

    async def get_channels(self) -> list[Channel]:
        return [
            Channel(
                id=fixture_id,
                name=name,
                category="sports",
                provider=self.id,
                meta=ChannelMeta(league=self.LEAGUE, kickoff_utc=kickoff, order=order),
            )
            for fixture_id, name, kickoff, order in FIXTURES
        ]

    def _mirrors(self) -> list[MirrorCandidate]:
        return [
            MirrorCandidate(id="mirror-1", label="Primary mirror", priority=1),
            MirrorCandidate(id="mirror-2", label="Backup mirror", priority=2),
            MirrorCandidate(id="mirror-3", label="Last resort", priority=3),
        ]

    async def resolve_stream(self, channel_id: str) -> Optional[ResolvedStream]:
        logger.info(f"[SportHD] resolve requested for {channel_id}")

        async def probe(mirror: MirrorCandidate, abort: asyncio.Event) -> Optional[ResolvedStream]:
            logger.info(f"[SportHD] trying {mirror.id} for {channel_id}")
            return await self._probe_mirror(mirror, channel_id, abort)

        return await resolve_with_fallbacks(self._mirrors(), probe, self._timeout_ms)

    async def _probe_mirror(
        self,
        mirror: MirrorCandidate,
        channel_id: str,
        abort: asyncio.Event,
    ) -> Optional[ResolvedStream]:
        """
        Check whether a mirror currently serves the channel's playlist.

        HEAD is enough to tell a live playlist from a dead one; redirects
        are followed so the returned URL is the terminal one.
        """
        base_url = self._mirror_urls.get(mirror.id)
        if not base_url or abort.is_set():
            return None

        url = f"{base_url.rstrip('/')}/{channel_id}/index.m3u8"
        async with httpx.AsyncClient(
            timeout=self._timeout_ms / 1000,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            head = asyncio.ensure_future(client.head(url, headers={"User-Agent": self._user_agent}))
            aborted = asyncio.ensure_future(abort.wait())
            try:
                await asyncio.wait({head, aborted}, return_when=asyncio.FIRST_COMPLETED)
            except asyncio.CancelledError:
                head.cancel()
                raise
            finally:
                aborted.cancel()

            if not head.done():
                # Abandoned: drop the request before the client closes
                head.cancel()
                await asyncio.wait({head})
                logger.info(f"[SportHD] {mirror.id} probe aborted")
                return None

            response = head.result()

        if abort.is_set():
            return None

        if response.status_code != 200:
            logger.info(f"[SportHD] {mirror.id} answered HTTP {response.status_code}")
            return None

        return ResolvedStream(url=str(response.url), type="hls")
