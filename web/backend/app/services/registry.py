"""
Provider registry.

A fixed, priority-ordered set of live providers. Built once at startup by
build_default_registry() and never mutated afterwards.
"""
from typing import Iterable, Iterator, Optional

from app.config import Settings
from app.services.providers.base import LiveProvider
from app.services.providers.daddy_live import DaddyLiveProvider
from app.services.providers.loop import LoopProvider
from app.services.providers.mad_titan import MadTitanProvider
from app.services.providers.rising_tides import RisingTidesProvider
from app.services.providers.sport_hd import SportHDProvider


class ProviderRegistry:
    """Immutable collection of providers ordered by ascending priority."""

    def __init__(self, providers: Iterable[LiveProvider]):
        # sorted() is stable: equal priorities keep insertion order
        ordered = tuple(sorted(providers, key=lambda p: p.priority))

        seen = set()
        for provider in ordered:
            if provider.id in seen:
                raise ValueError(f"Duplicate provider id: {provider.id}")
            seen.add(provider.id)

        self._providers = ordered
        self._by_id = {p.id: p for p in ordered}

    def __iter__(self) -> Iterator[LiveProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    @property
    def providers(self) -> tuple[LiveProvider, ...]:
        return self._providers

    def get(self, provider_id: str) -> Optional[LiveProvider]:
        """Look up a provider by exact id."""
        return self._by_id.get(provider_id)

    def ids(self) -> list[str]:
        return [p.id for p in self._providers]


def build_default_registry(settings: Settings) -> ProviderRegistry:
    """Construct the registry of all built-in providers."""
    return ProviderRegistry([
        SportHDProvider(
            mirror_urls=settings.sport_hd_mirrors,
            timeout_ms=settings.mirror_timeout_ms,
            user_agent=settings.user_agent,
        ),
        LoopProvider(),
        DaddyLiveProvider(),
        MadTitanProvider(),
        RisingTidesProvider(),
    ])
