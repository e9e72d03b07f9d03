"""Daddy Live provider."""
from app.services.providers.base import ListingOnlyProvider


class DaddyLiveProvider(ListingOnlyProvider):
    id = "daddy-live"
    name = "Daddy Live"
    priority = 3

    CHANNELS = [
        ("daddy-live-main", "Daddy Live Sports", "sports"),
    ]
