"""Rising Tides provider."""
from app.services.providers.base import ListingOnlyProvider


class RisingTidesProvider(ListingOnlyProvider):
    id = "rising-tides"
    name = "Rising Tides"
    priority = 5

    CHANNELS = [
        ("rising-tides-sports", "Rising Tides Sports", "sports"),
    ]
