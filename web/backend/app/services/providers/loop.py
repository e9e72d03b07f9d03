"""Loop live sports provider."""
from app.services.providers.base import ListingOnlyProvider


class LoopProvider(ListingOnlyProvider):
    id = "loop"
    name = "Loop"
    priority = 2

    CHANNELS = [
        ("loop-sports", "Loop Sports", "sports"),
    ]
