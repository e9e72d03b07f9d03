"""Mad Titan Sports provider."""
from app.services.providers.base import ListingOnlyProvider


class MadTitanProvider(ListingOnlyProvider):
    id = "mad-titan"
    name = "Mad Titan Sports"
    priority = 4

    CHANNELS = [
        ("mad-titan-sports", "Mad Titan Sports", "sports"),
    ]
