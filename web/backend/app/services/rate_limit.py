"""
Shared slowapi rate limiter.
Lives outside app.main so routers can decorate endpoints without a circular import.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def resolve_rate_limit() -> str:
    """Per-client limit for stream resolution requests."""
    return f"{get_settings().resolve_rate_limit_per_minute}/minute"
