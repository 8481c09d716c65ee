"""
Rate limiting shared by the app and its routers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from country_directory.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def default_rate_limit() -> str:
    """Per-client limit applied to each API endpoint."""
    return f"{get_settings().rate_limit_per_minute}/minute"
