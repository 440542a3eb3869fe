from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_settings

# Shared rate limiter; routes decorate with limiter.limit(...) and main.py
# registers it on app.state.
limiter = Limiter(key_func=get_remote_address)


def generate_rate_limit() -> str:
    """
    Current /generate rate limit, read from settings on each request.

    slowapi calls this outside FastAPI's dependency injection, so
    app.dependency_overrides[get_settings] does not apply here; only the
    cached environment settings do.
    """
    return get_settings().generate_rate_limit
