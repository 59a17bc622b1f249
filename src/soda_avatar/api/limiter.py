"""Rate limiter construction.

Uses slowapi (built on top of limits) to throttle per client. The limiter is
attached to ``app.state.limiter`` by ``create_app`` and applied to every
route through ``SlowAPIMiddleware``.
"""

from collections.abc import Callable

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from soda_avatar.config import Settings

FORWARDED_FOR_HEADER = "x-forwarded-for"


def make_key_func(trust_proxy_headers: bool) -> Callable[[Request], str]:
    """Build the function that maps a request to its rate limit bucket.

    When proxy headers are trusted, the left-most ``X-Forwarded-For``
    address (the original client) is used; otherwise the peer address.
    """

    def client_key(request: Request) -> str:
        if trust_proxy_headers:
            forwarded = request.headers.get(FORWARDED_FOR_HEADER, "")
            client = forwarded.split(",")[0].strip()
            if client:
                return client
        return get_remote_address(request)

    return client_key


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter applying ``settings.rate_limit`` to all routes."""
    return Limiter(
        key_func=make_key_func(settings.trust_proxy_headers),
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )
