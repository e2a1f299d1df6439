"""Redis connection used by the access-token blocklist.

Every authenticated request consults the blocklist, so the client carries a
short socket timeout: an unreachable server surfaces as a ``redis`` error
within ``REDIS_SOCKET_TIMEOUT`` seconds and the request is refused with 503.
"""

import redis
from django.conf import settings

_client: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    """Return the process-wide client for ``settings.REDIS_URL``."""

    global _client
    if _client is None:
        timeout = settings.REDIS_SOCKET_TIMEOUT
        _client = redis.Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )
    return _client


__all__ = ["get_redis_client"]
