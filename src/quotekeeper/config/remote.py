"""Remote quote server configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook

DEFAULT_SERVER_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_POSTS_PATH = "/posts"
DEFAULT_REMOTE_CATEGORIES = ("Motivation", "Inspiration", "Resilience")
REMOTE_TIMEOUT_SECONDS = 10.0
REMOTE_CACHE_TTL_SECONDS = 10.0


@dataclass(frozen=True)
class RemoteConfig:
    """Holds the remote quote server settings."""

    base_url: str
    resilience: ResilienceConfig
    posts_path: str = DEFAULT_POSTS_PATH
    # assigned round-robin to fetched posts, which carry no category
    categories: tuple[str, ...] = DEFAULT_REMOTE_CATEGORIES


def get_remote_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> RemoteConfig:
    base_url = optional_env_var("QUOTEKEEPER_SERVER_URL") or DEFAULT_SERVER_URL
    return RemoteConfig(
        base_url=base_url,
        resilience=resilience
        or ResilienceConfig(
            name="quotes",
            base_url=base_url,
            timeout_seconds=REMOTE_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=CacheConfig(
                backend="memory",
                default_ttl_seconds=REMOTE_CACHE_TTL_SECONDS,
                should_cache=cache_predicate,
            ),
            default_headers={"Accept": "application/json"},
        ),
    )
