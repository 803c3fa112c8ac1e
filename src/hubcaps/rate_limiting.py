"""Rate limit state reported by the GitHub API.

The client never waits or retries on its own; this only decodes the
``X-RateLimit-*`` headers so a rate-limit failure can be surfaced with the
numbers a caller needs to schedule its own retry.
"""

import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate limit information from GitHub API."""

    limit: int
    remaining: int
    reset: int
    used: int = 0
    resource: str = "core"

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo | None":
        """Build rate limit info from response headers.

        Args:
            headers: HTTP response headers (case-insensitive mapping)

        Returns:
            RateLimitInfo, or None when the headers are absent or invalid
        """
        if "X-RateLimit-Limit" not in headers:
            return None

        try:
            return cls(
                limit=int(headers.get("X-RateLimit-Limit", 5000)),
                remaining=int(headers.get("X-RateLimit-Remaining", 0)),
                reset=int(headers.get("X-RateLimit-Reset", 0)),
                used=int(headers.get("X-RateLimit-Used", 0)),
                resource=headers.get("X-RateLimit-Resource", "core"),
            )
        except (ValueError, TypeError):
            return None

    @property
    def reset_datetime(self) -> datetime:
        """Get reset time as datetime."""
        return datetime.fromtimestamp(self.reset)

    @property
    def seconds_until_reset(self) -> float:
        """Get seconds until rate limit resets."""
        return max(0, self.reset - time.time())

    @property
    def is_exceeded(self) -> bool:
        """Check if rate limit is exceeded."""
        return self.remaining <= 0
