"""GitHub credentials and per-endpoint authentication constraints."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from urllib.parse import parse_qs, urlencode, urlparse

import jwt

from .exceptions import GitHubConstraintViolation, GitHubError


class AuthenticationConstraint(Enum):
    """Which credential kind an endpoint accepts."""

    UNCONSTRAINED = "unconstrained"
    JWT = "jwt"  # GitHub App endpoints


class Credentials(ABC):
    """Immutable credentials used to decorate outgoing requests."""

    @abstractmethod
    def headers(self) -> dict[str, str]:
        """Get authentication headers."""

    def decorate_url(self, url: str) -> str:
        """Return the URL with any query-string credentials appended."""
        return url

    def satisfies(self, constraint: AuthenticationConstraint) -> bool:
        """Check whether these credentials may call an endpoint."""
        return constraint is AuthenticationConstraint.UNCONSTRAINED

    def require(self, constraint: AuthenticationConstraint) -> None:
        """Raise if these credentials cannot satisfy ``constraint``.

        Raises:
            GitHubConstraintViolation: If the constraint is not satisfied
        """
        if not self.satisfies(constraint):
            raise GitHubConstraintViolation(
                f"{type(self).__name__} cannot satisfy the "
                f"{constraint.value} authentication constraint"
            )


@dataclass(frozen=True)
class NoCredentials(Credentials):
    """Anonymous access."""

    def headers(self) -> dict[str, str]:
        return {}


@dataclass(frozen=True)
class TokenCredentials(Credentials):
    """Personal access token or installation token."""

    token: str

    def __post_init__(self) -> None:
        if not self.token:
            raise GitHubError("Token is required")

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"token {self.token}"}

    def __repr__(self) -> str:
        return "TokenCredentials(token='***')"


@dataclass(frozen=True)
class ClientCredentials(Credentials):
    """OAuth application id and secret, sent as query parameters."""

    client_id: str
    client_secret: str

    def headers(self) -> dict[str, str]:
        return {}

    def decorate_url(self, url: str) -> str:
        # next-page links echo the query they were computed from
        if "client_id" in parse_qs(urlparse(url).query):
            return url
        query = urlencode(
            {"client_id": self.client_id, "client_secret": self.client_secret}
        )
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{query}"

    def __repr__(self) -> str:
        return f"ClientCredentials(client_id={self.client_id!r}, client_secret='***')"


@dataclass(frozen=True)
class JWTCredentials(Credentials):
    """GitHub App JSON Web Token."""

    token: str

    @classmethod
    def for_app(
        cls, app_id: str | int, private_key: str, lifetime: int = 600
    ) -> "JWTCredentials":
        """Sign an app token.

        Args:
            app_id: GitHub App ID
            private_key: PEM private key for RS256 signing
            lifetime: Token lifetime in seconds (GitHub allows at most 10 minutes)

        Returns:
            Credentials carrying the signed token

        Raises:
            GitHubError: If the token cannot be signed
        """
        now = int(time.time())
        payload = {
            "iat": now - 60,  # tolerate clock drift
            "exp": now + lifetime,
            "iss": str(app_id),
        }

        try:
            token = jwt.encode(payload, private_key, algorithm="RS256")
        except Exception as e:
            raise GitHubError(f"Failed to generate JWT: {e}") from e
        return cls(token=token)

    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def satisfies(self, constraint: AuthenticationConstraint) -> bool:
        return True

    def __repr__(self) -> str:
        return "JWTCredentials(token='***')"
