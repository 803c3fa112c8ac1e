"""GitHub API client exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .classifier import ClientError
    from .rate_limiting import RateLimitInfo


class GitHubError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
    ):
        """Initialize GitHub error.

        Args:
            message: Error message
            status_code: HTTP status code
            response_data: Response data from GitHub API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class GitHubTransportError(GitHubError):
    """Raised when the server could not be reached (DNS, TLS, connection)."""

    pass


class GitHubTimeoutError(GitHubTransportError):
    """Raised when request times out."""

    pass


class GitHubStatusError(GitHubError):
    """Raised when GitHub answers with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error: "ClientError | None" = None,
        text: str = "",
    ):
        """Initialize status error.

        Args:
            message: Error message
            status_code: HTTP status code
            error: Structured API error body, when the body could be parsed
            text: Raw response body
        """
        response_data = error.model_dump(exclude_none=True) if error else None
        super().__init__(message, status_code, response_data)
        self.status_code: int = status_code
        self.error = error
        self.text = text


class GitHubAuthenticationError(GitHubStatusError):
    """Raised when authentication fails."""

    pass


class GitHubForbiddenError(GitHubStatusError):
    """Raised when the credentials lack access to a resource."""

    pass


class GitHubRateLimitError(GitHubForbiddenError):
    """Raised when rate limit is exceeded."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error: "ClientError | None" = None,
        text: str = "",
        rate_limit: "RateLimitInfo | None" = None,
    ):
        """Initialize rate limit error.

        Args:
            message: Error message
            status_code: HTTP status code
            error: Structured API error body
            text: Raw response body
            rate_limit: Rate limit state reported with the response
        """
        super().__init__(message, status_code, error, text)
        self.rate_limit = rate_limit

    @property
    def reset_time(self) -> int | None:
        """Unix timestamp when the rate limit resets."""
        return self.rate_limit.reset if self.rate_limit else None

    @property
    def remaining(self) -> int:
        """Remaining API calls."""
        return self.rate_limit.remaining if self.rate_limit else 0


class GitHubNotFoundError(GitHubStatusError):
    """Raised when resource is not found."""

    pass


class GitHubValidationError(GitHubStatusError):
    """Raised when request validation fails."""

    pass


class GitHubServerError(GitHubStatusError):
    """Raised when GitHub server returns 5xx error."""

    pass


class GitHubSerializationError(GitHubError):
    """Raised when a request or response body does not match its expected shape."""

    pass


class GitHubConstraintViolation(GitHubError):
    """Raised before sending when credentials cannot satisfy an endpoint."""

    pass
