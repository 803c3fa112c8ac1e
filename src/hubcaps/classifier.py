"""Classification of failed exchanges into the domain error taxonomy.

The ``classify_*`` functions return an exception instead of raising it, so the
client can log and raise in one place. Classification itself never fails:
error bodies that are not the documented JSON shape are kept as raw text.
"""

from pydantic import BaseModel, Field, ValidationError

from .exceptions import (
    GitHubAuthenticationError,
    GitHubForbiddenError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubServerError,
    GitHubStatusError,
    GitHubTimeoutError,
    GitHubTransportError,
    GitHubValidationError,
)
from .rate_limiting import RateLimitInfo
from .transport import HttpResponse, Request


class FieldError(BaseModel):
    """One entry of the ``errors`` list in a GitHub error body."""

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None
    documentation_url: str | None = None


class ClientError(BaseModel):
    """Structured GitHub API error body."""

    message: str
    errors: list[FieldError] = Field(default_factory=list)
    documentation_url: str | None = None


def parse_client_error(body: bytes) -> ClientError | None:
    """Parse an error body, returning None when it is not the documented shape."""
    if not body:
        return None
    try:
        return ClientError.model_validate_json(body)
    except ValidationError:
        return None


def classify_response(response: HttpResponse, request: Request) -> GitHubStatusError:
    """Map a non-success response to a status error.

    Args:
        response: Completed exchange with a non-2xx status
        request: Request that produced it

    Returns:
        The status error subclass matching the response
    """
    status = response.status
    error = parse_client_error(response.body)
    text = response.text
    reason = error.message if error is not None else text.strip() or f"HTTP {status}"
    message = f"{request.method} {request.display_url}: {reason}"

    if status == 401:
        return GitHubAuthenticationError(message, status, error, text)
    if status in (403, 429):
        rate_limit = RateLimitInfo.from_headers(response.headers)
        rate_limited = "rate limit" in reason.lower() or (
            rate_limit is not None and rate_limit.is_exceeded
        )
        if rate_limited:
            return GitHubRateLimitError(message, status, error, text, rate_limit)
        return GitHubForbiddenError(message, status, error, text)
    if status == 404:
        return GitHubNotFoundError(message, status, error, text)
    if status == 422:
        return GitHubValidationError(message, status, error, text)
    if 500 <= status < 600:
        return GitHubServerError(message, status, error, text)
    return GitHubStatusError(message, status, error, text)


def classify_transport_error(exc: BaseException, request: Request) -> GitHubTransportError:
    """Map a transport failure (connection, DNS, TLS, timeout) to a domain error."""
    if isinstance(exc, TimeoutError):
        return GitHubTimeoutError(
            f"Request timeout for {request.method} {request.display_url}"
        )
    return GitHubTransportError(
        f"Connection error for {request.method} {request.display_url}: {exc}"
    )

