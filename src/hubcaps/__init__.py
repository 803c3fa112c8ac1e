"""Async GitHub REST API client package."""

from .auth import (
    AuthenticationConstraint,
    ClientCredentials,
    Credentials,
    JWTCredentials,
    NoCredentials,
    TokenCredentials,
)
from .classifier import ClientError, FieldError
from .client import GitHubClient
from .config import GitHubClientConfig
from .exceptions import (
    GitHubAuthenticationError,
    GitHubConstraintViolation,
    GitHubError,
    GitHubForbiddenError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubSerializationError,
    GitHubServerError,
    GitHubStatusError,
    GitHubTimeoutError,
    GitHubTransportError,
    GitHubValidationError,
)
from .media import MediaType
from .options import ListOptions, SortDirection
from .pagination import LinkHeader, Page, PageStream
from .rate_limiting import RateLimitInfo
from .repositories import Repository
from .serialization import encode_body
from .transport import AiohttpTransport, HttpResponse, Request, Transport

__all__ = [
    "AiohttpTransport",
    "AuthenticationConstraint",
    "ClientCredentials",
    "ClientError",
    "Credentials",
    "FieldError",
    "GitHubAuthenticationError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubConstraintViolation",
    "GitHubError",
    "GitHubForbiddenError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubSerializationError",
    "GitHubServerError",
    "GitHubStatusError",
    "GitHubTimeoutError",
    "GitHubTransportError",
    "GitHubValidationError",
    "HttpResponse",
    "JWTCredentials",
    "LinkHeader",
    "ListOptions",
    "MediaType",
    "NoCredentials",
    "Page",
    "PageStream",
    "RateLimitInfo",
    "Repository",
    "Request",
    "SortDirection",
    "TokenCredentials",
    "Transport",
    "encode_body",
]
