"""GitHub API client: request construction, dispatch and classification."""

import logging
import time
import uuid
from typing import Any
from urllib.parse import urljoin

import aiohttp

from .auth import AuthenticationConstraint, Credentials, NoCredentials
from .classifier import classify_response, classify_transport_error
from .config import GitHubClientConfig
from .media import MediaType
from .pagination import LinkHeader, Page, PageStream
from .repositories import Repository
from .serialization import decode_payload
from .transport import AiohttpTransport, HttpResponse, Request, Transport
from .users import Users

logger = logging.getLogger(__name__)

UNCONSTRAINED = AuthenticationConstraint.UNCONSTRAINED


class GitHubClient:
    """Async GitHub API client.

    The client holds immutable credentials and configuration; resource
    handles created from it (``client.repo("o", "r").issues()``) share it.
    Each call performs exactly one HTTP exchange and never retries.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        config: GitHubClientConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize GitHub client.

        Args:
            credentials: Credentials sent with every request (anonymous if None)
            config: Client configuration
            transport: HTTP transport; an aiohttp transport by default
        """
        self.credentials = credentials or NoCredentials()
        self.config = config or GitHubClientConfig()
        self.transport: Transport = transport or AiohttpTransport(
            timeout=self.config.timeout, user_agent=self.config.user_agent
        )

    async def __aenter__(self) -> "GitHubClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Release the transport's connections."""
        await self.transport.close()

    def _generate_correlation_id(self) -> str:
        """Generate correlation ID for request tracking."""
        return str(uuid.uuid4())[:8]

    def _build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = urljoin(self.config.base_url + "/", path.lstrip("/"))
        return self.credentials.decorate_url(url)

    def build_request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        media_type: MediaType = MediaType.JSON,
        constraint: AuthenticationConstraint = UNCONSTRAINED,
    ) -> Request:
        """Build a fully formed request.

        Args:
            method: HTTP method
            path: API path with encoded query string, or an absolute URL
            body: Serialized JSON body
            media_type: Representation to request
            constraint: Credential kind the endpoint requires

        Returns:
            Request ready for the transport

        Raises:
            GitHubConstraintViolation: If the credentials cannot satisfy constraint
        """
        self.credentials.require(constraint)

        headers = {
            "Accept": media_type.accept(
                self.config.media_product, self.config.api_version
            ),
            "User-Agent": self.config.user_agent,
        }
        headers.update(self.credentials.headers())
        if body is not None:
            headers["Content-Type"] = "application/json"

        return Request(method.upper(), self._build_url(path), headers, body)

    async def _send(self, request: Request) -> HttpResponse:
        """Send a request and classify failures.

        Raises:
            GitHubTransportError: If the server could not be reached
            GitHubStatusError: If the server answered with a non-2xx status
        """
        correlation_id = self._generate_correlation_id()
        start_time = time.time()
        logger.debug(
            f"GitHub API request [{correlation_id}] {request.method} "
            f"{request.display_url}"
        )

        try:
            response = await self.transport.send(request)
        except (aiohttp.ClientError, OSError) as e:
            error = classify_transport_error(e, request)
            logger.warning(f"GitHub API transport error [{correlation_id}]: {error}")
            raise error from e

        logger.debug(
            f"GitHub API response [{correlation_id}] "
            f"{response.status} in {time.time() - start_time:.2f}s"
        )

        if not response.ok:
            status_error = classify_response(response, request)
            logger.warning(
                f"GitHub API error [{correlation_id}] {response.status}: {status_error}"
            )
            raise status_error

        return response

    async def request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        model: Any = None,
        media_type: MediaType = MediaType.JSON,
        constraint: AuthenticationConstraint = UNCONSTRAINED,
    ) -> Any:
        """Perform one request and decode its body.

        Args:
            method: HTTP method
            path: API path or absolute URL
            body: Serialized JSON body
            model: Expected result type; None returns decoded JSON
            media_type: Representation to request
            constraint: Credential kind the endpoint requires

        Returns:
            Decoded body, or None for 204 responses and for blank bodies
            when no model is expected

        Raises:
            GitHubError: Classified failure
        """
        request = self.build_request(method, path, body, media_type, constraint)
        response = await self._send(request)

        if response.status == 204 or (model is None and not response.body.strip()):
            return None
        return decode_payload(response.body, model)

    async def get(self, path: str, model: Any = None) -> Any:
        """Make GET request to GitHub API.

        Args:
            path: API path (e.g., '/repos/owner/repo/pulls?state=open')
            model: Expected result type

        Returns:
            Response data validated as ``model``
        """
        return await self.request("GET", path, model=model)

    async def post(self, path: str, body: bytes | None = None, model: Any = None) -> Any:
        """Make POST request to GitHub API."""
        return await self.request("POST", path, body, model)

    async def patch(self, path: str, body: bytes | None = None, model: Any = None) -> Any:
        """Make PATCH request to GitHub API."""
        return await self.request("PATCH", path, body, model)

    async def put(self, path: str, body: bytes | None = None, model: Any = None) -> Any:
        """Make PUT request to GitHub API."""
        return await self.request("PUT", path, body, model)

    async def delete(self, path: str) -> None:
        """Make DELETE request to GitHub API.

        Any response body is discarded.
        """
        request = self.build_request("DELETE", path)
        await self._send(request)

    async def get_media(self, path: str, media_type: MediaType, model: Any = None) -> Any:
        """Make GET request for a negotiated (e.g. preview) representation."""
        return await self.request("GET", path, model=model, media_type=media_type)

    async def post_media(
        self,
        path: str,
        body: bytes | None,
        media_type: MediaType,
        constraint: AuthenticationConstraint = UNCONSTRAINED,
        model: Any = None,
    ) -> Any:
        """Make POST request for a negotiated representation."""
        return await self.request("POST", path, body, model, media_type, constraint)

    async def patch_media(
        self,
        path: str,
        body: bytes | None,
        media_type: MediaType,
        constraint: AuthenticationConstraint = UNCONSTRAINED,
        model: Any = None,
    ) -> Any:
        """Make PATCH request for a negotiated representation."""
        return await self.request("PATCH", path, body, model, media_type, constraint)

    def get_stream(
        self,
        path: str,
        item_type: Any = None,
        media_type: MediaType = MediaType.JSON,
        constraint: AuthenticationConstraint = UNCONSTRAINED,
    ) -> PageStream[Any]:
        """Create a lazy stream over a Link-paginated list endpoint.

        No request is made until the first item is pulled. Page size is
        whatever ``per_page`` the caller put on ``path``.

        Args:
            path: API path of the first page, query string included
            item_type: Type each item is validated as
            media_type: Representation requested for every page
            constraint: Credential kind the endpoint requires

        Returns:
            PageStream yielding items in server order
        """
        return PageStream(self, path, item_type, media_type, constraint)

    async def _fetch_page(
        self,
        url: str,
        item_type: Any,
        media_type: MediaType,
        constraint: AuthenticationConstraint,
    ) -> Page[Any]:
        """Fetch one page (used by PageStream).

        Args:
            url: Path or absolute next-page URL
            item_type: Type each item is validated as
            media_type: Representation to request
            constraint: Credential kind the endpoint requires

        Returns:
            Page with items and Link relations
        """
        request = self.build_request("GET", url, None, media_type, constraint)
        response = await self._send(request)

        items_type = list if item_type is None else list[item_type]  # type: ignore[valid-type]
        items = [] if response.status == 204 else decode_payload(response.body, items_type)
        return Page(items, request.url, LinkHeader(response.headers.get("Link")))

    # Resource handles

    def repo(self, owner: str, name: str) -> Repository:
        """Get a handle on a repository.

        Args:
            owner: Repository owner
            name: Repository name
        """
        return Repository(self, owner, name)

    def users(self) -> Users:
        """Get a handle on the users API."""
        return Users(self)
