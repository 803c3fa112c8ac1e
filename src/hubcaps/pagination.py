"""GitHub API pagination utilities."""

import asyncio
import logging
import re
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import parse_qs, urlparse

from .auth import AuthenticationConstraint
from .media import MediaType

if TYPE_CHECKING:
    from .client import GitHubClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

# One entry: <url> followed by its parameters, up to the next unquoted "<".
# A URL still open when the next "<" starts is not an entry.
_LINK_PATTERN = re.compile(r'<([^<>]*)>((?:[^<"]|"[^"<]*")*)')
# One ";name=value" parameter; quoted values may contain ";" and ",".
_PARAM_PATTERN = re.compile(r'\s*;\s*([^\s=;,"]+)\s*(?:=\s*(?:"([^"]*)"|([^\s";,]*)))?')


class LinkHeader:
    """Parser for GitHub Link headers."""

    def __init__(self, link_header: str | None = None):
        """Initialize Link header parser.

        Args:
            link_header: Raw Link header value from response
        """
        self.links: dict[str, str] = {}
        if link_header:
            self._parse(link_header)

    def _parse(self, link_header: str) -> None:
        """Parse Link header into dictionary of rel -> url.

        Entries without a URL or without a ``rel`` parameter are skipped
        one at a time; the rest of the header is still used.

        Args:
            link_header: Raw Link header value
        """
        # Link header format: <url>; rel="next", <url>; rel="last"
        for match in _LINK_PATTERN.finditer(link_header):
            url = match.group(1).strip()
            if not url:
                continue

            rels = self._find_rel(match.group(2))
            for rel in (rels or "").split():
                self.links[rel.lower()] = url

    @staticmethod
    def _find_rel(params: str) -> str | None:
        """Return the first ``rel`` value among an entry's parameters."""
        pos = 0
        while True:
            # stops at the first unquoted "," ending the entry
            param = _PARAM_PATTERN.match(params, pos)
            if param is None:
                return None
            name, quoted, bare = param.groups()
            if name.lower() == "rel":
                return quoted if quoted is not None else bare
            pos = param.end()

    @property
    def next_url(self) -> str | None:
        """Get URL for next page."""
        return self.links.get("next")

    @property
    def prev_url(self) -> str | None:
        """Get URL for previous page."""
        return self.links.get("prev")

    @property
    def first_url(self) -> str | None:
        """Get URL for first page."""
        return self.links.get("first")

    @property
    def last_url(self) -> str | None:
        """Get URL for last page."""
        return self.links.get("last")

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return "next" in self.links

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return "prev" in self.links

    def get_last_page_number(self) -> int | None:
        """Extract last page number from last URL."""
        if not self.last_url:
            return None

        try:
            params = parse_qs(urlparse(self.last_url).query)
            page = params.get("page", [None])[0]
            return int(page) if page else None
        except (ValueError, TypeError):
            return None


@dataclass
class Page(Generic[T]):
    """One fetched page: its items and the pagination links it carried."""

    items: list[T]
    url: str
    links: LinkHeader = field(default_factory=LinkHeader)

    @property
    def next_page_url(self) -> str | None:
        return self.links.next_url


class PageStream(Generic[T]):
    """Lazy sequence of items spread over Link-paginated pages.

    Nothing is fetched on construction. Each pull hands out a buffered item,
    or fetches exactly one page when the buffer is empty and the previous
    page announced a ``next`` link. Pages are fetched one at a time.

    A stream is not restartable. When a page fetch fails the error is raised
    to that pull and the stream ends; later pulls raise
    ``StopAsyncIteration``.

    Usage::

        async for issue in client.get_stream("/repos/o/r/issues?per_page=50", Issue):
            ...
    """

    def __init__(
        self,
        client: "GitHubClient",
        initial_url: str,
        item_type: Any = None,
        media_type: MediaType = MediaType.JSON,
        constraint: AuthenticationConstraint = AuthenticationConstraint.UNCONSTRAINED,
    ):
        """Initialize page stream.

        Args:
            client: GitHub client used to fetch pages
            initial_url: Path or URL of the first page, query string included
            item_type: Type each item is validated as; None keeps raw JSON
            media_type: Representation requested for every page
            constraint: Authentication constraint applied to every page
        """
        self.client = client
        self.initial_url = initial_url
        self.item_type = item_type
        self.media_type = media_type
        self.constraint = constraint

        self._buffer: deque[T] = deque()
        self._next_url: str | None = initial_url
        self._pages_fetched = 0
        self._lock = asyncio.Lock()

    @property
    def pages_fetched(self) -> int:
        """Number of pages fetched so far."""
        return self._pages_fetched

    @property
    def exhausted(self) -> bool:
        """True once no buffered item and no further page remain."""
        return not self._buffer and self._next_url is None

    def __aiter__(self) -> "PageStream[T]":
        return self

    async def __anext__(self) -> T:
        return await self.next()

    async def next(self) -> T:
        """Pull the next item.

        Returns:
            The next item in server order

        Raises:
            StopAsyncIteration: When the stream is exhausted
            GitHubError: When fetching the next page fails
        """
        async with self._lock:
            while not self._buffer:
                url = self._next_url
                if url is None:
                    raise StopAsyncIteration
                await self._fetch_next_page(url)
            return self._buffer.popleft()

    async def _fetch_next_page(self, url: str) -> None:
        # cleared first: a failed fetch ends the stream
        self._next_url = None

        page: Page[T] = await self.client._fetch_page(
            url, self.item_type, self.media_type, self.constraint
        )
        self._pages_fetched += 1
        self._buffer.extend(page.items)
        self._next_url = page.next_page_url

        logger.debug(
            f"Fetched page {self._pages_fetched} ({len(page.items)} items), "
            f"next page: {'yes' if self._next_url else 'no'}"
        )

    async def collect(self) -> list[T]:
        """Collect all remaining items.

        Returns:
            List of items from the remaining pages
        """
        return [item async for item in self]
