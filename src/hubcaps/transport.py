"""HTTP transport boundary.

The client hands a fully built :class:`Request` to a :class:`Transport` and
gets back an :class:`HttpResponse`. Transports raise the underlying library
exception (``aiohttp.ClientError``, ``TimeoutError``, ``OSError``) on
failure; classification into domain errors is the client's job.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy


@dataclass(frozen=True)
class Request:
    """A single outgoing request. Built fresh per call, never reused."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def display_url(self) -> str:
        """URL without its query string, which may carry client secrets."""
        return self.url.split("?", 1)[0]


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and raw body of a completed exchange."""

    status: int
    headers: CIMultiDictProxy[str] = field(
        default_factory=lambda: CIMultiDictProxy(CIMultiDict())
    )
    body: bytes = b""

    @classmethod
    def build(
        cls, status: int, headers: dict[str, str] | None = None, body: bytes = b""
    ) -> "HttpResponse":
        """Build a response from plain values."""
        return cls(status, CIMultiDictProxy(CIMultiDict(headers or {})), body)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Sends one request and returns the server's answer."""

    async def send(self, request: Request) -> HttpResponse: ...

    async def close(self) -> None: ...


class AiohttpTransport:
    """Transport backed by a lazily created ``aiohttp.ClientSession``."""

    def __init__(self, timeout: float = 30, user_agent: str | None = None) -> None:
        self.timeout = timeout
        self.user_agent = user_agent

        # HTTP session will be initialized on first use
        self._session: aiohttp.ClientSession | None = None
        self._session_lock = asyncio.Lock()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session is initialized."""
        if self._session is None or self._session.closed:
            async with self._session_lock:
                if self._session is None or self._session.closed:
                    headers: dict[str, Any] = {}
                    if self.user_agent:
                        headers["User-Agent"] = self.user_agent
                    self._session = aiohttp.ClientSession(
                        timeout=aiohttp.ClientTimeout(total=self.timeout),
                        connector=aiohttp.TCPConnector(limit=100, limit_per_host=30),
                        headers=headers,
                    )
        return self._session

    async def send(self, request: Request) -> HttpResponse:
        session = await self._ensure_session()
        async with session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body,
        ) as response:
            body = await response.read()
            return HttpResponse(response.status, response.headers, body)

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
