"""
In-memory transport for client tests.

Replays queued responses (or raises queued exceptions) in order and records
every request it was handed, so tests can assert on exactly what was sent
and how many exchanges happened.
"""

import json
from collections import deque
from typing import Any

from src.hubcaps.transport import HttpResponse, Request


def json_response(
    payload: Any,
    status: int = 200,
    link: str | None = None,
    headers: dict[str, str] | None = None,
) -> HttpResponse:
    """Build a JSON response with an optional Link header."""
    all_headers = {"Content-Type": "application/json; charset=utf-8"}
    if link is not None:
        all_headers["Link"] = link
    all_headers.update(headers or {})
    return HttpResponse.build(status, all_headers, json.dumps(payload).encode())


def page_link(url: str, rel: str = "next") -> str:
    return f'<{url}>; rel="{rel}"'


class RecordingTransport:
    """Transport that answers from a FIFO queue."""

    def __init__(self, *responses: HttpResponse | BaseException) -> None:
        self.responses: deque[HttpResponse | BaseException] = deque(responses)
        self.requests: list[Request] = []
        self.closed = False

    def queue(self, *responses: HttpResponse | BaseException) -> None:
        self.responses.extend(responses)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> Request:
        return self.requests[-1]

    async def send(self, request: Request) -> HttpResponse:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self.responses.popleft()
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True
