"""
Test configuration and fixtures for GitHub client tests.

Provides a client wired to an in-memory recording transport so unit tests
exercise request construction, dispatch and classification without network
access.
"""

import pytest

from src.hubcaps.auth import TokenCredentials
from src.hubcaps.client import GitHubClient
from tests.fixtures.github import RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    """
    Recording transport with an empty response queue.

    Why: Tests need to control exactly what the server answers and inspect
         exactly what the client sent
    What: Provides a RecordingTransport; tests queue responses on it
    How: Creates a fresh transport per test so queues never leak
    """
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> GitHubClient:
    """
    GitHub client authenticated with a test token.

    Why: Most tests only care about one exchange with a token-authenticated client
    What: Provides a GitHubClient using the recording transport
    How: Wires TokenCredentials("test_token") and the transport fixture together
    """
    return GitHubClient(TokenCredentials("test_token"), transport=transport)

