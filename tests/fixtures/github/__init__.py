"""
Test fixtures for the GitHub client.

Provides a recording in-memory transport and GitHub-shaped payloads.
"""

from .mock_data import MockGitHubAPIResponses
from .transport import RecordingTransport, json_response, page_link

__all__ = [
    "MockGitHubAPIResponses",
    "RecordingTransport",
    "json_response",
    "page_link",
]
