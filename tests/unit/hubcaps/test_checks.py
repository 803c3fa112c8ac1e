"""
Unit tests for the checks interface.

Why: The checks API is only served under its preview media type, so every
     call must negotiate it.

What: Tests check run creation, update and listing by suite.

How: Drives CheckRuns through a client wired to a recording transport.
"""

import json

import pytest

from src.hubcaps.checks import (
    CHECKS_PREVIEW,
    CheckRunOptions,
    CheckRunState,
    CheckRunUpdateOptions,
    Conclusion,
    Output,
)
from src.hubcaps.client import GitHubClient
from tests.fixtures.github import MockGitHubAPIResponses, RecordingTransport, json_response

API = "https://api.github.com"
REPO = f"{API}/repos/octocat/hello-world"
PREVIEW_ACCEPT = "application/vnd.github.antiope-preview+json"


class TestCheckRuns:
    """Test CheckRuns."""

    def test_preview_media_type(self) -> None:
        assert CHECKS_PREVIEW.accept() == PREVIEW_ACCEPT

    @pytest.mark.asyncio
    async def test_create(self, client: GitHubClient, transport: RecordingTransport) -> None:
        transport.queue(
            json_response(
                MockGitHubAPIResponses.check_run_response(status="in_progress", conclusion=None),
                status=201,
            )
        )

        check_run = await client.repo("octocat", "hello-world").check_runs().create(
            CheckRunOptions(
                name="mighty_readme",
                head_sha="ce587453ced02b1526dfb4cb910479d431683101",
                status=CheckRunState.IN_PROGRESS,
            )
        )

        assert check_run.status == CheckRunState.IN_PROGRESS
        assert check_run.conclusion is None
        assert check_run.check_suite is not None
        assert transport.last_request.method == "POST"
        assert transport.last_request.url == f"{REPO}/check-runs"
        assert transport.last_request.headers["Accept"] == PREVIEW_ACCEPT
        assert json.loads(transport.last_request.body) == {
            "name": "mighty_readme",
            "head_sha": "ce587453ced02b1526dfb4cb910479d431683101",
            "status": "in_progress",
        }

    @pytest.mark.asyncio
    async def test_update(self, client: GitHubClient, transport: RecordingTransport) -> None:
        transport.queue(json_response(MockGitHubAPIResponses.check_run_response()))

        check_run = await client.repo("octocat", "hello-world").check_runs().update(
            4,
            CheckRunUpdateOptions(
                conclusion=Conclusion.NEUTRAL,
                output=Output(title="Mighty Readme", summary="There are 0 failures"),
            ),
        )

        assert check_run.conclusion == Conclusion.NEUTRAL
        assert transport.last_request.method == "PATCH"
        assert transport.last_request.url == f"{REPO}/check-runs/4"
        assert transport.last_request.headers["Accept"] == PREVIEW_ACCEPT
        assert json.loads(transport.last_request.body) == {
            "conclusion": "neutral",
            "output": {"title": "Mighty Readme", "summary": "There are 0 failures"},
        }

    @pytest.mark.asyncio
    async def test_list_for_suite(
        self, client: GitHubClient, transport: RecordingTransport
    ) -> None:
        transport.queue(
            json_response(
                {
                    "total_count": 2,
                    "check_runs": [
                        MockGitHubAPIResponses.check_run_response(id=1),
                        MockGitHubAPIResponses.check_run_response(id=2),
                    ],
                }
            )
        )

        runs = await client.repo("octocat", "hello-world").check_runs().list_for_suite(5)

        assert [run.id for run in runs] == [1, 2]
        assert transport.last_request.url == f"{REPO}/check-suites/5/check-runs"
        assert transport.last_request.headers["Accept"] == PREVIEW_ACCEPT
