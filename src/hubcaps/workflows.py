"""Workflows interface."""

from typing import TYPE_CHECKING

from pydantic import BaseModel

from .serialization import encode_body

if TYPE_CHECKING:
    from .client import GitHubClient


class WorkflowDispatchOptions(BaseModel):
    """Inputs for a ``workflow_dispatch`` event."""

    ref: str
    inputs: dict[str, str] = {}


class Workflows:
    """GitHub Actions workflows of a repository."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str):
        self.github = github
        self.owner = owner
        self.repo = repo

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/actions/workflows{more}"

    async def dispatch(
        self, workflow_id: int | str, options: WorkflowDispatchOptions
    ) -> None:
        """Trigger a workflow run.

        Args:
            workflow_id: Workflow ID or file name (e.g. ``ci.yml``)
            options: Git reference and workflow inputs
        """
        body = encode_body(options)
        await self.github.post(self._path(f"/{workflow_id}/dispatches"), body)
