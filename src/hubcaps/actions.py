"""Actions interface."""

from typing import TYPE_CHECKING

from .workflows import Workflows

if TYPE_CHECKING:
    from .client import GitHubClient


class Actions:
    """GitHub Actions of a repository."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str):
        self.github = github
        self.owner = owner
        self.repo = repo

    def workflows(self) -> Workflows:
        return Workflows(self.github, self.owner, self.repo)
