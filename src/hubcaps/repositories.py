"""Repository handle: entry point to the per-repository resources."""

from typing import TYPE_CHECKING

from .actions import Actions
from .checks import CheckRuns
from .issues import Issues
from .repo_commits import RepoCommits
from .review_comments import ReviewComments
from .users import Contributors

if TYPE_CHECKING:
    from .client import GitHubClient


class Repository:
    """Handle on one repository. Creating it makes no request."""

    def __init__(self, github: "GitHubClient", owner: str, name: str):
        self.github = github
        self.owner = owner
        self.name = name

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def issues(self) -> Issues:
        return Issues(self.github, self.owner, self.name)

    def commits(self) -> RepoCommits:
        return RepoCommits(self.github, self.owner, self.name)

    def check_runs(self) -> CheckRuns:
        return CheckRuns(self.github, self.owner, self.name)

    def actions(self) -> Actions:
        return Actions(self.github, self.owner, self.name)

    def contributors(self) -> Contributors:
        return Contributors(self.github, self.owner, self.name)

    def review_comments(self, pull_number: int) -> ReviewComments:
        return ReviewComments(self.github, self.owner, self.name, pull_number)
