"""Repository commits interface."""

from datetime import datetime
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from pydantic import BaseModel

from .checks import CheckSuiteListOptions, CheckSuiteResponse
from .options import with_query
from .pagination import PageStream
from .users import NullableUser, User

if TYPE_CHECKING:
    from .client import GitHubClient


class CommitRef(BaseModel):
    url: str
    sha: str


class UserStamp(BaseModel):
    name: str
    email: str
    date: datetime


class CommitDetails(BaseModel):
    url: str
    author: UserStamp
    committer: UserStamp | None = None
    message: str
    tree: CommitRef
    comment_count: int = 0


class Stats(BaseModel):
    additions: int = 0
    deletions: int = 0
    total: int = 0


class File(BaseModel):
    filename: str
    status: str


class RepoCommit(BaseModel):
    url: str
    sha: str
    html_url: str
    comments_url: str
    commit: CommitDetails
    author: NullableUser = User.empty()
    committer: NullableUser = User.empty()
    parents: list[CommitRef]
    files: list[File] = []
    stats: Stats = Stats()


class RepoCommits:
    """Commits of a repository."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str):
        self.github = github
        self.owner = owner
        self.repo = repo

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/commits{more}"

    async def list(
        self,
        path: str = "",
        commit_ref: str = "",
        since: datetime | None = None,
    ) -> list[RepoCommit]:
        """List up to 100 commits.

        Args:
            path: Only commits touching this file path
            commit_ref: SHA or branch to start listing from
            since: Only commits after this time
        """
        params: dict[str, str] = {"per_page": "100"}
        if path:
            params["path"] = path
        if since is not None:
            params["since"] = since.isoformat()
        if commit_ref:
            params["sha"] = commit_ref
        result: list[RepoCommit] = await self.github.get(
            f"{self._path()}?{urlencode(params)}", list[RepoCommit]
        )
        return result

    def iter(self) -> PageStream[RepoCommit]:
        """Stream every commit of the default branch."""
        return self.github.get_stream(self._path(), RepoCommit)

    async def get(self, commit_ref: str) -> RepoCommit:
        """Get one commit with its files and stats."""
        result: RepoCommit = await self.github.get(
            self._path(f"/{commit_ref}"), RepoCommit
        )
        return result

    async def list_check_suites(
        self, commit_ref: str, options: CheckSuiteListOptions | None = None
    ) -> CheckSuiteResponse:
        """List the check suites reported for a commit."""
        result: CheckSuiteResponse = await self.github.get(
            with_query(self._path(f"/{commit_ref}/check-suites"), options),
            CheckSuiteResponse,
        )
        return result
