"""Pull request review comments interface."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel

from .options import ListOptions, with_query
from .pagination import PageStream
from .serialization import NullableCount, encode_body
from .users import User

if TYPE_CHECKING:
    from .client import GitHubClient


class ReviewComment(BaseModel):
    id: int
    url: str
    diff_hunk: str
    path: str
    position: NullableCount = 0
    original_position: NullableCount = 0
    commit_id: str
    original_commit_id: str
    user: User
    body: str
    created_at: datetime
    updated_at: datetime
    html_url: str
    pull_request_url: str


class ReviewCommentOptions(BaseModel):
    """A comment on one line of a pull request diff."""

    body: str
    commit_id: str
    path: str
    position: int


@dataclass
class ReviewCommentListOptions(ListOptions):
    since: str | None = None
    per_page: int | None = None


class ReviewComments:
    """Review comments on one pull request."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str, number: int):
        self.github = github
        self.owner = owner
        self.repo = repo
        self.number = number

    def _path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/pulls/{self.number}/comments"

    async def create(self, options: ReviewCommentOptions) -> ReviewComment:
        """Comment on a line of the pull request diff."""
        result: ReviewComment = await self.github.post(
            self._path(), encode_body(options), ReviewComment
        )
        return result

    def iter(
        self, options: ReviewCommentListOptions | None = None
    ) -> PageStream[ReviewComment]:
        """Stream every review comment."""
        return self.github.get_stream(with_query(self._path(), options), ReviewComment)

    async def list(
        self, options: ReviewCommentListOptions | None = None
    ) -> list[ReviewComment]:
        """List one page of review comments."""
        result: list[ReviewComment] = await self.github.get(
            with_query(self._path(), options), list[ReviewComment]
        )
        return result
