"""Issue comments interface."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel

from .options import ListOptions, with_query
from .pagination import PageStream
from .serialization import encode_body
from .users import User

if TYPE_CHECKING:
    from .client import GitHubClient


class Comment(BaseModel):
    id: int
    url: str
    html_url: str
    body: str
    user: User
    created_at: datetime
    updated_at: datetime


class CommentOptions(BaseModel):
    body: str


@dataclass
class CommentListOptions(ListOptions):
    since: str | None = None
    per_page: int | None = None


class Comments:
    """Comments on one issue or pull request."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str, number: int):
        self.github = github
        self.owner = owner
        self.repo = repo
        self.number = number

    def _path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/issues/{self.number}/comments"

    async def create(self, options: CommentOptions) -> Comment:
        result: Comment = await self.github.post(
            self._path(), encode_body(options), Comment
        )
        return result

    def iter(self, options: CommentListOptions | None = None) -> PageStream[Comment]:
        return self.github.get_stream(with_query(self._path(), options), Comment)

    async def list(self, options: CommentListOptions | None = None) -> list[Comment]:
        result: list[Comment] = await self.github.get(
            with_query(self._path(), options), list[Comment]
        )
        return result
