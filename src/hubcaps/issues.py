"""Issues interface."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import quote

from pydantic import BaseModel

from .comments import Comments
from .options import ListOptions, SortDirection, with_query
from .pagination import PageStream
from .serialization import encode_body
from .users import NullableUser, User

if TYPE_CHECKING:
    from .client import GitHubClient


class State(str, Enum):
    """Issue state filter."""

    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class Sort(str, Enum):
    """Issue list ordering."""

    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"


class Label(BaseModel):
    url: str
    name: str
    color: str


class PullRef(BaseModel):
    url: str
    html_url: str
    diff_url: str
    patch_url: str


class Issue(BaseModel):
    id: int
    url: str
    labels_url: str
    comments_url: str
    events_url: str
    html_url: str
    number: int
    state: str
    title: str
    body: str | None = None
    user: User
    labels: list[Label]
    assignee: User | None = None
    locked: bool
    comments: int
    pull_request: PullRef | None = None
    closed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    assignees: list[User]
    closed_by: NullableUser = User.empty()


class IssueOptions(BaseModel):
    """Fields for creating or editing an issue; fields left at their defaults are not sent."""

    title: str = ""
    body: str | None = None
    assignee: str | None = None
    milestone: int | None = None
    labels: list[str] = []
    state: str | None = None


@dataclass
class IssueListOptions(ListOptions):
    """Filters for listing issues."""

    state: State | None = None
    sort: Sort | None = None
    direction: SortDirection | None = None
    assignee: str | None = None
    creator: str | None = None
    mentioned: str | None = None
    labels: list[str] | None = None
    since: str | None = None
    per_page: int | None = None


class IssueAssignees:
    """Assignees of one issue."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str, number: int):
        self.github = github
        self.owner = owner
        self.repo = repo
        self.number = number

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/issues/{self.number}/assignees{more}"

    async def add(self, assignees: list[str]) -> Issue:
        """Add assignees to the issue."""
        result: Issue = await self.github.post(
            self._path(), encode_body({"assignees": assignees}), Issue
        )
        return result


class IssueLabels:
    """Labels of one issue."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str, number: int):
        self.github = github
        self.owner = owner
        self.repo = repo
        self.number = number

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/issues/{self.number}/labels{more}"

    async def add(self, labels: list[str]) -> list[Label]:
        """Add labels to the issue."""
        result: list[Label] = await self.github.post(
            self._path(), encode_body(labels), list[Label]
        )
        return result

    async def remove(self, label: str) -> None:
        """Remove one label from the issue."""
        await self.github.delete(self._path(f"/{quote(label, safe='')}"))

    async def set(self, labels: list[str]) -> list[Label]:
        """Replace all labels of the issue."""
        result: list[Label] = await self.github.put(
            self._path(), encode_body(labels), list[Label]
        )
        return result

    async def clear(self) -> None:
        """Remove all labels from the issue."""
        await self.github.delete(self._path())


class IssueRef:
    """Handle on a single issue."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str, number: int):
        self.github = github
        self.owner = owner
        self.repo = repo
        self.number = number

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/issues/{self.number}{more}"

    async def get(self) -> Issue:
        """Fetch the issue."""
        result: Issue = await self.github.get(self._path(), Issue)
        return result

    def labels(self) -> IssueLabels:
        return IssueLabels(self.github, self.owner, self.repo, self.number)

    def assignees(self) -> IssueAssignees:
        return IssueAssignees(self.github, self.owner, self.repo, self.number)

    def comments(self) -> Comments:
        return Comments(self.github, self.owner, self.repo, self.number)

    async def edit(self, options: IssueOptions) -> Issue:
        """Edit the issue."""
        result: Issue = await self.github.patch(self._path(), encode_body(options), Issue)
        return result

    async def open(self) -> Issue:
        """Reopen the issue."""
        return await self.edit(IssueOptions(state=State.OPEN.value))

    async def close(self) -> Issue:
        """Close the issue."""
        return await self.edit(IssueOptions(state=State.CLOSED.value))


class Issues:
    """Issues of a repository."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str):
        self.github = github
        self.owner = owner
        self.repo = repo

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/issues{more}"

    def get(self, number: int) -> IssueRef:
        """Get a handle on one issue. Makes no request."""
        return IssueRef(self.github, self.owner, self.repo, number)

    async def create(self, options: IssueOptions) -> Issue:
        """Create an issue."""
        result: Issue = await self.github.post(self._path(), encode_body(options), Issue)
        return result

    def iter(self, options: IssueListOptions | None = None) -> PageStream[Issue]:
        """Stream every issue matching ``options``."""
        return self.github.get_stream(with_query(self._path(), options), Issue)

    async def list(self, options: IssueListOptions | None = None) -> list[Issue]:
        """List one page of issues matching ``options``."""
        result: list[Issue] = await self.github.get(
            with_query(self._path(), options), list[Issue]
        )
        return result
