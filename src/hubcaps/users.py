"""Users interface."""

from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel

from .pagination import PageStream
from .serialization import null_as

if TYPE_CHECKING:
    from .client import GitHubClient


class User(BaseModel):
    """Public user summary embedded in most resources."""

    login: str
    id: int
    avatar_url: str = ""
    gravatar_id: str = ""
    url: str = ""
    html_url: str = ""
    followers_url: str = ""
    following_url: str = ""
    gists_url: str = ""
    starred_url: str = ""
    subscriptions_url: str = ""
    organizations_url: str = ""
    repos_url: str = ""
    events_url: str = ""
    received_events_url: str = ""
    site_admin: bool = False

    @classmethod
    def empty(cls) -> "User":
        return cls(login="", id=0)


# the API sends null for deleted ("ghost") users
NullableUser = Annotated[User, null_as(User.empty)]


class AuthenticatedUser(User):
    """The user the credentials belong to."""

    name: str | None = None
    company: str | None = None
    blog: str = ""
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str = ""
    updated_at: str = ""


class UserEmail(BaseModel):
    email: str
    primary: bool
    verified: bool
    visibility: str | None = None


class Users:
    """Users API."""

    def __init__(self, github: "GitHubClient"):
        self.github = github

    async def authenticated(self) -> AuthenticatedUser:
        """Get the authenticated user."""
        result: AuthenticatedUser = await self.github.get("/user", AuthenticatedUser)
        return result

    async def authenticated_emails(self) -> list[UserEmail]:
        """List email addresses of the authenticated user."""
        result: list[UserEmail] = await self.github.get("/user/emails", list[UserEmail])
        return result

    async def get(self, username: str) -> User:
        """Get a user by login."""
        result: User = await self.github.get(f"/users/{username}", User)
        return result


class Contributors:
    """Contributors of a repository."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str):
        self.github = github
        self.owner = owner
        self.repo = repo

    def _path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/contributors"

    async def list(self) -> list[User]:
        """List the first page of contributors."""
        result: list[User] = await self.github.get(self._path(), list[User])
        return result

    def iter(self) -> PageStream[User]:
        """Stream every contributor."""
        return self.github.get_stream(self._path(), User)
