"""Checks interface.

The checks API is served under the ``antiope`` preview media type.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel

from .media import MediaType
from .options import ListOptions
from .serialization import NullableCount, NullableString, encode_body

if TYPE_CHECKING:
    from .client import GitHubClient

CHECKS_PREVIEW = MediaType.preview("antiope")


class CheckRunState(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Conclusion(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    ACTION_REQUIRED = "action_required"


class AnnotationLevel(str, Enum):
    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class Annotation(BaseModel):
    path: str
    start_line: int
    end_line: int
    start_column: int | None = None
    end_column: int | None = None
    annotation_level: AnnotationLevel
    message: str
    title: str
    raw_details: str


class Image(BaseModel):
    alt: str
    image_url: str
    caption: str | None = None


class Output(BaseModel):
    title: str
    summary: str
    text: str | None = None
    annotations: list[Annotation] | None = None
    images: list[Image] | None = None


class Action(BaseModel):
    label: str
    description: str
    identifier: str


class CheckRunOptions(BaseModel):
    """Fields for creating a check run."""

    name: str
    head_sha: str
    details_url: str | None = None
    external_id: str | None = None
    status: CheckRunState | None = None
    started_at: str | None = None
    conclusion: Conclusion | None = None
    completed_at: str | None = None
    output: Output | None = None
    actions: list[Action] | None = None


class CheckRunUpdateOptions(BaseModel):
    """Fields for updating a check run; every field is optional."""

    name: str | None = None
    details_url: str | None = None
    external_id: str | None = None
    status: CheckRunState | None = None
    started_at: str | None = None
    conclusion: Conclusion | None = None
    completed_at: str | None = None
    output: Output | None = None
    actions: list[Action] | None = None


class CheckSuiteApp(BaseModel):
    id: int = 0
    slug: str = ""
    name: str = ""


class CheckSuite(BaseModel):
    id: int
    head_branch: NullableString = ""
    head_sha: str
    status: str
    conclusion: NullableString = ""
    app: CheckSuiteApp = CheckSuiteApp()
    created_at: datetime
    updated_at: datetime


class CheckSuiteRef(BaseModel):
    id: int


class CheckRun(BaseModel):
    id: int
    name: str
    head_sha: str
    url: str
    check_suite: CheckSuiteRef | None = None
    details_url: str | None = None
    external_id: str | None = None
    status: CheckRunState | None = None
    started_at: str | None = None
    conclusion: Conclusion | None = None
    completed_at: str | None = None
    # "output" is left out: GitHub sends an object of nulls when there is none
    actions: list[Action] | None = None


class CheckRunListResponse(BaseModel):
    total_count: NullableCount = 0
    check_runs: list[CheckRun] = []


class CheckSuiteResponse(BaseModel):
    total_count: NullableCount = 0
    check_suites: list[CheckSuite] = []


@dataclass
class CheckSuiteListOptions(ListOptions):
    app_id: int | None = None
    check_name: str | None = None
    per_page: int | None = None


class CheckRuns:
    """Check runs of a repository."""

    def __init__(self, github: "GitHubClient", owner: str, repo: str):
        self.github = github
        self.owner = owner
        self.repo = repo

    def _path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/check-runs{more}"

    async def create(self, options: CheckRunOptions) -> CheckRun:
        """Create a check run."""
        result: CheckRun = await self.github.post_media(
            self._path(), encode_body(options), CHECKS_PREVIEW, model=CheckRun
        )
        return result

    async def update(
        self, check_run_id: int | str, options: CheckRunUpdateOptions
    ) -> CheckRun:
        """Update a check run."""
        result: CheckRun = await self.github.patch_media(
            self._path(f"/{check_run_id}"),
            encode_body(options),
            CHECKS_PREVIEW,
            model=CheckRun,
        )
        return result

    async def list_for_suite(self, suite_id: int | str) -> list[CheckRun]:
        """List the check runs of a check suite."""
        response: CheckRunListResponse = await self.github.get_media(
            f"/repos/{self.owner}/{self.repo}/check-suites/{suite_id}/check-runs",
            CHECKS_PREVIEW,
            CheckRunListResponse,
        )
        return response.check_runs
