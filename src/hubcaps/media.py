"""Media type negotiation for stable and preview representations."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class MediaType:
    """Representation requested through the ``Accept`` header.

    ``MediaType.JSON`` selects the stable representation. A preview media
    type also switches the named preview feature on for the endpoint, e.g.
    ``MediaType.preview("antiope")`` for the checks API.
    """

    preview_name: str | None = None

    JSON: ClassVar["MediaType"]

    @classmethod
    def preview(cls, name: str) -> "MediaType":
        if not name:
            raise ValueError("Preview name is required")
        return cls(preview_name=name)

    @property
    def is_preview(self) -> bool:
        return self.preview_name is not None

    def accept(self, product: str = "github", version: str = "v3") -> str:
        """Resolve the ``Accept`` header value.

        Args:
            product: Vendor product name
            version: Stable API version

        Returns:
            ``application/vnd.<product>.<version>+json`` for JSON, or
            ``application/vnd.<product>.<name>-preview+json`` for a preview
        """
        if self.preview_name is None:
            return f"application/vnd.{product}.{version}+json"
        return f"application/vnd.{product}.{self.preview_name}-preview+json"

    def __str__(self) -> str:
        return self.accept()


MediaType.JSON = MediaType()
