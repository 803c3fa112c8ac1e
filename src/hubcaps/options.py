"""Query-string options shared by list endpoints."""

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import urlencode


class SortDirection(str, Enum):
    """Sort direction for list endpoints."""

    ASC = "asc"
    DESC = "desc"


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


@dataclass
class ListOptions:
    """Base for list options: every field left as None is omitted."""

    def serialize(self) -> str | None:
        """Serialize options as a query string.

        Returns:
            URL-encoded query string, or None when no option is set
        """
        params = [
            (f.metadata.get("param", f.name), _query_value(getattr(self, f.name)))
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]
        if not params:
            return None
        return urlencode(params)


def with_query(path: str, options: ListOptions | None) -> str:
    """Append serialized options to a path."""
    query = options.serialize() if options else None
    return f"{path}?{query}" if query else path
