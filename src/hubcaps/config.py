"""Client configuration.

String values may reference environment variables as ``${VAR_NAME}`` or
``${VAR_NAME:default}``; they are substituted before validation, so
``GitHubClientConfig(base_url="${GITHUB_API_URL:https://api.github.com}")``
points the client at an Enterprise server when the variable is set.
"""

import os
import re
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class GitHubClientConfig(BaseModel):
    """Configuration for GitHub client."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_url: str = Field(
        default="https://api.github.com", description="API root URL"
    )
    timeout: float = Field(
        default=30, gt=0, le=600, description="Total request timeout in seconds"
    )
    user_agent: str = Field(
        default="hubcaps-python/0.1", description="User-Agent sent with every request"
    )
    media_product: str = Field(
        default="github", description="Vendor product in Accept media types"
    )
    api_version: str = Field(
        default="v3", description="Stable API version in Accept media types"
    )

    @model_validator(mode="before")
    @classmethod
    def substitute_env_vars(cls, values: Any) -> Any:
        """Substitute environment variables in string values.

        Raises:
            ValueError: If a required environment variable is missing
        """
        if not isinstance(values, dict):
            return values

        def replacer(match: re.Match[str]) -> str:
            var_name, default_value = match.group(1), match.group(2)
            env_value = os.getenv(var_name)
            if env_value is not None:
                return env_value
            if default_value is not None:
                return default_value
            raise ValueError(f"Required environment variable '{var_name}' not found")

        return {
            key: _ENV_PATTERN.sub(replacer, value) if isinstance(value, str) else value
            for key, value in values.items()
        }

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid base URL: {v!r}")
        return v.rstrip("/")
