"""
Unit tests for client configuration.

Why: Configuration decides where every request goes and how long it may take;
     invalid values must fail at construction, not at the first request.

What: Tests defaults, validation, and environment variable substitution.

How: Builds GitHubClientConfig with monkeypatched environment variables.
"""

import pytest
from pydantic import ValidationError

from src.hubcaps.config import GitHubClientConfig


class TestGitHubClientConfig:
    """Test GitHubClientConfig."""

    def test_defaults(self) -> None:
        config = GitHubClientConfig()
        assert config.base_url == "https://api.github.com"
        assert config.timeout == 30
        assert config.media_product == "github"
        assert config.api_version == "v3"
        assert config.user_agent

    def test_trailing_slash_stripped(self) -> None:
        config = GitHubClientConfig(base_url="https://github.example.com/api/v3/")
        assert config.base_url == "https://github.example.com/api/v3"

    @pytest.mark.parametrize("base_url", ["api.github.com", "ftp://example.com", "https://"])
    def test_invalid_base_url(self, base_url: str) -> None:
        with pytest.raises(ValidationError):
            GitHubClientConfig(base_url=base_url)

    @pytest.mark.parametrize("timeout", [0, -1, 601])
    def test_invalid_timeout(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            GitHubClientConfig(timeout=timeout)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GitHubClientConfig(max_retries=3)  # type: ignore[call-arg]

    def test_env_var_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """
        Why: Enterprise deployments point the client at another host through env
        What: Tests ${VAR} substitution in string values
        How: Sets an env var and references it from base_url
        """
        monkeypatch.setenv("GITHUB_API_URL", "https://github.example.com/api/v3")

        config = GitHubClientConfig(base_url="${GITHUB_API_URL}")

        assert config.base_url == "https://github.example.com/api/v3"

    def test_env_var_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GITHUB_API_URL", raising=False)

        config = GitHubClientConfig(base_url="${GITHUB_API_URL:https://api.github.com}")

        assert config.base_url == "https://api.github.com"

    def test_missing_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GITHUB_API_URL", raising=False)

        with pytest.raises(ValidationError, match="GITHUB_API_URL"):
            GitHubClientConfig(base_url="${GITHUB_API_URL}")
