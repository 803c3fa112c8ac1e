"""
Unit tests for body serialization.

Why: Request bodies must omit unset option fields, and malformed success
     bodies must surface as serialization errors rather than crashes.

What: Tests encode_body, decode_payload and null normalization.

How: Encodes and decodes small pydantic models and plain values.
"""

from datetime import datetime
from typing import Annotated

import pytest
from pydantic import BaseModel

from src.hubcaps.exceptions import GitHubSerializationError
from src.hubcaps.serialization import (
    NullableCount,
    NullableString,
    decode_payload,
    encode_body,
    null_as,
)


class Options(BaseModel):
    title: str = ""
    labels: list[str] = []
    milestone: int | None = None


class Counted(BaseModel):
    total: NullableCount = 0
    branch: NullableString = ""
    tags: Annotated[list[str], null_as(list)] = []


class TestEncodeBody:
    """Test request body encoding."""

    def test_model_omits_defaults(self) -> None:
        assert encode_body(Options(title="Bug")) == b'{"title":"Bug"}'

    def test_plain_values(self) -> None:
        assert encode_body(["bug", "ui"]) == b'["bug", "ui"]'
        assert encode_body({"assignees": ["octocat"]}) == b'{"assignees": ["octocat"]}'

    def test_unserializable(self) -> None:
        with pytest.raises(GitHubSerializationError, match="Failed to serialize"):
            encode_body({"when": datetime(2024, 1, 1)})


class TestDecodePayload:
    """Test response body decoding."""

    def test_raw_json(self) -> None:
        assert decode_payload(b'{"a": 1}') == {"a": 1}

    def test_model(self) -> None:
        assert decode_payload(b'{"title": "x"}', Options) == Options(title="x")

    def test_list_of_models(self) -> None:
        assert decode_payload(b'[{"title": "x"}]', list[Options]) == [Options(title="x")]

    @pytest.mark.parametrize(
        "body,model",
        [(b"not json", None), (b"{", Options), (b'{"title": 5}', Options), (b"{}", list[Options])],
    )
    def test_mismatch(self, body: bytes, model: object) -> None:
        with pytest.raises(GitHubSerializationError, match="Unexpected response body"):
            decode_payload(body, model)

    @pytest.mark.parametrize("model", [None, list])
    def test_deeply_nested_body(self, model: object) -> None:
        """
        Why: A pathological body must surface as a serialization error, not crash
        What: Tests that nesting deeper than the decoder allows is classified
        How: Decodes a body of 100000 nested arrays with and without a model
        """
        body = b"[" * 100_000 + b"]" * 100_000

        with pytest.raises(GitHubSerializationError):
            decode_payload(body, model)

    def test_nulls_normalized(self) -> None:
        """
        Why: GitHub sends null where a count, string or list is documented
        What: Tests that explicit nulls become the documented empty values
        How: Decodes a body of nulls into a model using null_as fields
        """
        counted = decode_payload(
            b'{"total": null, "branch": null, "tags": null}', Counted
        )

        assert counted == Counted(total=0, branch="", tags=[])

    def test_null_still_rejects_wrong_type(self) -> None:
        with pytest.raises(GitHubSerializationError):
            decode_payload(b'{"total": "many"}', Counted)
