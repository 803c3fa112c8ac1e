"""JSON encoding of request bodies and validation of response bodies."""

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .exceptions import GitHubSerializationError


def encode_body(value: Any) -> bytes:
    """Serialize a request body.

    Pydantic models are dumped without fields left at their defaults and with
    field aliases; anything else goes through ``json.dumps``.

    Args:
        value: Option model or JSON-compatible value

    Returns:
        UTF-8 encoded JSON

    Raises:
        GitHubSerializationError: If the value cannot be serialized
    """
    try:
        if isinstance(value, BaseModel):
            return value.model_dump_json(exclude_defaults=True, by_alias=True).encode()
        return json.dumps(value).encode()
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise GitHubSerializationError(f"Failed to serialize request body: {e}") from e


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def decode_payload(body: bytes, model: Any = None) -> Any:
    """Deserialize a success body into ``model``.

    Args:
        body: Raw response body
        model: Expected type; None returns the decoded JSON unchanged

    Returns:
        The validated value

    Raises:
        GitHubSerializationError: If the body is not JSON or not the expected shape
    """
    try:
        if model is None:
            return json.loads(body)
        return _adapter(model).validate_json(body)
    except (ValueError, ValidationError, RecursionError) as e:
        raise GitHubSerializationError(f"Unexpected response body: {e}") from e


def null_as(default: Any) -> BeforeValidator:
    """Validator replacing an explicit JSON ``null`` with ``default``.

    ``default`` may be a zero-argument callable, called once per null value.
    """

    def replace_null(value: Any) -> Any:
        if value is None:
            return default() if callable(default) else default
        return value

    return BeforeValidator(replace_null)


NullableCount = Annotated[int, null_as(0)]
NullableString = Annotated[str, null_as("")]
