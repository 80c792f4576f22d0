"""
Decoders turning a raw response body into the caller's requested shape.

A shape is bound at the call site: a pydantic model, a dataclass, a
TypedDict or a plain type such as ``dict[str, int]``. Strict validation is
used so that ``{"id": "1"}`` does not silently become ``{"id": 1}``.
"""

import json
from functools import lru_cache
from typing import Any, Generic, Protocol, TypeVar, get_origin, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodingError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Decoder(Protocol[T_co]):
    """Anything that can decode a response body."""

    def decode(self, body: bytes) -> T_co:
        """Decode body or raise DecodingError"""
        ...


class ModelDecoder(Generic[T]):
    """Validate a JSON body against a type with pydantic"""

    def __init__(self, shape: type[T]):
        self.shape = shape
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)

    def decode(self, body: bytes) -> T:
        try:
            return self._adapter.validate_json(body, strict=True)
        except ValidationError as e:
            raise DecodingError(f"Body does not match {self.shape!r}: {e.error_count()} error(s)") from e

    def __repr__(self) -> str:
        return f"ModelDecoder({self.shape!r})"


class JsonDecoder:
    """Parse a JSON body without validating its structure"""

    def decode(self, body: bytes) -> Any:
        try:
            return json.loads(body)
        except ValueError as e:
            raise DecodingError(f"Body is not valid JSON: {e}") from e


@lru_cache(maxsize=128)
def _cached_model_decoder(shape: Any) -> ModelDecoder:
    return ModelDecoder(shape)


def decoder_for(shape: Any) -> Decoder:
    """
    Resolve the decoder for a requested shape.

    Args:
        shape: A decoder instance, Any/None for raw JSON, or a type to validate against

    Returns:
        Decoder to apply to the response body
    """
    if shape is None or shape is Any:
        return JsonDecoder()
    # Generic aliases forward attribute lookups to their origin type
    is_alias = get_origin(shape) is not None
    if not isinstance(shape, type) and not is_alias and isinstance(shape, Decoder):
        return shape

    try:
        return _cached_model_decoder(shape)
    except TypeError:
        # Unhashable shape (e.g. an Annotated with a dict in its metadata)
        return ModelDecoder(shape)
