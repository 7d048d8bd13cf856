"""JSON codec backed by pydantic type adapters."""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import to_json

from .exceptions import ResponseDecodeError

T = TypeVar("T")

ADAPTER_CACHE_SIZE = 256


@lru_cache(maxsize=ADAPTER_CACHE_SIZE)
def type_adapter(shape: Any) -> TypeAdapter[Any]:
    """Return a shared adapter for ``shape``; least recently used shapes are evicted."""
    return TypeAdapter(shape)


class JsonCodec:
    """
    Convert JSON text to typed values and back.

    Any type pydantic can validate is a valid shape: models, dataclasses,
    builtins and typed containers. Fields the shape does not declare are
    ignored, unless a model forbids extras itself.
    """

    def decode(self, text: str | None, shape: type[T]) -> T:
        """
        Deserialize JSON text into ``shape``.

        Raises:
            ResponseDecodeError: If the text is missing, not JSON, or does
                not fit the shape
        """
        if text is None:
            raise ResponseDecodeError("Empty body cannot be decoded", body=None)

        try:
            return type_adapter(shape).validate_json(text)
        except PydanticValidationError as e:
            raise ResponseDecodeError(
                f"Unable to decode JSON into {getattr(shape, '__name__', shape)}: {e}",
                body=text,
            ) from e

    def encode(self, value: Any) -> str:
        """Serialize ``value`` to JSON text."""
        return to_json(value, by_alias=True).decode("utf-8")
