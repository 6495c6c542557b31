from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


class ResponseDecoder(Protocol):
    """Decodes response bytes into the type requested by the caller."""

    def decode(self, data: bytes, returning: type[T]) -> T:
        """Decode ``data``.

        Raises:
            ValueError: If the data cannot be decoded into ``returning``.
                ``pydantic.ValidationError`` is a subclass.
        """
        ...


class JsonResponseDecoder:
    """Decodes JSON bodies with pydantic.

    Any type pydantic can validate works as a target: models, dataclasses,
    TypedDicts, builtin containers and their combinations.
    """

    def decode(self, data: bytes, returning: type[T]) -> T:
        return TypeAdapter(returning).validate_json(data)

    def encode(self, value: Any, returning: type[Any]) -> bytes:
        return TypeAdapter(returning).dump_json(value)
