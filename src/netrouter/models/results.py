from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

from .errors import RequestFailedError

T = TypeVar("T")


@dataclass(frozen=True)
class NetworkResult:
    """Success or failure judgment derived from an HTTP status code.

    Failures carry the message returned to the caller. The raw response is
    never kept.
    """

    message: Optional[str] = None

    @classmethod
    def success(cls) -> "NetworkResult":
        return cls()

    @classmethod
    def failure(cls, message: str) -> "NetworkResult":
        return cls(message=message)

    @property
    def is_success(self) -> bool:
        return self.message is None


@dataclass(frozen=True)
class RequestResult(Generic[T]):
    """The single outcome of a router request: a decoded value or an error message.

    The result unpacks as ``(error, value)``:

        ```python
        error, item = router.request(endpoint, Item)
        if error:
            ...
        ```
    """

    error: Optional[str] = None
    value: Optional[T] = None

    @classmethod
    def ok(cls, value: T) -> "RequestResult[T]":
        return cls(value=value)

    @classmethod
    def err(cls, message: str) -> "RequestResult[Any]":
        return cls(error=message)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the decoded value.

        Raises:
            RequestFailedError: If the request produced an error message.
        """
        if self.error is not None:
            raise RequestFailedError(self.error)
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        yield self.error
        yield self.value
