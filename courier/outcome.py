"""Tagged results of a request execution."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .exceptions import CourierError, HttpStructuredError

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The server answered 200 and the body decoded into the result type."""

    value: T
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class StructuredFailure(Generic[E]):
    """The server answered with an error body that decoded into the failure type."""

    payload: E
    status_code: int
    body: str | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise HttpStructuredError(self.payload, self.status_code, self.body)


@dataclass(frozen=True)
class TransportFailure:
    """The request failed without a structured error payload."""

    error: CourierError

    @property
    def ok(self) -> bool:
        return False

    @property
    def status_code(self) -> int | None:
        return self.error.status_code

    @property
    def body(self) -> str | None:
        return self.error.body

    def unwrap(self) -> Any:
        raise self.error


Outcome = Union[Success[T], StructuredFailure[Any], TransportFailure]
