"""Two-variant request outcome delivered to completion callbacks."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .exceptions import NetworkError, NetworkErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Decoded response value"""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Classified request failure"""

    kind: NetworkErrorKind

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        """Raise NetworkError for this failure's kind"""
        raise NetworkError(self.kind)


Outcome = Union[Success[T], Failure]
