from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar, Union

from autoclose.errors import get_suppressed


T = TypeVar("T")


@dataclass
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass
class Failure:
    error: BaseException
    suppressed: List[BaseException] = field(default_factory=list)

    @classmethod
    def create(cls, error: BaseException) -> Failure:
        return cls(error=error, suppressed=get_suppressed(error))

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Outcome = Union[Success[T], Failure]
