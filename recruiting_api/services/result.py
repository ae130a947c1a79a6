"""
Outcome of a service write operation.

Callers branch on `kind`; `value` keeps the plain-integer convention
(id on success, 1 for deletes, 0 on any failure). The messages are the
same texts that were pushed to the request's NotificationCollector.
"""

from dataclasses import dataclass
from enum import Enum


class ResultKind(str, Enum):
    OK = "ok"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILED = "persistence_failed"


@dataclass(frozen=True)
class ServiceResult:
    kind: ResultKind
    id: int = 0
    messages: tuple[str, ...] = ()
    cause: Exception | None = None      # set when an exception was caught

    @classmethod
    def ok(cls, id: int) -> "ServiceResult":
        return cls(ResultKind.OK, id=id)

    @classmethod
    def validation_failed(cls, messages: list[str]) -> "ServiceResult":
        return cls(ResultKind.VALIDATION_FAILED, messages=tuple(messages))

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult":
        return cls(ResultKind.NOT_FOUND, messages=(message,))

    @classmethod
    def persistence_failed(cls, message: str, cause: Exception | None = None) -> "ServiceResult":
        return cls(ResultKind.PERSISTENCE_FAILED, messages=(message,), cause=cause)

    @property
    def value(self) -> int:
        return self.id if self.kind is ResultKind.OK else 0

    def __bool__(self) -> bool:
        return self.kind is ResultKind.OK
