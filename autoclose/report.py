from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel

from autoclose.outcome import Outcome


class ErrorReport(BaseModel):
    type: str
    message: str

    @classmethod
    def create(cls, error: BaseException) -> ErrorReport:
        return cls(type=type(error).__name__, message=str(error))


class ScopeReport(BaseModel):
    ok: bool
    value: Optional[Any] = None
    error: Optional[ErrorReport] = None
    suppressed: List[ErrorReport] = []
    released: List[str] = []

    @classmethod
    def create(cls, outcome: Outcome, released: Optional[List[str]] = None) -> ScopeReport:
        if outcome.ok:
            return cls(ok=True, value=outcome.value, released=released or [])
        return cls(
            ok=False,
            error=ErrorReport.create(outcome.error),
            suppressed=[ErrorReport.create(e) for e in outcome.suppressed],
            released=released or []
        )
