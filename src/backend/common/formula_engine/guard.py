from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .context import FormulaContext
from .models import ErrorKind, ValidationResult


class Guard(ABC):
    """One ordered check of the formula checker.

    `check` returns None when the formula satisfies the guard, otherwise the
    error verdict to report.
    """

    guard_id: str
    position: int
    error_kind: ErrorKind

    def __init__(self):
        if not getattr(self, "guard_id", None):
            raise ValueError("Guard must define guard_id")

    @abstractmethod
    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:  # pragma: no cover
        raise NotImplementedError

    def fail(self, message: str, **details) -> ValidationResult:
        return ValidationResult.error(self.error_kind, message, **details)
