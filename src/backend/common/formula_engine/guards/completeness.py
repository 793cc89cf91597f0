from __future__ import annotations

from typing import Optional

from ..context import FormulaContext
from ..guard import Guard
from ..models import ErrorKind, ValidationResult
from ..registry import register_guard


@register_guard
class COMPLETENESS(Guard):
    guard_id = "completeness"
    position = 10
    error_kind = ErrorKind.MISSING_FIELD

    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:
        if ctx.formula.is_complete():
            return None
        missing = [
            name
            for name, value in (
                ("left_side", ctx.formula.left_side),
                ("operator", ctx.formula.operator),
                ("right_side", ctx.formula.right_side),
            )
            if not value
        ]
        return self.fail("All fields are required.", missing=missing)
