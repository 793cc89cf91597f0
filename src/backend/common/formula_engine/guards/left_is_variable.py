from __future__ import annotations

from typing import Optional

from ..context import FormulaContext
from ..guard import Guard
from ..models import ErrorKind, ValidationResult
from ..registry import register_guard


@register_guard
class LEFT_IS_VARIABLE(Guard):
    guard_id = "left_is_variable"
    position = 20
    error_kind = ErrorKind.LEFT_NOT_VARIABLE

    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:
        # Literals are rejected on the left even when they would type-check.
        if ctx.catalog.is_variable(ctx.left_side):
            return None
        return self.fail("Left side must be a variable.", left_side=ctx.left_side)
