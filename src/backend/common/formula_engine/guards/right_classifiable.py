from __future__ import annotations

from typing import Optional

from ..context import FormulaContext
from ..guard import Guard
from ..models import ErrorKind, OperandType, ValidationResult
from ..registry import register_guard


@register_guard
class RIGHT_CLASSIFIABLE(Guard):
    guard_id = "right_classifiable"
    position = 30
    error_kind = ErrorKind.RIGHT_INVALID_TYPE

    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:
        if ctx.right_type != OperandType.INVALID:
            return None
        return self.fail(
            "Right side must be a variable, an integer or a string.",
            right_side=ctx.right_side,
        )
