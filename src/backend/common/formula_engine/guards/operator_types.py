from __future__ import annotations

from typing import Optional

from ..context import FormulaContext
from ..guard import Guard
from ..models import ErrorKind, ValidationResult
from ..registry import register_guard


@register_guard
class OPERATOR_LEFT_TYPE(Guard):
    guard_id = "operator_left_type"
    position = 40
    error_kind = ErrorKind.OPERATOR_LEFT_TYPE_MISMATCH

    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:
        operator, left_type = ctx.operator, ctx.left_type
        if operator.admits_left(left_type):
            return None
        return self.fail(
            f"Invalid type for operator {operator.symbol}: can’t be applied to value "
            f"{ctx.left_side} of type {left_type.value} on the left side.",
            operator=operator.symbol,
            left_side=ctx.left_side,
            left_type=left_type.value,
        )


@register_guard
class OPERATOR_RIGHT_TYPE(Guard):
    guard_id = "operator_right_type"
    position = 50
    error_kind = ErrorKind.OPERATOR_RIGHT_TYPE_MISMATCH

    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:
        operator, right_type = ctx.operator, ctx.right_type
        if operator.admits_right(right_type):
            return None
        return self.fail(
            f"Invalid type for operator {operator.symbol}: can’t be applied to value "
            f"{ctx.right_side} of type {right_type.value} on the right side.",
            operator=operator.symbol,
            right_side=ctx.right_side,
            right_type=right_type.value,
        )


@register_guard
class OPERATOR_TYPE_PAIR(Guard):
    """Both operand types must match one admissible pair jointly.

    An operator admitting (int, int) and (string, string) passes the two
    one-sided guards for int on the left and string on the right, so the
    combination still has to be checked here.
    """

    guard_id = "operator_type_pair"
    position = 60
    error_kind = ErrorKind.OPERATOR_INCOMPATIBLE_TYPES

    def check(self, ctx: FormulaContext) -> Optional[ValidationResult]:
        operator, left_type, right_type = ctx.operator, ctx.left_type, ctx.right_type
        if operator.admits(left_type, right_type):
            return None
        return self.fail(
            f"Incompatible types for operator {operator.symbol}: can't be applied to a value "
            f"{ctx.left_side} of type {left_type.value} on the left side and a value "
            f"{ctx.right_side} of type {right_type.value} on the right side.",
            operator=operator.symbol,
            left_side=ctx.left_side,
            left_type=left_type.value,
            right_side=ctx.right_side,
            right_type=right_type.value,
        )
