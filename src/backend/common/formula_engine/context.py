from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .catalog import DEFAULT_CATALOG, TypeCatalog
from .classifier import classify_operand
from .models import Formula, Operator, OperandType


@dataclass(frozen=True)
class FormulaContext:
    formula: Formula
    catalog: TypeCatalog = DEFAULT_CATALOG

    @property
    def left_side(self) -> str:
        return self.formula.left_side or ""

    @property
    def right_side(self) -> str:
        return self.formula.right_side or ""

    @property
    def operator(self) -> Optional[Operator]:
        return self.formula.operator

    @property
    def left_type(self) -> OperandType:
        # The left operand is always a declared variable once it has passed the variable guard.
        return self.catalog.variable_type(self.formula.left_side) or OperandType.INVALID

    @property
    def right_type(self) -> OperandType:
        return classify_operand(self.formula.right_side, self.catalog)
