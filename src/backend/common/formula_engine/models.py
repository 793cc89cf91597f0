from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class OperandType(str, Enum):
    INT = "int"
    STRING = "string"
    # Classifier outcome only; never a declared type.
    INVALID = "invalid"


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    LEFT_NOT_VARIABLE = "left_not_variable"
    RIGHT_INVALID_TYPE = "right_invalid_type"
    OPERATOR_LEFT_TYPE_MISMATCH = "operator_left_type_mismatch"
    OPERATOR_RIGHT_TYPE_MISMATCH = "operator_right_type_mismatch"
    OPERATOR_INCOMPATIBLE_TYPES = "operator_incompatible_types"


class TypePair(BaseModel):
    model_config = ConfigDict(frozen=True)

    left: OperandType
    right: OperandType


class Variable(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: OperandType


class Operator(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    valid_types: Tuple[TypePair, ...]

    def admits_left(self, operand_type: OperandType) -> bool:
        return any(pair.left == operand_type for pair in self.valid_types)

    def admits_right(self, operand_type: OperandType) -> bool:
        return any(pair.right == operand_type for pair in self.valid_types)

    def admits(self, left: OperandType, right: OperandType) -> bool:
        return any(pair.left == left and pair.right == right for pair in self.valid_types)


class Formula(BaseModel):
    """Snapshot of a formula draft as held by the editing collaborator.

    Empty strings are treated the same as missing values.
    """

    model_config = ConfigDict(frozen=True)

    left_side: Optional[str] = None
    operator: Optional[Operator] = None
    right_side: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.left_side) and self.operator is not None and bool(self.right_side)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    kind: Optional[ErrorKind] = None
    message: str = ""
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def error(cls, kind: ErrorKind, message: str, **details: Any) -> "ValidationResult":
        return cls(ok=False, kind=kind, message=message, details=details)
