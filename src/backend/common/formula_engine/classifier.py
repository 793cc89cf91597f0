from __future__ import annotations

from typing import Optional

from .catalog import DEFAULT_CATALOG, TypeCatalog
from .models import OperandType


_DIGITS = frozenset("0123456789")
_QUOTE = '"'


def is_int_literal(raw: str) -> bool:
    # ASCII digits only; str.isdigit() also accepts superscripts and other scripts.
    return bool(raw) and all(ch in _DIGITS for ch in raw)


def is_string_literal(raw: str) -> bool:
    return len(raw) >= 2 and raw[0] == _QUOTE and raw[-1] == _QUOTE


def classify_operand(raw: Optional[str], catalog: TypeCatalog = DEFAULT_CATALOG) -> OperandType:
    """Infer the type of a raw operand. Never raises; anything unrecognised is INVALID."""
    if not raw:
        return OperandType.INVALID

    declared = catalog.variable_type(raw)
    if is_int_literal(raw) or declared == OperandType.INT:
        return OperandType.INT
    if is_string_literal(raw) or declared == OperandType.STRING:
        return OperandType.STRING
    return OperandType.INVALID
