"""Type checker for single binary formulas (`left operator right`).

This package contains only domain logic:
- A closed catalog of typed variables and operators.
- An operand classifier and an ordered set of guards producing one verdict.
- No HTTP or UI concerns live here.
"""

from .catalog import DEFAULT_CATALOG, CatalogError, TypeCatalog
from .checker import FormulaChecker, check_formula
from .classifier import classify_operand
from .context import FormulaContext
from .models import (
    ErrorKind,
    Formula,
    Operator,
    OperandType,
    TypePair,
    ValidationResult,
    Variable,
)

# Import built-in guards so they self-register with the global registry.
from . import guards as _builtin_guards  # noqa: F401
