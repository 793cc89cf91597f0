from __future__ import annotations

import logging
from typing import Iterable, Optional

from .catalog import DEFAULT_CATALOG, TypeCatalog
from .context import FormulaContext
from .models import Formula, ValidationResult
from .registry import registry

# Import built-in guards so they self-register with the global registry.
from . import guards as _builtin_guards  # noqa: F401


logger = logging.getLogger(__name__)


class FormulaChecker:
    def __init__(self, catalog: TypeCatalog = DEFAULT_CATALOG, guards: Optional[Iterable] = None):
        self.catalog = catalog
        self._guards = list(guards) if guards is not None else registry.create_all()

    def check(self, formula: Formula) -> ValidationResult:
        ctx = FormulaContext(formula=formula, catalog=self.catalog)
        for guard in self._guards:
            verdict = guard.check(ctx)
            if verdict is not None:
                logger.debug("Formula rejected by %s: %s", guard.guard_id, verdict.message)
                return verdict
        return ValidationResult.valid()


def check_formula(formula: Formula, catalog: Optional[TypeCatalog] = None) -> ValidationResult:
    return FormulaChecker(catalog or DEFAULT_CATALOG).check(formula)
