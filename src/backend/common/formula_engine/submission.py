from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel

from .checker import FormulaChecker
from .config import FormulaEngineConfig
from .models import Formula, ValidationResult


logger = logging.getLogger(__name__)


class SubmissionReceipt(BaseModel):
    submission_id: str
    submitted_at: datetime
    formula: Formula
    verdict: ValidationResult


class SubmissionRejected(Exception):
    def __init__(self, verdict: ValidationResult):
        super().__init__(verdict.message)
        self.verdict = verdict


class FormulaSubmitter:
    """Accepts finished formulas and logs them.

    By default only formulas with an Ok verdict are accepted. With
    `allow_invalid_submission` every draft is logged and accepted, and the
    verdict is returned alongside it.
    """

    def __init__(self, checker: Optional[FormulaChecker] = None, config: Optional[FormulaEngineConfig] = None):
        self.checker = checker or FormulaChecker()
        self.config = config or FormulaEngineConfig()

    def submit(self, formula: Formula) -> SubmissionReceipt:
        verdict = self.checker.check(formula)
        if not verdict.ok and not self.config.allow_invalid_submission:
            logger.warning("Formula submission blocked (%s): %s", verdict.kind.value, verdict.message)
            raise SubmissionRejected(verdict)

        receipt = SubmissionReceipt(
            submission_id=str(uuid.uuid4()),
            submitted_at=datetime.now(timezone.utc),
            formula=formula,
            verdict=verdict,
        )
        logger.info(
            "Formula submitted %s: %s %s %s (ok=%s)",
            receipt.submission_id,
            formula.left_side,
            formula.operator.symbol if formula.operator else None,
            formula.right_side,
            verdict.ok,
        )
        return receipt
