import logging

import pytest

from common.formula_engine.config import FormulaEngineConfig
from common.formula_engine.models import ErrorKind
from common.formula_engine.submission import FormulaSubmitter, SubmissionRejected


def test_valid_formula_is_submitted_and_logged(make_formula, caplog):
    formula = make_formula("transaction.amount", "≥", "25")
    with caplog.at_level(logging.INFO, logger="common.formula_engine.submission"):
        receipt = FormulaSubmitter().submit(formula)
    assert receipt.verdict.ok
    assert receipt.formula == formula
    assert receipt.submission_id
    assert "transaction.amount ≥ 25" in caplog.text


def test_invalid_formula_is_blocked_by_default(make_formula, caplog):
    formula = make_formula("transaction.amount", "≥", '"abc"')
    with caplog.at_level(logging.WARNING, logger="common.formula_engine.submission"):
        with pytest.raises(SubmissionRejected) as exc_info:
            FormulaSubmitter().submit(formula)
    assert exc_info.value.verdict.kind == ErrorKind.OPERATOR_RIGHT_TYPE_MISMATCH
    assert "blocked" in caplog.text


def test_permissive_mode_accepts_invalid_formula(make_formula, caplog):
    submitter = FormulaSubmitter(config=FormulaEngineConfig(allow_invalid_submission=True))
    with caplog.at_level(logging.INFO, logger="common.formula_engine.submission"):
        receipt = submitter.submit(make_formula("transaction.amount", "≥", '"abc"'))
    assert "transaction.amount ≥ \"abc\"" in caplog.text
    assert "ok=False" in caplog.text
    assert "blocked" not in caplog.text
    assert receipt.verdict.kind == ErrorKind.OPERATOR_RIGHT_TYPE_MISMATCH

    receipt = submitter.submit(make_formula(None, None, None))
    assert not receipt.verdict.ok
    assert receipt.verdict.kind == ErrorKind.MISSING_FIELD
