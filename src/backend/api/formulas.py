from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from common.formula_engine.catalog import CatalogError, TypeCatalog, build_catalog_document
from common.formula_engine.checker import FormulaChecker
from common.formula_engine.config import FormulaEngineConfig, load_catalog, load_engine_config
from common.formula_engine.models import Formula, ValidationResult
from common.formula_engine.submission import FormulaSubmitter, SubmissionReceipt, SubmissionRejected


router = APIRouter(prefix="/formulas", tags=["formulas"])


class FormulaDraft(BaseModel):
    left_side: Optional[str] = None
    operator: Optional[str] = None
    right_side: Optional[str] = None


@lru_cache(maxsize=1)
def get_engine_config() -> FormulaEngineConfig:
    return load_engine_config()


@lru_cache(maxsize=8)
def _loaded_catalog(config: FormulaEngineConfig) -> TypeCatalog:
    # Loaded once per configuration; later edits to the file are not picked up.
    return load_catalog(config)


def get_catalog(config: FormulaEngineConfig = Depends(get_engine_config)) -> TypeCatalog:
    try:
        return _loaded_catalog(config)
    except (CatalogError, OSError) as exc:
        raise HTTPException(status_code=500, detail=f"Formula catalog unavailable: {exc}") from exc


def _to_formula(draft: FormulaDraft, catalog: TypeCatalog) -> Formula:
    operator = None
    if draft.operator:
        operator = catalog.get_operator(draft.operator)
        if operator is None:
            raise HTTPException(status_code=422, detail=f"Unknown operator: {draft.operator}")
    return Formula(left_side=draft.left_side, operator=operator, right_side=draft.right_side)


@router.get("/catalog")
def formula_catalog(catalog: TypeCatalog = Depends(get_catalog)) -> dict[str, Any]:
    return build_catalog_document(catalog)


@router.post("/validate", response_model=ValidationResult)
def validate_formula(draft: FormulaDraft, catalog: TypeCatalog = Depends(get_catalog)):
    return FormulaChecker(catalog).check(_to_formula(draft, catalog))


@router.post("/submit", response_model=SubmissionReceipt)
def submit_formula(
    draft: FormulaDraft,
    catalog: TypeCatalog = Depends(get_catalog),
    config: FormulaEngineConfig = Depends(get_engine_config),
):
    submitter = FormulaSubmitter(FormulaChecker(catalog), config)
    try:
        return submitter.submit(_to_formula(draft, catalog))
    except SubmissionRejected as exc:
        raise HTTPException(status_code=422, detail=exc.verdict.model_dump(mode="json")) from exc
