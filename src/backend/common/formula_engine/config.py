from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from .catalog import DEFAULT_CATALOG, TypeCatalog


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class FormulaEngineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Accept submissions whose verdict is an error (the formula is still logged).
    allow_invalid_submission: bool = False
    # YAML catalog replacing the built-in variables and operators.
    catalog_path: Optional[Path] = None


def load_engine_config() -> FormulaEngineConfig:
    """
    Load engine configuration from environment variables (and a .env file).

    Reads:
      FORMULA_ALLOW_INVALID_SUBMISSION, FORMULA_CATALOG_PATH
    """
    load_dotenv()
    catalog_path = os.getenv("FORMULA_CATALOG_PATH", "").strip()
    return FormulaEngineConfig(
        allow_invalid_submission=_parse_bool("FORMULA_ALLOW_INVALID_SUBMISSION"),
        catalog_path=Path(catalog_path) if catalog_path else None,
    )


def load_catalog(config: FormulaEngineConfig) -> TypeCatalog:
    if config.catalog_path is None:
        return DEFAULT_CATALOG
    return TypeCatalog.from_yaml_file(config.catalog_path)


def _parse_bool(name: str) -> bool:
    value = os.getenv(name, "").strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {value!r}")
