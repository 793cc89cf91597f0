from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from common.formula_engine.catalog import DEFAULT_CATALOG, CatalogError, TypeCatalog  # noqa: E402
from common.formula_engine.checker import FormulaChecker  # noqa: E402
from common.formula_engine.models import Formula, ValidationResult  # noqa: E402


def _load_catalog(path: str | None) -> TypeCatalog:
    if not path:
        return DEFAULT_CATALOG
    try:
        return TypeCatalog.from_yaml_file(path)
    except (CatalogError, OSError) as exc:
        raise SystemExit(f"Cannot load catalog {path}: {exc}") from exc


def build_formula(
    catalog: TypeCatalog,
    *,
    left_side: str | None,
    operator_symbol: str | None,
    right_side: str | None,
) -> Formula:
    operator = None
    if operator_symbol:
        operator = catalog.get_operator(operator_symbol)
        if operator is None:
            symbols = ", ".join(op.symbol for op in catalog.operators)
            raise SystemExit(f"Unknown operator {operator_symbol!r}; expected one of: {symbols}")
    return Formula(left_side=left_side, operator=operator, right_side=right_side)


def render_verdict(verdict: ValidationResult, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(verdict.model_dump(mode="json"), indent=2, ensure_ascii=False)
    if verdict.ok:
        return "OK"
    return f"{verdict.kind.value}: {verdict.message}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Type-check a single `left operator right` formula.")
    parser.add_argument("--left", default=None, help="Left operand (must be a catalog variable).")
    parser.add_argument("--operator", default=None, help="Operator symbol (e.g. '≥', '=', 'is_close_match').")
    parser.add_argument(
        "--right",
        default=None,
        help='Right operand: a catalog variable, an integer, or a double-quoted string (e.g. \'"abc"\').',
    )
    parser.add_argument("--catalog", default=None, help="Optional YAML catalog file.")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format (default: text).")
    parser.add_argument("--verbose", action="store_true", help="Log guard decisions to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    catalog = _load_catalog(args.catalog)
    formula = build_formula(
        catalog,
        left_side=args.left,
        operator_symbol=args.operator,
        right_side=args.right,
    )
    verdict = FormulaChecker(catalog).check(formula)
    print(render_verdict(verdict, args.format))
    return 0 if verdict.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
