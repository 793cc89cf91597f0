from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from .models import Operator, OperandType, TypePair, Variable


DECLARABLE_TYPES = (OperandType.INT, OperandType.STRING)


class CatalogError(ValueError):
    """Raised when catalog data is malformed."""


class TypeCatalog:
    def __init__(self, variables: Iterable[Variable], operators: Iterable[Operator]):
        self._variables: Dict[str, Variable] = {}
        for variable in variables:
            if variable.type not in DECLARABLE_TYPES:
                raise CatalogError(f"Variable {variable.name} must be declared int or string, got {variable.type.value}")
            if variable.name in self._variables:
                raise CatalogError(f"Duplicate variable registered: {variable.name}")
            self._variables[variable.name] = variable

        self._operators: Tuple[Operator, ...] = tuple(operators)
        seen: set[str] = set()
        for operator in self._operators:
            if operator.symbol in seen:
                raise CatalogError(f"Duplicate operator symbol registered: {operator.symbol}")
            seen.add(operator.symbol)
            if not operator.valid_types:
                raise CatalogError(f"Operator {operator.symbol} has no admissible type pairs")
            for pair in operator.valid_types:
                if pair.left not in DECLARABLE_TYPES or pair.right not in DECLARABLE_TYPES:
                    raise CatalogError(f"Operator {operator.symbol} cannot admit type {OperandType.INVALID.value}")

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return tuple(self._variables.values())

    @property
    def operators(self) -> Tuple[Operator, ...]:
        return self._operators

    def variables_of_type(self, operand_type: OperandType) -> Tuple[str, ...]:
        return tuple(v.name for v in self._variables.values() if v.type == operand_type)

    def variable_type(self, name: Optional[str]) -> Optional[OperandType]:
        if name is None:
            return None
        variable = self._variables.get(name)
        return variable.type if variable else None

    def is_variable(self, name: Optional[str]) -> bool:
        return self.variable_type(name) is not None

    def get_operator(self, symbol: str) -> Optional[Operator]:
        for operator in self._operators:
            if operator.symbol == symbol:
                return operator
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypeCatalog":
        """
        Build a catalog from a plain data document.

        Expected shape:
          variables:
            int: [transaction.amount, ...]
            string: [transaction.sender.last_name, ...]
          operators:
            - symbol: "="
              valid_types:
                - {left: int, right: int}
        """
        if not isinstance(data, Mapping):
            raise CatalogError("Catalog document must be a mapping")
        try:
            variables = [
                Variable(name=str(name), type=OperandType(type_name))
                for type_name, names in (data.get("variables") or {}).items()
                for name in _as_list(names, f"variables.{type_name}")
            ]
            operators = [
                Operator(
                    symbol=str(op["symbol"]),
                    valid_types=tuple(
                        TypePair(left=OperandType(p["left"]), right=OperandType(p["right"]))
                        for p in _as_list(op.get("valid_types"), f"operators.{op['symbol']}.valid_types")
                    ),
                )
                for op in _as_list(data.get("operators"), "operators")
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"Malformed catalog document: {exc}") from exc
        return cls(variables=variables, operators=operators)

    @classmethod
    def from_yaml_text(cls, text: str) -> "TypeCatalog":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CatalogError(f"Catalog document is not valid YAML: {exc}") from exc
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> "TypeCatalog":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CatalogError(f"Catalog file {path} is not UTF-8 text: {exc}") from exc
        return cls.from_yaml_text(text)


def _as_list(value: Any, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise CatalogError(f"{where} must be a list, got {type(value).__name__}")
    return list(value)


def _pairs(*pairs: Tuple[OperandType, OperandType]) -> Tuple[TypePair, ...]:
    return tuple(TypePair(left=left, right=right) for left, right in pairs)


INT_VARIABLES = (
    "transaction.amount",
    "transaction.account.balance",
    "transaction.account.max_transaction_amount_authorized",
)
STRING_VARIABLES = (
    "transaction.sender.last_name",
    "transaction.receiver.last_name",
    "transaction.account.owner.last_name",
)

_INT_INT = (OperandType.INT, OperandType.INT)
_STR_STR = (OperandType.STRING, OperandType.STRING)

DEFAULT_CATALOG = TypeCatalog(
    variables=[Variable(name=n, type=OperandType.INT) for n in INT_VARIABLES]
    + [Variable(name=n, type=OperandType.STRING) for n in STRING_VARIABLES],
    operators=[
        Operator(symbol="≥", valid_types=_pairs(_INT_INT)),
        Operator(symbol="is_close_match", valid_types=_pairs(_STR_STR)),
        Operator(symbol="=", valid_types=_pairs(_INT_INT, _STR_STR)),
        Operator(symbol="≠", valid_types=_pairs(_INT_INT, _STR_STR)),
    ],
)


def build_catalog_document(catalog: TypeCatalog = DEFAULT_CATALOG) -> Dict[str, Any]:
    variables: Dict[str, List[str]] = {
        t.value: list(catalog.variables_of_type(t)) for t in DECLARABLE_TYPES
    }
    operators = [op.model_dump(mode="json") for op in catalog.operators]
    return {"variables": variables, "operators": operators}


def _dump_json(document: dict[str, Any]) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def _dump_yaml(document: dict[str, Any]) -> str:
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the variable and operator type catalog.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument("--catalog", help="Optional YAML catalog file to load instead of the built-in one.")
    args = parser.parse_args(argv)

    catalog = DEFAULT_CATALOG
    if args.catalog:
        try:
            catalog = TypeCatalog.from_yaml_file(args.catalog)
        except (CatalogError, OSError) as exc:
            raise SystemExit(f"Cannot load catalog {args.catalog}: {exc}") from exc
    document = build_catalog_document(catalog)
    if args.format == "json":
        print(_dump_json(document))
    else:
        print(_dump_yaml(document))


if __name__ == "__main__":
    main()
