import os
import sys


BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from common.formula_engine.catalog import DEFAULT_CATALOG, TypeCatalog
from common.formula_engine.models import Formula


@pytest.fixture
def catalog() -> TypeCatalog:
    return DEFAULT_CATALOG


@pytest.fixture
def make_formula(catalog):
    def _make(left_side=None, operator=None, right_side=None) -> Formula:
        op = catalog.get_operator(operator) if operator else None
        if operator and op is None:
            raise AssertionError(f"fixture catalog has no operator {operator!r}")
        return Formula(left_side=left_side, operator=op, right_side=right_side)

    return _make


@pytest.fixture
def catalog_yaml() -> str:
    return """
variables:
  int: [order.quantity]
  string: [order.customer.name, order.customer.city]
operators:
  - symbol: "<"
    valid_types:
      - {left: int, right: int}
  - symbol: "same_as"
    valid_types:
      - {left: string, right: string}
      - {left: int, right: int}
"""
