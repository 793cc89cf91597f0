from .completeness import COMPLETENESS
from .left_is_variable import LEFT_IS_VARIABLE
from .right_classifiable import RIGHT_CLASSIFIABLE
from .operator_types import OPERATOR_LEFT_TYPE, OPERATOR_RIGHT_TYPE, OPERATOR_TYPE_PAIR

__all__ = [
    "COMPLETENESS",
    "LEFT_IS_VARIABLE",
    "RIGHT_CLASSIFIABLE",
    "OPERATOR_LEFT_TYPE",
    "OPERATOR_RIGHT_TYPE",
    "OPERATOR_TYPE_PAIR",
]
