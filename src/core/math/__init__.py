"""
Core math modules

Движки длинной арифметики (столбиком) и знаковый фасад над ними.
"""

# Comparator
from src.core.math.comparator import (
    compare,
    compare_magnitude,
    is_equal,
    is_greater_or_equal,
    is_less,
)

# Additive Engine
from src.core.math.additive import (
    add_magnitude,
    signed_sum,
    subtract_magnitude,
)

# Multiplicative Engine
from src.core.math.multiplicative import (
    multiply_magnitude,
    signed_product,
)

# Division Engine
from src.core.math.division import (
    divmod_magnitude,
    signed_quotient,
)

# Signed operations
from src.core.math.arithmetic import (
    absolute_value,
    add,
    divide,
    modulo,
    multiply,
    negate,
    subtract,
)

# Explicit results
from src.core.math.operation_result import (
    Operation,
    OperationResult,
    evaluate,
    parse,
)

__all__ = [
    # Comparator
    "compare",
    "compare_magnitude",
    "is_equal",
    "is_greater_or_equal",
    "is_less",
    # Additive Engine
    "add_magnitude",
    "signed_sum",
    "subtract_magnitude",
    # Multiplicative Engine
    "multiply_magnitude",
    "signed_product",
    # Division Engine
    "divmod_magnitude",
    "signed_quotient",
    # Signed operations
    "absolute_value",
    "add",
    "divide",
    "modulo",
    "multiply",
    "negate",
    "subtract",
    # Explicit results
    "Operation",
    "OperationResult",
    "evaluate",
    "parse",
]
