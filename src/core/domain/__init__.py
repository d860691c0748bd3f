"""
Domain models and value objects.

Contains the BigInt value type, its constructors and serializer, and the
error taxonomy.
"""

from src.core.domain.bigint import (
    BASE,
    DIGITS,
    BigInt,
    Ordering,
    from_integer,
    from_text,
    normalize,
    to_text,
    trim_magnitude,
    zero,
)
from src.core.domain.errors import (
    BigIntError,
    DivisionByZero,
    ErrorKind,
    InvalidFormat,
    NegativeResult,
)

__all__ = [
    # BigInt — Constants
    "BASE",
    "DIGITS",
    # BigInt — Types
    "BigInt",
    "Ordering",
    # BigInt — Constructors
    "from_integer",
    "from_text",
    "normalize",
    "trim_magnitude",
    "zero",
    # BigInt — Serializer
    "to_text",
    # Errors
    "BigIntError",
    "DivisionByZero",
    "ErrorKind",
    "InvalidFormat",
    "NegativeResult",
]
