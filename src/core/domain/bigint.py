"""
BigInt — Модель целого числа произвольной точности

Sign-magnitude представление:
- magnitude: десятичные цифры 0-9, младшая цифра первой
- negative: флаг знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются валидатором модели):
1. magnitude не пуст и содержит только цифры 0-9
2. Старшая цифра ненулевая, кроме единственного случая (0,) — ноль
3. Ноль никогда не отрицателен: magnitude == (0,) => negative is False
4. Экземпляр неизменяем (frozen=True); каждая операция создаёт новый

normalize() — единственный путь от "сырого" буфера цифр к BigInt.
"""

from enum import Enum
from types import NotImplementedType
from typing import Callable, Final, Sequence, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.errors import InvalidFormat

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (только десятичная)
BASE: Final[int] = 10

# Допустимые символы цифр (только ASCII, без unicode-цифр)
DIGITS: Final[str] = "0123456789"


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух значений"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Целое число произвольной точности.

    Immutable модель (frozen=True). Напрямую создавать не рекомендуется:
    используйте from_text / from_integer / zero / normalize.

    Операторы (+, -, *, /, //, %, сравнения, abs, унарный минус)
    делегируют именованным функциям из src.core.math.arithmetic.
    Деление (/ и //) — усечение к нулю, а не floor как у int.
    """

    magnitude: tuple[int, ...] = Field(
        ..., min_length=1, strict=True, description="Цифры модуля, младшая первой"
    )
    negative: bool = Field(False, strict=True, description="Флаг знака")

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_canonical_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Цифры в диапазоне 0-9, без ведущих нулей."""
        for digit in v:
            if not 0 <= digit < BASE:
                raise ValueError(f"digit {digit} outside 0-9")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("magnitude has most-significant zero digits")
        return v

    @model_validator(mode="after")
    def validate_unsigned_zero(self) -> "BigInt":
        """Ноль не имеет знака."""
        if self.negative and self.magnitude == (0,):
            raise ValueError("zero cannot be negative")
        return self

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.magnitude == (0,)

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        result = 0
        for digit in reversed(self.magnitude):
            result = result * BASE + digit
        return -result if self.negative else result

    def __str__(self) -> str:
        return to_text(self)

    def __repr__(self) -> str:
        return f"BigInt({to_text(self)!r})"

    def __hash__(self) -> int:
        # Согласован с int: from_text("5") == 5 => равные хеши
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.magnitude == rhs.magnitude and self.negative == rhs.negative

    def __lt__(self, other: object) -> bool:
        return self._compare(other, lambda o: o is Ordering.LESS)

    def __le__(self, other: object) -> bool:
        return self._compare(other, lambda o: o is not Ordering.GREATER)

    def __gt__(self, other: object) -> bool:
        return self._compare(other, lambda o: o is Ordering.GREATER)

    def __ge__(self, other: object) -> bool:
        return self._compare(other, lambda o: o is not Ordering.LESS)

    def _compare(
        self, other: object, predicate: Callable[[Ordering], bool]
    ) -> Union[bool, NotImplementedType]:
        from src.core.math.comparator import compare

        rhs = _coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return predicate(compare(self, rhs))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        from src.core.math.arithmetic import negate

        return negate(self)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        from src.core.math.arithmetic import absolute_value

        return absolute_value(self)

    def __add__(self, other: object) -> "BigInt":
        return self._binary("add", self, other)

    def __radd__(self, other: object) -> "BigInt":
        return self._binary("add", other, self)

    def __sub__(self, other: object) -> "BigInt":
        return self._binary("subtract", self, other)

    def __rsub__(self, other: object) -> "BigInt":
        return self._binary("subtract", other, self)

    def __mul__(self, other: object) -> "BigInt":
        return self._binary("multiply", self, other)

    def __rmul__(self, other: object) -> "BigInt":
        return self._binary("multiply", other, self)

    def __floordiv__(self, other: object) -> "BigInt":
        return self._binary("divide", self, other)

    def __rfloordiv__(self, other: object) -> "BigInt":
        return self._binary("divide", other, self)

    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other: object) -> "BigInt":
        return self._binary("modulo", self, other)

    def __rmod__(self, other: object) -> "BigInt":
        return self._binary("modulo", other, self)

    @staticmethod
    def _binary(operation: str, lhs: object, rhs: object) -> Union["BigInt", NotImplementedType]:
        from src.core.math import arithmetic

        a = _coerce(lhs)
        b = _coerce(rhs)
        if a is NotImplemented or b is NotImplemented:
            return NotImplemented
        return getattr(arithmetic, operation)(a, b)


def _coerce(value: object) -> Union[BigInt, NotImplementedType]:
    """BigInt или int → BigInt; прочие типы → NotImplemented."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return from_integer(value)
    return NotImplemented


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def trim_magnitude(magnitude: Sequence[int]) -> tuple[int, ...]:
    """Удаление старших нулей; пустой буфер => (0,)."""
    end = len(magnitude)
    while end > 1 and magnitude[end - 1] == 0:
        end -= 1
    return tuple(magnitude[:end]) or (0,)


def normalize(magnitude: Sequence[int], negative: bool = False) -> BigInt:
    """
    Канонизация сырого буфера цифр.

    Удаляет старшие нули, пока не останется ненулевая старшая цифра
    или единственная цифра 0. Для нуля сбрасывает знак.

    Args:
        magnitude: Цифры модуля, младшая первой (может быть пустым)
        negative: Желаемый знак результата

    Returns:
        Канонический BigInt

    Examples:
        >>> normalize([3, 2, 1, 0, 0])
        BigInt('123')
        >>> normalize([0, 0], negative=True)
        BigInt('0')
    """
    digits = trim_magnitude(magnitude)
    is_zero = digits == (0,)
    return BigInt(magnitude=digits, negative=bool(negative) and not is_zero)


def zero() -> BigInt:
    """Канонический ноль."""
    return BigInt(magnitude=(0,), negative=False)


def from_text(text: str) -> BigInt:
    """
    Разбор десятичной записи: опциональный '-' и одна или более цифр.

    Args:
        text: Десятичная запись (например, '-123')

    Returns:
        BigInt

    Raises:
        InvalidFormat: если после знака пусто или встречена не-цифра
        TypeError: если text не str

    Examples:
        >>> from_text("-123")
        BigInt('-123')
        >>> from_text("007")
        BigInt('7')
        >>> from_text("12a3")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidFormat: ...
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    negative = text.startswith("-")
    body = text[1:] if negative else text

    if not body:
        raise InvalidFormat(f"Invalid decimal integer {text!r}: no digits")

    for position, char in enumerate(body):
        if char not in DIGITS:
            raise InvalidFormat(
                f"Invalid decimal integer {text!r}: "
                f"unexpected character {char!r} at position {position + int(negative)}"
            )

    return normalize([DIGITS.index(char) for char in reversed(body)], negative)


def from_integer(value: int) -> BigInt:
    """
    Построение из машинного целого.

    Знак берётся из value, цифры выделяются повторным делением на 10.

    Raises:
        TypeError: если value не int (bool тоже отклоняется)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")

    remaining = abs(value)
    digits = []
    while remaining > 0:
        remaining, digit = divmod(remaining, BASE)
        digits.append(digit)

    return normalize(digits, value < 0)


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def to_text(value: BigInt) -> str:
    """Десятичная запись: '-' для отрицательных, затем цифры от старшей."""
    sign = "-" if value.negative else ""
    return sign + "".join(DIGITS[digit] for digit in reversed(value.magnitude))
