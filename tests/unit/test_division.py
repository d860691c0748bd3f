"""
Тесты для Division Engine и modulo

Проверяет:
1. divmod_magnitude: частное и остаток, деление на ноль
2. divide: усечение к нулю, знак XOR
3. modulo: a - divide(a, b) * b, знак следует за делимым
4. Тождество: divide(a, b) * b + modulo(a, b) == a
"""

import pytest

from src.core.domain import DivisionByZero, ErrorKind, from_integer, from_text, zero
from src.core.math import add, divide, divmod_magnitude, modulo, multiply


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Эталон: частное с усечением к нулю и согласованный остаток."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


# =============================================================================
# БЕЗЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


class TestDivmodMagnitude:
    """Тесты для divmod_magnitude"""

    def test_basic(self) -> None:
        """456 / 123 = 3, остаток 87"""
        assert divmod_magnitude((6, 5, 4), (3, 2, 1)) == ((3,), (7, 8))

    def test_dividend_smaller_than_divisor(self) -> None:
        assert divmod_magnitude((5,), (0, 1)) == ((0,), (5,))

    def test_exact(self) -> None:
        """1000 / 8 = 125"""
        assert divmod_magnitude((0, 0, 0, 1), (8,)) == ((5, 2, 1), (0,))

    def test_inner_zero_quotient_digits(self) -> None:
        """10050 / 5 = 2010: нулевые цифры частного внутри"""
        assert divmod_magnitude((0, 5, 0, 0, 1), (5,)) == ((0, 1, 0, 2), (0,))

    def test_zero_dividend(self) -> None:
        assert divmod_magnitude((0,), (7,)) == ((0,), (0,))

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            divmod_magnitude((1,), (0,))


# =============================================================================
# ЗНАКОВОЕ ДЕЛЕНИЕ
# =============================================================================


class TestDivide:
    """Тесты для divide"""

    def test_scenario(self) -> None:
        """456 / -123 = -3"""
        assert str(divide(from_text("456"), from_text("-123"))) == "-3"

    def test_truncates_toward_zero(self) -> None:
        """-7 / 2 = -3 (не -4, как при floor)"""
        assert str(divide(from_text("-7"), from_text("2"))) == "-3"
        assert str(divide(from_text("7"), from_text("-2"))) == "-3"
        assert str(divide(from_text("-7"), from_text("-2"))) == "3"

    def test_small_negative_quotient_is_unsigned_zero(self) -> None:
        """-1 / 5 = 0 без знака"""
        result = divide(from_text("-1"), from_text("5"))
        assert result == zero()
        assert result.negative is False

    @pytest.mark.parametrize("dividend", ["0", "1", "-1", "123456789"])
    def test_division_by_zero(self, dividend: str) -> None:
        with pytest.raises(DivisionByZero) as exc_info:
            divide(from_text(dividend), from_text("0"))
        assert exc_info.value.kind is ErrorKind.DIVISION_BY_ZERO

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divide(from_text("5"), zero())

    def test_long_division(self) -> None:
        a = 123456789012345678901234567890
        b = 987654321
        assert int(divide(from_integer(a), from_integer(b))) == a // b


class TestModulo:
    """Тесты для modulo"""

    def test_scenario(self) -> None:
        """456 % -123 = 87"""
        assert str(modulo(from_text("456"), from_text("-123"))) == "87"

    def test_negative_dividend_gives_negative_remainder(self) -> None:
        """Знак остатка следует усечённому делению: -456 % 123 = -87"""
        assert str(modulo(from_text("-456"), from_text("123"))) == "-87"
        assert str(modulo(from_text("-456"), from_text("-123"))) == "-87"

    def test_exact_division_gives_zero(self) -> None:
        result = modulo(from_text("-100"), from_text("10"))
        assert result == zero()
        assert result.negative is False

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            modulo(from_text("5"), from_text("-0"))


# =============================================================================
# СВЕРКА С ЭТАЛОНОМ И ТОЖДЕСТВО ДЕЛЕНИЯ
# =============================================================================

_DIVIDENDS = [0, 1, -1, 7, -7, 87, 456, -456, 1000, -99999, 10**25 + 3, -(10**25) - 3]
_DIVISORS = [1, -1, 2, -2, 9, 10, -123, 1000, 99999, -(10**12)]


class TestDivisionReference:
    """Сверка с эталоном на int"""

    @pytest.mark.parametrize("a", _DIVIDENDS)
    @pytest.mark.parametrize("b", _DIVISORS)
    def test_matches_truncating_reference(self, a: int, b: int) -> None:
        quotient, remainder = _truncating_divmod(a, b)
        assert int(divide(from_integer(a), from_integer(b))) == quotient
        assert int(modulo(from_integer(a), from_integer(b))) == remainder

    @pytest.mark.parametrize("a", _DIVIDENDS)
    @pytest.mark.parametrize("b", _DIVISORS)
    def test_division_remainder_identity(self, a: int, b: int) -> None:
        """divide(a, b) * b + modulo(a, b) == a"""
        x = from_integer(a)
        y = from_integer(b)
        assert add(multiply(divide(x, y), y), modulo(x, y)) == x

    @pytest.mark.parametrize("a", _DIVIDENDS)
    @pytest.mark.parametrize("b", _DIVISORS)
    def test_quotient_sign_rule(self, a: int, b: int) -> None:
        """Частное отрицательно тогда и только тогда, когда ровно один операнд отрицателен (и оно не ноль)"""
        result = divide(from_integer(a), from_integer(b))
        if result.is_zero:
            assert result.negative is False
        else:
            assert result.negative == ((a < 0) != (b < 0))
