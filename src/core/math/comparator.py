"""
Comparator — Полный порядок на BigInt

Порядок проверок в compare():
1. Знак: неотрицательное значение больше отрицательного
2. Длина модуля: длиннее => больше по модулю
3. Цифры от старшей к младшей до первого различия
Для двух отрицательных результат сравнения модулей инвертируется.

Сравнение опирается на каноничность модулей (нет ведущих нулей),
поэтому сравнение длин корректно.
"""

from typing import Sequence

from src.core.domain.bigint import BigInt, Ordering


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Сравнение беззнаковых модулей (цифры младшая первой, без ведущих нулей).

    Examples:
        >>> compare_magnitude([5], [0, 0, 1])
        <Ordering.LESS: -1>
        >>> compare_magnitude([3, 2, 1], [3, 2, 1])
        <Ordering.EQUAL: 0>
    """
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    for index in range(len(a) - 1, -1, -1):
        if a[index] != b[index]:
            return Ordering.GREATER if a[index] > b[index] else Ordering.LESS

    return Ordering.EQUAL


def compare(a: BigInt, b: BigInt) -> Ordering:
    """
    Полный порядок на знаковых значениях.

    Examples:
        >>> compare(from_text("-123"), from_text("-456"))  # doctest: +SKIP
        <Ordering.GREATER: 1>
    """
    if a.negative != b.negative:
        return Ordering.LESS if a.negative else Ordering.GREATER

    result = compare_magnitude(a.magnitude, b.magnitude)
    if a.negative:
        return Ordering(-result.value)
    return result


def is_less(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) is Ordering.LESS


def is_equal(a: BigInt, b: BigInt) -> bool:
    # Канонические значения равны тогда и только тогда, когда равны поля
    return a.negative == b.negative and a.magnitude == b.magnitude


def is_greater_or_equal(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) is not Ordering.LESS
