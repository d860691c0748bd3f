"""
Multiplicative Engine — Умножение модулей столбиком

Сложность O(len(a) * len(b)). Быстрые алгоритмы (Karatsuba, FFT)
сознательно не используются.
"""

from typing import Sequence

from src.core.domain.bigint import BASE, BigInt, normalize, trim_magnitude


def multiply_magnitude(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Умножение модулей: для каждой пары (i, j) a[i]*b[j] + перенос
    накапливается в позиции i+j буфера длины len(a)+len(b).

    Examples:
        >>> multiply_magnitude([3, 2, 1], [6, 5, 4])
        (8, 8, 0, 6, 5)
    """
    result = [0] * (len(a) + len(b))

    for i, a_digit in enumerate(a):
        if a_digit == 0:
            continue
        carry = 0
        for j, b_digit in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + a_digit * b_digit + carry, BASE)
        # Остаток переноса распространяется, пока не исчерпается
        position = i + len(b)
        while carry:
            carry, result[position] = divmod(result[position] + carry, BASE)
            position += 1

    return trim_magnitude(result)


def signed_product(a: BigInt, b: BigInt) -> BigInt:
    """Произведение со знаком XOR; ноль нормализуется в неотрицательный."""
    return normalize(multiply_magnitude(a.magnitude, b.magnitude), a.negative != b.negative)
