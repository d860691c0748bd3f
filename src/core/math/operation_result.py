"""
OperationResult — Явный результат операции (значение или вид ошибки)

Обёртка над исключениями движков для вызывающего кода, которому нужен
результат без раскрутки стека (например, демонстрационный драйвер):
- parse(text): from_text с перехватом InvalidFormat
- evaluate(operation, a, b): бинарная операция с перехватом
  InvalidFormat (операнды-строки) и DivisionByZero

NegativeResult НЕ перехватывается: это дефект, а не результат.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.core.domain.bigint import BigInt, from_text, to_text
from src.core.domain.errors import BigIntError, DivisionByZero, ErrorKind, InvalidFormat
from src.core.math import arithmetic


class Operation(str, Enum):
    """Операции, доступные через evaluate/parse"""

    PARSE = "parse"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"


_BINARY_OPERATIONS = {
    Operation.ADD: arithmetic.add,
    Operation.SUBTRACT: arithmetic.subtract,
    Operation.MULTIPLY: arithmetic.multiply,
    Operation.DIVIDE: arithmetic.divide,
    Operation.MODULO: arithmetic.modulo,
}

_RECOVERABLE_ERRORS = {
    ErrorKind.INVALID_FORMAT: InvalidFormat,
    ErrorKind.DIVISION_BY_ZERO: DivisionByZero,
}


@dataclass(frozen=True)
class OperationResult:
    """Результат операции: ровно одно из value / error заполнено."""

    operation: Operation
    operands: tuple[str, ...]

    value: Optional[BigInt]
    error: Optional[ErrorKind]

    # Детали (текст ошибки или пусто)
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> BigInt:
        """
        Значение результата.

        Raises:
            InvalidFormat / DivisionByZero: если результат содержит ошибку
        """
        if self.error is not None:
            raise _RECOVERABLE_ERRORS[self.error](self.details)
        return self.value


def _operand_text(operand: Union[BigInt, str]) -> str:
    return operand if isinstance(operand, str) else to_text(operand)


def _failure(operation: Operation, operands: tuple[str, ...], exc: BigIntError) -> OperationResult:
    return OperationResult(
        operation=operation,
        operands=operands,
        value=None,
        error=exc.kind,
        details=str(exc),
    )


def parse(text: str) -> OperationResult:
    """
    Разбор десятичной записи в OperationResult.

    Examples:
        >>> parse("12a3").error
        <ErrorKind.INVALID_FORMAT: 'invalid_format'>
    """
    try:
        value = from_text(text)
    except InvalidFormat as exc:
        return _failure(Operation.PARSE, (text,), exc)
    return OperationResult(operation=Operation.PARSE, operands=(text,), value=value, error=None)


def evaluate(
    operation: Union[Operation, str],
    a: Union[BigInt, str],
    b: Union[BigInt, str],
) -> OperationResult:
    """
    Выполнение бинарной операции с явным результатом.

    Args:
        operation: Operation или её имя ('add', 'divide', ...)
        a: Левый операнд (BigInt или десятичная запись)
        b: Правый операнд (BigInt или десятичная запись)

    Returns:
        OperationResult со значением или видом ошибки

    Raises:
        ValueError: если операция неизвестна или не бинарная
        NegativeResult: дефект знаковой диспетчеризации (не перехватывается)
    """
    operation = Operation(operation)
    if operation not in _BINARY_OPERATIONS:
        raise ValueError(f"Operation {operation.value!r} is not a binary operation")

    operands = (_operand_text(a), _operand_text(b))

    try:
        lhs = from_text(a) if isinstance(a, str) else a
        rhs = from_text(b) if isinstance(b, str) else b
        value = _BINARY_OPERATIONS[operation](lhs, rhs)
    except (InvalidFormat, DivisionByZero) as exc:
        return _failure(operation, operands, exc)

    return OperationResult(operation=operation, operands=operands, value=value, error=None)
