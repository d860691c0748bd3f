"""Demo Driver — строит два значения из текста и печатает результаты всех операций.

Вывод:
    a + b = 333
    a < b = true

Ошибки отдельных операций (InvalidFormat, DivisionByZero) печатаются
как вид ошибки; код выхода всегда 0.
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Dict, Final, List, Optional, TextIO

from src.core.logging_config import configure_logging, get_logger
from src.core.math.comparator import is_equal, is_greater_or_equal, is_less
from src.core.math.operation_result import Operation, OperationResult, evaluate, parse

logger = get_logger(__name__)

DEFAULT_LEFT: Final[str] = "-123"
DEFAULT_RIGHT: Final[str] = "456"

_SYMBOLS: Final[Dict[Operation, str]] = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "*",
    Operation.DIVIDE: "/",
    Operation.MODULO: "%",
}


@dataclass(frozen=True)
class DriverConfig:
    """Конфигурация драйвера."""

    left: str = DEFAULT_LEFT
    right: str = DEFAULT_RIGHT
    log_level: str = "WARNING"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigint-demo",
        description="Run every big-integer operation on two decimal operands.",
    )
    parser.add_argument("left", nargs="?", default=DEFAULT_LEFT, help="Left operand (decimal)")
    parser.add_argument("right", nargs="?", default=DEFAULT_RIGHT, help="Right operand (decimal)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr.",
    )
    return parser


def config_from_args(argv: Optional[List[str]] = None) -> DriverConfig:
    args = build_parser().parse_args(argv)
    return DriverConfig(
        left=args.left,
        right=args.right,
        log_level=args.log_level,
    )


def _format_text(result: OperationResult) -> str:
    if result.ok:
        return str(result.value)
    return f"error: {result.error.value}"


def _format_bool(flag: bool) -> str:
    return "true" if flag else "false"


def run(config: DriverConfig, stream: TextIO) -> int:
    """
    Выполнение демонстрации.

    Args:
        config: Конфигурация драйвера
        stream: Поток вывода

    Returns:
        Код выхода (всегда 0)
    """
    left = parse(config.left)
    right = parse(config.right)

    stream.write(f"a = {_format_text(left)}\n")
    stream.write(f"b = {_format_text(right)}\n")

    if not (left.ok and right.ok):
        logger.info("Operand parsing failed, skipping operations")
        return 0

    a = left.value
    b = right.value

    for operation, symbol in _SYMBOLS.items():
        result = evaluate(operation, a, b)
        logger.info("%s -> %s", operation.value, "ok" if result.ok else result.error.value)
        stream.write(f"a {symbol} b = {_format_text(result)}\n")

    stream.write(f"a < b = {_format_bool(is_less(a, b))}\n")
    stream.write(f"a == b = {_format_bool(is_equal(a, b))}\n")
    stream.write(f"a >= b = {_format_bool(is_greater_or_equal(a, b))}\n")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    config = config_from_args(argv)
    configure_logging(config.log_level)
    return run(config, sys.stdout)
