"""Demo — демонстрационный драйвер: два значения, все операции, печать результатов."""

from .driver import DriverConfig, build_parser, main, run

__all__ = [
    "DriverConfig",
    "build_parser",
    "main",
    "run",
]
