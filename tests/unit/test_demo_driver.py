"""
Тесты для демонстрационного драйвера

Проверяет:
1. Разбор аргументов в DriverConfig
2. Текстовый вывод для операндов по умолчанию
3. Ошибки операций печатаются, код выхода всегда 0
"""

import io

import pytest

from src.demo import DriverConfig, main, run
from src.demo.driver import config_from_args


class TestConfig:
    """Тесты для config_from_args"""

    def test_defaults(self) -> None:
        config = config_from_args([])
        assert config == DriverConfig()
        assert config.left == "-123"
        assert config.right == "456"

    def test_negative_positionals_and_options(self) -> None:
        """Отрицательные числа разбираются как позиционные аргументы"""
        config = config_from_args(["-7", "-2", "--log-level", "DEBUG"])
        assert config.left == "-7"
        assert config.right == "-2"
        assert config.log_level == "DEBUG"

    def test_invalid_log_level_choice(self) -> None:
        with pytest.raises(SystemExit):
            config_from_args(["1", "2", "--log-level", "CHATTY"])


class TestRun:
    """Тесты для run"""

    def test_text_output(self) -> None:
        stream = io.StringIO()
        assert run(DriverConfig(), stream) == 0
        assert stream.getvalue().splitlines() == [
            "a = -123",
            "b = 456",
            "a + b = 333",
            "a - b = -579",
            "a * b = -56088",
            "a / b = 0",
            "a % b = -123",
            "a < b = true",
            "a == b = false",
            "a >= b = false",
        ]

    def test_truncating_division_signs(self) -> None:
        stream = io.StringIO()
        assert run(DriverConfig(left="456", right="-123"), stream) == 0
        lines = stream.getvalue().splitlines()
        assert "a / b = -3" in lines
        assert "a % b = 87" in lines

    def test_division_by_zero_reported(self) -> None:
        stream = io.StringIO()
        assert run(DriverConfig(left="5", right="0"), stream) == 0
        lines = stream.getvalue().splitlines()
        assert "a / b = error: division_by_zero" in lines
        assert "a % b = error: division_by_zero" in lines
        assert "a >= b = true" in lines

    def test_invalid_operand_skips_operations(self) -> None:
        stream = io.StringIO()
        assert run(DriverConfig(left="12a3"), stream) == 0
        assert stream.getvalue().splitlines() == [
            "a = error: invalid_format",
            "b = 456",
        ]


def test_main_writes_to_stdout(capsys) -> None:
    assert main(["-123", "-456"]) == 0
    out = capsys.readouterr().out
    assert "a < b = false" in out
    assert "a >= b = true" in out
