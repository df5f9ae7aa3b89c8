"""Shared pytest fixtures for wordcalc tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from wordcalc.core.calculator import Calculator
from wordcalc.core.config import CalcConfig


@pytest.fixture
def calculator() -> Calculator:
    """Return a calculator with default limits."""
    return Calculator(CalcConfig())


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes ``wordcalc.toml`` into ``tmp_path``."""

    def _write(content: str) -> Path:
        path = tmp_path / "wordcalc.toml"
        path.write_text(content)
        return path

    return _write
