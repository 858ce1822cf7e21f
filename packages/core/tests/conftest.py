"""Shared fixtures for validated-core tests."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


@pytest.fixture
def load_example() -> Callable[[str], ModuleType]:
    """Import a script from ``packages/core/examples`` as a module."""

    def _load(name: str) -> ModuleType:
        module_name = f"validated_examples_{name}"
        if module_name in sys.modules:
            return sys.modules[module_name]
        spec = importlib.util.spec_from_file_location(
            module_name, EXAMPLES_DIR / f"{name}.py"
        )
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        # pydantic resolves postponed annotations through sys.modules
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        return module

    return _load


@pytest.fixture
def make_user() -> Callable[[str, int], tuple[str, int]]:
    """Plain two-field constructor used as the combining function in accum tests."""

    def _make(username: str, age: int) -> tuple[str, int]:
        return (username, age)

    return _make
