from __future__ import annotations

import json
from pathlib import Path

import pytest

SCENARIO_DIR = Path(__file__).resolve().parent.parent / "scenarios"


@pytest.fixture
def demo_config() -> dict:
    return json.loads((SCENARIO_DIR / "demo.json").read_text())


@pytest.fixture
def original_test_config() -> dict:
    return json.loads((SCENARIO_DIR / "original_test.json").read_text())
