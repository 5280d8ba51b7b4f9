from __future__ import annotations

import pytest

from diagnostics import DiagnosticLog
from graphics import Graphics


@pytest.fixture
def diagnostics() -> DiagnosticLog:
    return DiagnosticLog()


@pytest.fixture
def sink() -> Graphics:
    return Graphics(name="sink")

