from __future__ import annotations

import pytest


@pytest.fixture
def data() -> list[float]:
    return [1.0, 2.0, 3.0, 4.0, 2.0]
