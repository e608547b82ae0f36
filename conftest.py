from __future__ import annotations

import pytest
import structlog

from basicstochastics.core.logging import configure_structlog


@pytest.fixture(autouse=True)
def _quiet_doctest_logs(request):
    """Keep facade debug events out of doctest output."""
    if type(request.node).__name__ != "DoctestItem":
        yield
        return
    configure_structlog("WARNING")
    yield
    structlog.reset_defaults()
