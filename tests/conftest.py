import logging
import random
import sys
import os as _os

import pytest
from fastapi.testclient import TestClient

# Ensure project root is importable (so `import canarysim`, `import main` work without installing)
_project_root = _os.path.dirname(_os.path.dirname(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from canarysim.app import create_app  # noqa: E402
from canarysim.settings import Settings, load_settings  # noqa: E402


class FixedRandom(random.Random):
    """random.Random whose draws always return the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def make_client():
    """Build a TestClient for a given environment mapping or Settings."""

    def _make(env=None, settings: Settings | None = None, rng=None) -> TestClient:
        if settings is None:
            settings = load_settings(env or {})
        return TestClient(create_app(settings, rng=rng))

    return _make


@pytest.fixture
def anyio_backend():
    return "asyncio"


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def capture_logs():
    """Attach a recording handler to a named logger (our loggers do not propagate)."""
    attached = []

    def _capture(name: str) -> _ListHandler:
        logger = logging.getLogger(name)
        handler = _ListHandler()
        attached.append((logger, handler, logger.level))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        return handler

    yield _capture

    for logger, handler, level in attached:
        logger.removeHandler(handler)
        logger.setLevel(level)
