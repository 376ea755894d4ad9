# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field

import pytest

from erroneous.config.settings import get_settings
from erroneous.dependencies.constructor import get_error_constructor
from erroneous.domain.interfaces.caller_resolver import SourceLocation


@dataclass
class RecordingResolver:
    """Deterministic resolver stub that records every requested skip."""

    location: SourceLocation | None = SourceLocation("stub.py", 42)
    calls: list[int] = field(default_factory=list)

    def __call__(self, skip: int) -> SourceLocation | None:
        self.calls.append(skip)
        return self.location


@pytest.fixture
def resolver() -> RecordingResolver:
    """Provide a resolver stub that always resolves to stub.py:42."""
    return RecordingResolver()


@pytest.fixture(autouse=True)
def _reset_cached_wiring(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Make every test start from default settings and a fresh constructor."""
    for key in ("ERRONEOUS_CAPTURE_DEPTH", "ERRONEOUS_LOG_LEVEL", "ERRONEOUS_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    get_error_constructor.cache_clear()
    yield
    get_settings.cache_clear()
    get_error_constructor.cache_clear()
