from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import FALLBACK_CONFIG, FallbackConfig


@dataclass(frozen=True)
class _FallbackConfigSnapshot:
    trace_failures: bool
    attribute_access: bool
    log_level: str

    @classmethod
    def capture(cls) -> "_FallbackConfigSnapshot":
        return cls(
            trace_failures=FALLBACK_CONFIG.trace_failures,
            attribute_access=FALLBACK_CONFIG.attribute_access,
            log_level=FALLBACK_CONFIG.log_level,
        )

    def restore(self) -> None:
        FALLBACK_CONFIG.trace_failures = self.trace_failures
        FALLBACK_CONFIG.attribute_access = self.attribute_access
        FALLBACK_CONFIG.log_level = self.log_level


_DEFAULTS = _FallbackConfigSnapshot(
    trace_failures=False,
    attribute_access=True,
    log_level="WARNING",
)


@contextmanager
def fallback_test_env(
    *,
    trace_failures: bool | None = None,
    attribute_access: bool | None = None,
    log_level: str | None = None,
) -> Generator[FallbackConfig, None, None]:
    """Run with default settings plus the given overrides, then restore."""
    snapshot = _FallbackConfigSnapshot.capture()
    _DEFAULTS.restore()
    if trace_failures is not None:
        FALLBACK_CONFIG.trace_failures = trace_failures
    if attribute_access is not None:
        FALLBACK_CONFIG.attribute_access = attribute_access
    if log_level is not None:
        FALLBACK_CONFIG.log_level = log_level
    try:
        yield FALLBACK_CONFIG
    finally:
        snapshot.restore()


@pytest.fixture()
def fallback_config() -> Generator[FallbackConfig, None, None]:
    """Isolate FALLBACK_CONFIG changes made by the test."""
    with fallback_test_env() as config:
        yield config
