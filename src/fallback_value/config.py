"""Process-wide settings for fallback_value, seeded from the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from .errors import FallbackConfigError

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

TRACE_ENV = "FALLBACK_VALUE_TRACE"
ATTRIBUTE_ACCESS_ENV = "FALLBACK_VALUE_ATTRIBUTE_ACCESS"
LOG_LEVEL_ENV = "FALLBACK_VALUE_LOG_LEVEL"


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise FallbackConfigError(name, raw, "one of 1/0/true/false/yes/no/on/off")


def _parse_log_level(name: str, raw: str | None, default: str) -> str:
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise FallbackConfigError(name, raw, f"one of {', '.join(_LOG_LEVELS)}")
    return level


class FallbackConfig:
    """Mutable settings read on every resolution.

    ``trace_failures`` logs the reason for each failed resolution at DEBUG.
    ``attribute_access`` lets the traverser step into plain objects through
    their own instance attributes, in addition to mappings and sequences.
    ``log_level`` is the level applied by ``configure_logging``.
    """

    def __init__(
        self,
        *,
        trace_failures: bool = False,
        attribute_access: bool = True,
        log_level: str = "WARNING",
    ) -> None:
        self.trace_failures = trace_failures
        self.attribute_access = attribute_access
        self.log_level = log_level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FallbackConfig:
        env = os.environ if environ is None else environ
        return cls(
            trace_failures=_parse_bool(TRACE_ENV, env.get(TRACE_ENV), False),
            attribute_access=_parse_bool(
                ATTRIBUTE_ACCESS_ENV, env.get(ATTRIBUTE_ACCESS_ENV), True
            ),
            log_level=_parse_log_level(
                LOG_LEVEL_ENV, env.get(LOG_LEVEL_ENV), "WARNING"
            ),
        )

    @property
    def log_level(self) -> str:
        return self._log_level

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._log_level = _parse_log_level("log_level", value, "WARNING")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def __repr__(self) -> str:
        return (
            f"FallbackConfig(trace_failures={self.trace_failures!r}, "
            f"attribute_access={self.attribute_access!r}, "
            f"log_level={self.log_level!r})"
        )


FALLBACK_CONFIG = FallbackConfig.from_env()


__all__ = ["FALLBACK_CONFIG", "FallbackConfig"]
