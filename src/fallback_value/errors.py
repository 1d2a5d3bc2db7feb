from __future__ import annotations

from typing import Final


class _FallbackMissing:
    """Singleton marking a value that is unset, as opposed to ``None``."""

    __slots__ = ()
    _instance: _FallbackMissing | None = None

    def __new__(cls) -> _FallbackMissing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"

    def __copy__(self) -> _FallbackMissing:
        return self

    def __deepcopy__(self, memo: object) -> _FallbackMissing:
        return self


MISSING: Final = _FallbackMissing()


class FallbackValueError(Exception):
    """Base class for errors raised by fallback_value."""


class InvalidSegmentError(FallbackValueError, ValueError):
    """Raised when an accessor is given a key or index it cannot represent."""


class FallbackConfigError(FallbackValueError, ValueError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, name: str, raw: str, expected: str) -> None:
        self.name = name
        self.raw = raw
        super().__init__(f"invalid value {raw!r} for {name}; expected {expected}")


__all__ = [
    "MISSING",
    "FallbackConfigError",
    "FallbackValueError",
    "InvalidSegmentError",
]
