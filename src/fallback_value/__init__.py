"""
fallback_value: safe path lookups into nested data.

This package uses a src-layout. Import the package as `fallback_value`.
"""

from importlib.metadata import version

__version__ = version("fallback-value")

from .config import FALLBACK_CONFIG, FallbackConfig
from .errors import (
    MISSING,
    FallbackConfigError,
    FallbackValueError,
    InvalidSegmentError,
)
from .paths import (
    UNSAFE_KEYS,
    ParsedPath,
    escape_key,
    format_path,
    is_unsafe_key,
    parse_path,
    tokenize,
)
from .traverse import fallback_value, first_present, resolve, resolve_segments
from .accessor import Accessor, path
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "FALLBACK_CONFIG",
    "Accessor",
    "FallbackConfig",
    "FallbackConfigError",
    "FallbackValueError",
    "InvalidSegmentError",
    "MISSING",
    "ParsedPath",
    "UNSAFE_KEYS",
    "configure_logging",
    "escape_key",
    "fallback_value",
    "first_present",
    "format_path",
    "get_logger",
    "is_unsafe_key",
    "parse_path",
    "path",
    "resolve",
    "resolve_segments",
    "tokenize",
]
