"""Safe traversal of nested values."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Final, TypeVar

from .config import FALLBACK_CONFIG
from .errors import MISSING
from .paths import PATH_MISSING, _is_canonical_index, is_unsafe_key, tokenize
from .runtime.logging import get_logger

T = TypeVar("T")

_TEXT_TYPES = (str, bytes, bytearray)
_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool)
_NOT_TRAVERSABLE: Final = object()


class FailureReason(enum.Enum):
    UNSAFE_KEY = "unsafe key"
    NOT_TRAVERSABLE = "value is not traversable"
    NOT_FOUND = "member not found"
    UNSET = "resolved value is unset"
    CONTAINER_ERROR = "container raised during lookup"


def _is_nullish(value: object) -> bool:
    return value is None or value is MISSING


def _own_attributes(value: object) -> Mapping[str, Any] | None:
    if isinstance(value, _SCALAR_TYPES):
        return None
    try:
        namespace = vars(value)
    except TypeError:
        return None
    if not isinstance(namespace, Mapping):
        return None
    return namespace


def _lookup(current: object, segment: str) -> object:
    """Return ``current``'s own member named ``segment`` or a missing marker.

    Returns ``_NOT_TRAVERSABLE`` for values that cannot be stepped into and
    ``PATH_MISSING`` when the member is not defined.
    """

    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        return PATH_MISSING

    if isinstance(current, Sequence) and not isinstance(current, _TEXT_TYPES):
        if not _is_canonical_index(segment):
            return PATH_MISSING
        position = int(segment)
        if position >= len(current):
            return PATH_MISSING
        return current[position]

    if not FALLBACK_CONFIG.attribute_access:
        return _NOT_TRAVERSABLE

    namespace = _own_attributes(current)
    if namespace is None:
        return _NOT_TRAVERSABLE
    if segment in namespace:
        return namespace[segment]
    return PATH_MISSING


def _fail(
    reason: FailureReason,
    position: int,
    segment: str | None,
    fallback: T,
    *,
    exc_info: bool = False,
) -> T:
    if FALLBACK_CONFIG.trace_failures:
        get_logger().debug(
            "resolve: %s at segment %d %r",
            reason.value,
            position,
            segment,
            exc_info=exc_info,
        )
    return fallback


def resolve_segments(value: Any, segments: Iterable[str], fallback: Any = None) -> Any:
    """Walk ``value`` through pre-split ``segments``.

    Each step only reads members the container defines itself. Any failed
    step returns ``fallback`` unchanged; no exception escapes.
    """

    current = value
    position = -1
    for position, segment in enumerate(segments):
        if is_unsafe_key(segment):
            return _fail(FailureReason.UNSAFE_KEY, position, segment, fallback)
        if _is_nullish(current):
            return _fail(FailureReason.NOT_TRAVERSABLE, position, segment, fallback)

        try:
            found = _lookup(current, segment)
        except Exception:
            return _fail(
                FailureReason.CONTAINER_ERROR,
                position,
                segment,
                fallback,
                exc_info=True,
            )

        if found is _NOT_TRAVERSABLE:
            return _fail(FailureReason.NOT_TRAVERSABLE, position, segment, fallback)
        if found is PATH_MISSING:
            return _fail(FailureReason.NOT_FOUND, position, segment, fallback)
        current = found

    if position == -1:
        return fallback if _is_nullish(current) else current
    if current is MISSING:
        return _fail(FailureReason.UNSET, position, None, fallback)
    return current


def fallback_value(value: Any, path: str | None = None, fallback: Any = None) -> Any:
    """Return the value at ``path`` inside ``value``, or ``fallback``.

    ``path`` uses dots between keys, ``[n]`` for sequence positions and
    ``\\.`` for a literal dot inside a key, e.g. ``"users[0].address.city"``.
    Without a path (or with one naming no segments) this is nullish
    coalescing: ``value`` unless it is ``None`` or ``MISSING``.

    A stored ``None`` is a resolved value; a stored ``MISSING`` is not.
    """

    if path is None:
        return fallback if _is_nullish(value) else value
    if not isinstance(path, str):
        return fallback
    return resolve_segments(value, tokenize(path), fallback)


resolve = fallback_value


def first_present(
    value: Any, paths: Iterable[str | None], fallback: Any = None
) -> Any:
    """Return the first resolvable path in ``paths``, else ``fallback``."""

    for candidate in paths:
        found = fallback_value(value, candidate, PATH_MISSING)
        if found is not PATH_MISSING:
            return found
    return fallback


__all__ = [
    "FailureReason",
    "fallback_value",
    "first_present",
    "resolve",
    "resolve_segments",
]
