"""Path tokenizing helpers for nested value lookup."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from pydantic import BaseModel, ConfigDict


class _PathMissing:
    """Sentinel for members a container does not define."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "PATH_MISSING"


PATH_MISSING: Final = _PathMissing()

# Names that reach prototype/class linkage or constructor slots.
UNSAFE_KEYS: Final[frozenset[str]] = frozenset(
    {
        "__proto__",
        "prototype",
        "constructor",
        "__class__",
        "__dict__",
        "__base__",
        "__bases__",
        "__mro__",
        "__subclasses__",
        "__init__",
        "__init_subclass__",
        "__new__",
        "__globals__",
        "__builtins__",
        "__closure__",
        "__code__",
        "__getattribute__",
        "__setattr__",
        "__delattr__",
        "__reduce__",
        "__reduce_ex__",
    }
)


def is_unsafe_key(segment: str) -> bool:
    return segment in UNSAFE_KEYS


def tokenize(path: str) -> tuple[str, ...]:
    """Split ``path`` into segments.

    ``"a.b"`` -> ``("a", "b")``, ``"a[0].b"`` -> ``("a", "0", "b")`` and
    ``"a\\.b.c"`` -> ``("a.b", "c")``. Empty segments are dropped and
    malformed input never raises; an unterminated bracket runs to the end.
    """

    segments: list[str] = []
    buffer: list[str] = []
    index = 0
    length = len(path)

    def flush() -> None:
        if buffer:
            segments.append("".join(buffer))
            buffer.clear()

    while index < length:
        char = path[index]
        if char == "\\" and index + 1 < length and path[index + 1] == ".":
            buffer.append(".")
            index += 2
        elif char == ".":
            flush()
            index += 1
        elif char == "[":
            flush()
            close = path.find("]", index + 1)
            if close == -1:
                close = length
            segment = path[index + 1 : close]
            if segment:
                segments.append(segment)
            index = close + 1
            if index < length and path[index] == ".":
                index += 1
        else:
            buffer.append(char)
            index += 1

    flush()
    return tuple(segments)


def escape_key(key: str) -> str:
    return key.replace(".", "\\.")


def _is_canonical_index(segment: str) -> bool:
    if not segment.isascii() or not segment.isdigit():
        return False
    return segment == "0" or not segment.startswith("0")


def format_path(segments: Iterable[str]) -> str:
    """Render segments back into a path string ``tokenize`` accepts."""

    parts: list[str] = []
    for segment in segments:
        if _is_canonical_index(segment):
            parts.append(f"[{segment}]")
            continue
        if parts:
            parts.append(".")
        parts.append(escape_key(segment))
    return "".join(parts)


class ParsedPath(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    raw: str
    segments: tuple[str, ...]

    @property
    def has_unsafe_segment(self) -> bool:
        return any(is_unsafe_key(segment) for segment in self.segments)

    def __str__(self) -> str:
        return format_path(self.segments)


def parse_path(path: str) -> ParsedPath:
    return ParsedPath(raw=path, segments=tokenize(path))


__all__ = [
    "PATH_MISSING",
    "UNSAFE_KEYS",
    "ParsedPath",
    "escape_key",
    "format_path",
    "is_unsafe_key",
    "parse_path",
    "tokenize",
]
