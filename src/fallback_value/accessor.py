from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidSegmentError
from .paths import format_path
from .traverse import resolve_segments


@dataclass(frozen=True)
class Accessor:
    """Chainable lookup, e.g. ``path(doc).users[0].key("first.name").get("")``.

    Segments are handed to the traverser as-is, so keys may contain ``.``
    or ``[`` without escaping. Keys named like the accessor's own members
    (``root``, ``segments``, ``path``, ``get``, ``key``, ``index``) must be
    reached with ``["root"]`` or ``.key("root")``.
    """

    root: Any
    segments: tuple[str, ...] = field(default=())

    def key(self, name: str) -> Accessor:
        if not isinstance(name, str):
            raise InvalidSegmentError(
                f"accessor keys must be strings, got {type(name).__name__}"
            )
        if not name:
            raise InvalidSegmentError("accessor keys cannot be empty")
        return Accessor(self.root, (*self.segments, name))

    def index(self, position: int) -> Accessor:
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidSegmentError(
                f"accessor indices must be integers, got {type(position).__name__}"
            )
        if position < 0:
            raise InvalidSegmentError("negative indices are not supported")
        return Accessor(self.root, (*self.segments, str(position)))

    def __getitem__(self, item: int | str) -> Accessor:
        if isinstance(item, str):
            return self.key(item)
        return self.index(item)

    def __getattr__(self, name: str) -> Accessor:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.key(name)

    @property
    def path(self) -> str:
        return format_path(self.segments)

    def get(self, fallback: Any = None) -> Any:
        return resolve_segments(self.root, self.segments, fallback)


def path(root: Any) -> Accessor:
    return Accessor(root)


__all__ = ["Accessor", "path"]
