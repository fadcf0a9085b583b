"""Typed style values and the store that holds one of each kind.

Style state that is not part of :class:`~htmlstyle.model.text_style.TextStyle`
travels through the tree as small typed values.  A
:class:`TypedValues` store holds at most one live value per kind and
is never mutated: layering in a new value produces a new store.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

T = TypeVar("T")


class TextDirection(StrEnum):
    """Inline base direction."""

    LTR = "ltr"
    RTL = "rtl"


class CssWhitespace(StrEnum):
    """How whitespace inside text is handled.

    Attributes:
        NORMAL: Collapse runs of whitespace (including newlines) to a
            single space.
        PRE: Preserve whitespace and newlines exactly.
        NOWRAP: Collapse like ``NORMAL``.  Line wrapping is a layout
            concern and is left to the renderer.
        PRE_WRAP: Preserve like ``PRE``.
        PRE_LINE: Collapse spaces and tabs but preserve newlines.
    """

    NORMAL = "normal"
    PRE = "pre"
    NOWRAP = "nowrap"
    PRE_WRAP = "pre-wrap"
    PRE_LINE = "pre-line"


class TextAlign(StrEnum):
    """Horizontal alignment of text within its block."""

    START = "start"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class TextScaleFactor:
    """Number of font pixels for each logical pixel.

    Attributes:
        value: Multiplier applied to the root font size.
    """

    value: float = 1.0

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(
                f"text scale factor must be positive, got {self.value}"
            )


@dataclass(frozen=True)
class LineHeight:
    """Line height as a multiple of the font size.

    Attributes:
        value: Height multiplier (CSS unit-less ``line-height``).
    """

    value: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"line height must be positive, got {self.value}")


class TypedValues:
    """An immutable bag of values keyed by their type.

    Lookup returns the first stored value that is an instance of the
    requested class.  :meth:`with_replaced` removes every existing
    value of that class before appending the new one, so exactly one
    value per kind stays visible.

    Args:
        values: Initial values, in order.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[object] = ()) -> None:
        self._values: tuple[object, ...] = tuple(values)

    def get(self, kind: type[T]) -> T | None:
        """Return the first value that is an instance of *kind*, or ``None``."""
        for value in self._values:
            if isinstance(value, kind):
                return value
        return None

    def with_replaced(self, value: object, kind: type | None = None) -> TypedValues:
        """Return a new store with *value* replacing any value of *kind*.

        Args:
            value: The value to layer in.  It is appended after the
                surviving entries.
            kind: The slot to replace.  Defaults to ``type(value)``.
        """
        if kind is None:
            kind = type(value)
        kept = [v for v in self._values if not isinstance(v, kind)]
        kept.append(value)
        return TypedValues(kept)

    def __iter__(self) -> Iterator[object]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(repr(v) for v in self._values)
        return f"TypedValues([{inner}])"
