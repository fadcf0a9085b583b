"""Parsing of inline CSS declarations and CSS value types.

Only what the style contributions need is parsed here: declaration
lists from ``style`` attributes, lengths, font sizes and text
decorations.  Selectors and the cascade are out of scope.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from htmlstyle._constants import (
    ABSOLUTE_FONT_SIZES,
    LARGER_FACTOR,
    PX_PER_PT,
    SMALLER_FACTOR,
)
from htmlstyle.model.text_style import TextDecoration

__all__ = [
    "CssLength",
    "parse_declarations",
    "parse_edge_lengths",
    "parse_font_size",
    "parse_length",
    "parse_text_decoration",
]

# A single declaration: property: value, terminated by ';' or end of input.
_DECLARATION_RE = re.compile(
    r"""
    (?P<key>-?[a-zA-Z_][a-zA-Z0-9_-]*)   # property name
    \s*:\s*                               # colon separator
    (?P<value>[^;]*?)                     # value (non-greedy)
    \s*(?:;|$)                            # terminator
    """,
    re.VERBOSE,
)

_LENGTH_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))(?P<unit>px|pt|em|rem|%)?$",
    re.IGNORECASE,
)

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def parse_declarations(source: str) -> list[tuple[str, str]]:
    """Parse a CSS declaration list such as a ``style`` attribute.

    Property names are lower-cased and values stripped.  Declarations
    are returned in source order; later duplicates are kept so that
    applying them in order lets the last one win.  Fragments that do
    not look like ``property: value`` are skipped, as are declarations
    with an empty value.  ``!important`` markers are dropped.

    Example::

        >>> parse_declarations("color: red; font-weight:bold")
        [('color', 'red'), ('font-weight', 'bold')]
    """
    declarations: list[tuple[str, str]] = []
    for fragment in source.split(";"):
        match = _DECLARATION_RE.match(fragment.strip())
        if match is None:
            continue
        value = _IMPORTANT_RE.sub("", match.group("value")).strip()
        if value:
            declarations.append((match.group("key").lower(), value))
    return declarations


@dataclass(frozen=True)
class CssLength:
    """A CSS length with its unit.

    Attributes:
        number: The numeric part.
        unit: One of ``"px"``, ``"pt"``, ``"em"``, ``"rem"``, ``"%"``.
    """

    number: float
    unit: str = "px"

    def resolve(self, font_size: float, root_font_size: float | None = None) -> float:
        """Convert to logical pixels.

        Args:
            font_size: Reference size for ``em`` and ``%``.
            root_font_size: Reference size for ``rem``.  Defaults to
                *font_size*.
        """
        if self.unit == "px":
            return self.number
        if self.unit == "pt":
            return self.number * PX_PER_PT
        if self.unit == "em":
            return self.number * font_size
        if self.unit == "rem":
            root = root_font_size if root_font_size is not None else font_size
            return self.number * root
        if self.unit == "%":
            return self.number * font_size / 100.0
        raise ValueError(f"Unknown CSS length unit: {self.unit!r}")


def parse_length(value: str) -> CssLength | None:
    """Parse a CSS length, or return ``None`` if *value* is not one.

    A bare number is only accepted when it is zero, as in CSS.
    """
    match = _LENGTH_RE.match(value.strip())
    if match is None:
        return None
    number = float(match.group("number"))
    unit = (match.group("unit") or "").lower()
    if not unit:
        if number != 0:
            return None
        unit = "px"
    return CssLength(number, unit)


def parse_font_size(
    value: str,
    parent_size: float | None,
    default_size: float,
    *,
    root_size: float | None = None,
) -> float | None:
    """Resolve a CSS ``font-size`` value to logical pixels.

    Absolute keywords (``"small"``, ``"x-large"``, ...) are relative to
    *default_size*; ``"larger"``/``"smaller"``, ``em`` and ``%`` are
    relative to *parent_size* (falling back to *default_size*); ``rem``
    is relative to *root_size* (falling back to *default_size*).

    Returns:
        The size, or ``None`` if *value* is not recognised or does not
        give a positive size.
    """
    parent = parent_size if parent_size is not None else default_size
    token = value.strip().lower()

    length = parse_length(token)
    if length is not None:
        size = length.resolve(
            parent, root_size if root_size is not None else default_size,
        )
        return size if size > 0 else None

    if token in ABSOLUTE_FONT_SIZES:
        return default_size * ABSOLUTE_FONT_SIZES[token]
    if token == "larger":
        return parent * LARGER_FACTOR
    if token == "smaller":
        return parent * SMALLER_FACTOR
    return None


_DECORATION_LINES = {
    "underline": TextDecoration.UNDERLINE,
    "overline": TextDecoration.OVERLINE,
    "line-through": TextDecoration.LINE_THROUGH,
}


def parse_text_decoration(
    value: str,
    parent: TextDecoration | None = None,
) -> TextDecoration | None:
    """Combine a ``text-decoration`` value with the inherited decoration.

    Lines named in *value* are added to *parent*; ``none`` clears all
    lines.  Tokens that are not line names (colours, styles) are
    ignored here.

    Returns:
        The combined decoration, or ``None`` if *value* names no line
        and is not ``none``.
    """
    tokens = value.strip().lower().split()
    if "none" in tokens:
        return TextDecoration.NONE
    lines = [_DECORATION_LINES[t] for t in tokens if t in _DECORATION_LINES]
    if not lines:
        return None
    base = parent if parent is not None else TextDecoration.NONE
    return TextDecoration.combine([base, *lines])


def parse_edge_lengths(
    value: str,
) -> tuple[CssLength | None, CssLength | None, CssLength | None, CssLength | None]:
    """Parse a ``margin``/``padding`` shorthand into (top, right, bottom, left).

    One to four values are accepted with the usual CSS expansion.
    ``auto`` and unparsable values give ``None`` for their side.
    """
    tokens = value.strip().lower().split()
    if not 1 <= len(tokens) <= 4:
        return (None, None, None, None)
    lengths = [parse_length(t) for t in tokens]
    if len(lengths) == 1:
        top = right = bottom = left = lengths[0]
    elif len(lengths) == 2:
        top = bottom = lengths[0]
        right = left = lengths[1]
    elif len(lengths) == 3:
        top, right, bottom = lengths
        left = right
    else:
        top, right, bottom, left = lengths
    return (top, right, bottom, left)
