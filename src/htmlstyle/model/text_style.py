from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Flag, StrEnum

from htmlstyle.model._util import _non_default_items
from htmlstyle.model.colour import RGBA, Colour, normalise_colour


class FontStyle(StrEnum):
    """Glyph slant.

    Attributes:
        NORMAL: Upright glyphs.
        ITALIC: Italic glyphs.  CSS ``oblique`` also maps here.
    """

    NORMAL = "normal"
    ITALIC = "italic"


class TextDecorationStyle(StrEnum):
    """Line pattern used to draw a :class:`TextDecoration`."""

    SOLID = "solid"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"


class TextDecoration(Flag):
    """Lines drawn over, under or through text.

    Members combine with ``|``; ``TextDecoration.NONE`` is the empty
    combination.
    """

    NONE = 0
    UNDERLINE = 1
    OVERLINE = 2
    LINE_THROUGH = 4

    @classmethod
    def combine(cls, decorations) -> TextDecoration:
        """Return the union of an iterable of decorations."""
        combined = cls.NONE
        for decoration in decorations:
            combined |= decoration
        return combined

    def to_css(self) -> str:
        """Return the CSS ``text-decoration-line`` spelling."""
        if not self:
            return "none"
        names = []
        for member, css in _DECORATION_CSS:
            if member in self:
                names.append(css)
        return " ".join(names)


_DECORATION_CSS = (
    (TextDecoration.UNDERLINE, "underline"),
    (TextDecoration.OVERLINE, "overline"),
    (TextDecoration.LINE_THROUGH, "line-through"),
)

FONT_WEIGHT_NORMAL = 400
FONT_WEIGHT_BOLD = 700


def parse_font_weight(value: str | int, parent: int = FONT_WEIGHT_NORMAL) -> int | None:
    """Convert a CSS ``font-weight`` value to a numeric weight.

    Numbers and the keywords known to matplotlib's font manager
    (``"bold"``, ``"light"``, ``"semibold"``, ...) are accepted, as are
    the relative keywords ``"bolder"`` and ``"lighter"``, which are
    resolved against *parent*.

    Returns:
        A weight in ``[1, 1000]``, or ``None`` if *value* is not a
        recognised weight.
    """
    from matplotlib.font_manager import weight_dict

    if isinstance(value, int) and not isinstance(value, bool):
        return value if 1 <= value <= 1000 else None

    token = value.strip().lower()
    if token == "bolder":
        if parent < 350:
            return FONT_WEIGHT_NORMAL
        if parent < 550:
            return FONT_WEIGHT_BOLD
        return 900
    if token == "lighter":
        if parent < 550:
            return 100
        if parent < 750:
            return FONT_WEIGHT_NORMAL
        return FONT_WEIGHT_BOLD
    if token in weight_dict:
        return int(weight_dict[token])
    try:
        weight = int(float(token))
    except ValueError:
        return None
    return weight if 1 <= weight <= 1000 else None


@dataclass(frozen=True)
class TextStyle:
    """Concrete text attributes resolved for one tree position.

    Every field is optional.  ``None`` means "not specified here", so
    that :meth:`merge` lets the other style's values fall through.

    Attributes:
        color: Foreground colour.  Accepts any format understood by
            :func:`normalise_colour`; stored normalised to RGBA.
        background_color: Background colour behind the glyphs.
        font_family: Font family name.
        font_size: Font size in logical pixels.
        font_weight: Numeric weight, ``100`` (thin) to ``900`` (black).
        font_style: Glyph slant.
        decoration: Lines drawn with the text.
        decoration_style: Pattern used for *decoration*.
        height: Line height as a multiple of *font_size*.
    """

    color: RGBA | Colour | None = None
    background_color: RGBA | Colour | None = None
    font_family: str | None = None
    font_size: float | None = None
    font_weight: int | None = None
    font_style: FontStyle | None = None
    decoration: TextDecoration | None = None
    decoration_style: TextDecorationStyle | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        for name in ("color", "background_color"):
            val = getattr(self, name)
            if val is not None:
                object.__setattr__(self, name, normalise_colour(val))
        if self.font_size is not None and self.font_size <= 0:
            raise ValueError(
                f"font_size must be positive, got {self.font_size}"
            )
        if self.font_weight is not None and not 1 <= self.font_weight <= 1000:
            raise ValueError(
                f"font_weight must be in [1, 1000], got {self.font_weight}"
            )
        if self.height is not None and self.height <= 0:
            raise ValueError(f"height must be positive, got {self.height}")
        if isinstance(self.font_style, str):
            object.__setattr__(self, "font_style", FontStyle(self.font_style))
        if isinstance(self.decoration_style, str):
            object.__setattr__(
                self, "decoration_style", TextDecorationStyle(self.decoration_style),
            )

    def merge(self, other: TextStyle | None) -> TextStyle:
        """Return a style with the non-``None`` fields of *other* applied.

        Fields that *other* leaves as ``None`` keep this style's value.
        Merging ``None`` returns this style unchanged.
        """
        if other is None:
            return self
        changes = {
            f.name: getattr(other, f.name)
            for f in dataclasses.fields(other)
            if getattr(other, f.name) is not None
        }
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    def copy_with(self, **changes) -> TextStyle:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Unset fields are omitted.  Colours are written as RGBA lists and
        the decoration as its CSS spelling.
        """
        special = frozenset({"color", "background_color", "decoration"})
        d = _non_default_items(self, exclude=special)
        for name in ("color", "background_color"):
            val = getattr(self, name)
            if val is not None:
                d[name] = list(val)
        if self.decoration is not None:
            d["decoration"] = self.decoration.to_css()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> TextStyle:
        """Deserialise from a dictionary."""
        kwargs: dict = {}
        for f in dataclasses.fields(cls):
            if f.name not in d:
                continue
            val = d[f.name]
            if f.name in ("color", "background_color") and isinstance(val, list):
                val = tuple(val)
            elif f.name == "decoration" and isinstance(val, str):
                val = _decoration_from_css(val)
            kwargs[f.name] = val
        return cls(**kwargs)


def _decoration_from_css(value: str) -> TextDecoration:
    lookup = {css: member for member, css in _DECORATION_CSS}
    return TextDecoration.combine(
        lookup[token] for token in value.split() if token in lookup
    )
