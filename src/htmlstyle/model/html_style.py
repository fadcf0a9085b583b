from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from htmlstyle.model.colour import RGBA
from htmlstyle.model.text_style import TextDecoration, TextStyle
from htmlstyle.model.values import (
    CssWhitespace,
    LineHeight,
    TextAlign,
    TextDirection,
    TextScaleFactor,
    TypedValues,
)

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class HtmlStyle:
    """An immutable styling snapshot at one position in the tree.

    A snapshot pairs a :class:`TypedValues` store with the merged
    :class:`TextStyle` and points back at the snapshot it was derived
    from.  Snapshots never own their children and are never mutated:
    every "modification" returns a new snapshot.  Equality is identity,
    which is what the builder cache relies on.

    Create the root with :meth:`root`; derive descendants with
    :meth:`copy_with` and :meth:`merge_with`.

    Attributes:
        parent: The snapshot this one inherits from, or ``None`` at the
            root.
        values: Typed values visible at this position.
    """

    values: TypedValues
    _text_style: TextStyle
    parent: HtmlStyle | None = None

    @classmethod
    def root(
        cls,
        values: Iterable[object],
        widget_text_style: TextStyle | None = None,
    ) -> HtmlStyle:
        """Create the parent-less root snapshot.

        The base :class:`TextStyle` is taken from *values* and
        *widget_text_style* is merged on top.  If a
        :class:`TextScaleFactor` other than ``1.0`` is present and a
        font size is resolved, the font size is multiplied by the
        factor.  This is the only place the scale factor is applied;
        descendants inherit the scaled size.

        Args:
            values: Initial values.  Must include a :class:`TextStyle`.
            widget_text_style: Caller override merged onto the base.

        Raises:
            ValueError: If *values* contains no :class:`TextStyle`.
        """
        store = TypedValues(values)
        text_style = store.get(TextStyle)
        if text_style is None:
            raise ValueError("root values must include a TextStyle")
        text_style = text_style.merge(widget_text_style)

        tsf = store.get(TextScaleFactor)
        font_size = text_style.font_size
        if tsf is not None and tsf.value != 1.0 and font_size is not None:
            text_style = text_style.copy_with(font_size=font_size * tsf.value)

        return cls(store, text_style)

    @property
    def color(self) -> RGBA | None:
        """The text colour, or ``None`` if unset."""
        return self._text_style.color

    @property
    def font_size(self) -> float | None:
        """The font size, or ``None`` if unset."""
        return self._text_style.font_size

    @property
    def text_decoration(self) -> TextDecoration | None:
        """The text decoration, or ``None`` if unset."""
        return self._text_style.decoration

    @property
    def text_direction(self) -> TextDirection:
        return self.value(TextDirection) or TextDirection.LTR

    @property
    def text_scale_factor(self) -> float:
        tsf = self.value(TextScaleFactor)
        return tsf.value if tsf is not None else 1.0

    @property
    def whitespace(self) -> CssWhitespace:
        return self.value(CssWhitespace) or CssWhitespace.NORMAL

    @property
    def text_align(self) -> TextAlign:
        return self.value(TextAlign) or TextAlign.START

    @property
    def text_style(self) -> TextStyle:
        """The resolved :class:`TextStyle`.

        A :class:`LineHeight` value, if present, is applied as
        :attr:`TextStyle.height` here rather than stored.
        """
        height = self.value(LineHeight)
        if height is None:
            return self._text_style
        return self._text_style.copy_with(height=height.value)

    @property
    def depth(self) -> int:
        """Number of ancestors above this snapshot."""
        n = 0
        node = self.parent
        while node is not None:
            n += 1
            node = node.parent
        return n

    def copy_with(
        self,
        *,
        parent: HtmlStyle | None = None,
        value: object | None = None,
        kind: type | None = None,
    ) -> HtmlStyle:
        """Return a copy with a typed value replaced and/or a new parent.

        Args:
            parent: New parent.  ``None`` keeps the current parent.
            value: Value to layer in, replacing the slot for *kind*.
            kind: Slot to replace.  Defaults to ``type(value)``.
        """
        values = self.values
        if value is not None:
            values = values.with_replaced(value, kind)
        return HtmlStyle(
            values,
            self._text_style,
            parent if parent is not None else self.parent,
        )

    def merge_with(self, style: TextStyle) -> HtmlStyle:
        """Return a copy with *style* merged into the text style.

        Non-``None`` fields of *style* override the current ones.  The
        parent and typed values are unchanged.
        """
        return HtmlStyle(self.values, self._text_style.merge(style), self.parent)

    def value(self, kind: type[T]) -> T | None:
        """Return the value of type *kind*, or ``None`` if absent."""
        return self.values.get(kind)

    def __repr__(self) -> str:
        return (
            f"HtmlStyle#{id(self):x}(depth={self.depth}, "
            f"text_style={self._text_style!r})"
        )
