"""Construction of widget primitives from resolved styles."""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Sequence
from dataclasses import dataclass

from htmlstyle.model.colour import RGBA
from htmlstyle.model.context import BuildContext
from htmlstyle.model.style_builder import HtmlStyleBuilder
from htmlstyle.model.values import CssWhitespace
from htmlstyle.model.widgets import (
    Column,
    DecoratedBox,
    Divider,
    EdgeInsets,
    HorizontalScroll,
    Image,
    Padding,
    RichText,
    Table,
    TableCell,
    TableRow,
    TextSpan,
    Widget,
)

_DATA_URI_RE = re.compile(r"^data:image/[\w.+-]+;base64,", re.IGNORECASE)
_COLLAPSE_RE = re.compile(r"\s+")
_COLLAPSE_LINE_RE = re.compile(r"[ \t\f\r]*\n[ \t\f\r]*|[ \t\f\r]+")

_COLLAPSING = frozenset({CssWhitespace.NORMAL, CssWhitespace.NOWRAP})


@dataclass(frozen=True)
class TextBit:
    """A piece of inline text and the builder that styles it.

    Attributes:
        text: Raw text from the markup.
        builder: Style builder of the innermost enclosing element.
        hard_break: A forced line break (``<br>``).  Its text is kept
            as-is whatever the whitespace mode.
    """

    text: str
    builder: HtmlStyleBuilder
    hard_break: bool = False


class WidgetFactory:
    """Builds primitives for one :class:`BuildContext`.

    Styles are only built here, when text or sizes actually need them.
    """

    def __init__(self, context: BuildContext) -> None:
        self.context = context

    def build_text(
        self,
        bits: Sequence[TextBit],
        block: HtmlStyleBuilder,
    ) -> RichText | None:
        """Build a paragraph from inline *bits*.

        Whitespace is collapsed according to each bit's resolved
        :class:`CssWhitespace`, leading and trailing collapsible spaces
        are trimmed, and consecutive bits that share styling are
        merged into one span.

        Args:
            bits: Inline text in reading order.
            block: Builder of the block element the paragraph belongs
                to; supplies alignment and direction.

        Returns:
            The paragraph, or ``None`` if no visible text remains.
        """
        runs: list[tuple[str, HtmlStyleBuilder, bool]] = []
        at_line_start = True
        for bit in bits:
            style = bit.builder.build(self.context)
            whitespace = style.whitespace
            text = bit.text
            collapsible = False
            if bit.hard_break:
                at_line_start = True
            elif whitespace in _COLLAPSING:
                text = _COLLAPSE_RE.sub(" ", text)
                collapsible = True
            elif whitespace is CssWhitespace.PRE_LINE:
                text = _COLLAPSE_LINE_RE.sub(
                    lambda m: "\n" if "\n" in m.group(0) else " ", text,
                )
                collapsible = True
            if collapsible:
                if at_line_start or (runs and runs[-1][0].endswith((" ", "\n"))):
                    text = text.lstrip(" ")
                if text:
                    at_line_start = text.endswith("\n")
            elif text and not bit.hard_break:
                at_line_start = text.endswith("\n")
            if text:
                runs.append((text, bit.builder, collapsible))

        # Trim trailing collapsible space at the end of the block and
        # before forced breaks.
        for i, (text, builder, collapsible) in enumerate(runs):
            if not collapsible:
                continue
            if i == len(runs) - 1 or runs[i + 1][0] == "\n":
                runs[i] = (text.rstrip(" "), builder, collapsible)

        spans: list[TextSpan] = []
        previous: HtmlStyleBuilder | None = None
        for text, builder, _ in runs:
            if not text:
                continue
            if spans and previous is not None and builder.has_same_style_with(previous):
                last = spans[-1]
                spans[-1] = TextSpan(last.text + text, last.style)
            else:
                spans.append(TextSpan(text, builder.build(self.context).text_style))
            previous = builder

        if not spans:
            return None
        block_style = block.build(self.context)
        return RichText(
            tuple(spans),
            text_align=block_style.text_align,
            text_direction=block_style.text_direction,
        )

    def build_column(self, children: Sequence[Widget | None]) -> Widget | None:
        """Stack *children* vertically.

        ``None`` entries are dropped; a single child is returned as-is
        and no children gives ``None``.
        """
        widgets = tuple(child for child in children if child is not None)
        if not widgets:
            return None
        if len(widgets) == 1:
            return widgets[0]
        return Column(widgets)

    def build_padding(self, child: Widget | None, padding: EdgeInsets) -> Widget | None:
        """Wrap *child* in *padding*.

        Zero insets return *child* unchanged.  Padding around padding
        is merged into one: horizontal insets add up while vertical
        insets take the larger value, approximating margin collapsing.
        """
        if child is None:
            return None
        if padding.is_zero:
            return child
        if isinstance(child, Padding):
            inner = child.padding
            padding = EdgeInsets(
                left=inner.left + padding.left,
                top=max(inner.top, padding.top),
                right=inner.right + padding.right,
                bottom=max(inner.bottom, padding.bottom),
            )
            child = child.child
        return Padding(child, padding)

    def build_decorated_box(self, child: Widget | None, colour: RGBA | None) -> Widget | None:
        if child is None or colour is None:
            return child
        return DecoratedBox(child, colour)

    def build_divider(self) -> Divider:
        return Divider()

    def build_image(
        self,
        src: str | None,
        *,
        alt: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> Image | None:
        """Build an image from a URL or ``data:`` URI.

        Returns:
            The image, or ``None`` when there is no usable source (the
            caller falls back to *alt* text).
        """
        src = (src or "").strip()
        if not src:
            return None

        aspect_ratio = None
        if width and height and width > 0 and height > 0:
            aspect_ratio = width / height

        if src.lower().startswith("data:"):
            data = self.build_image_bytes(src)
            if data is None:
                return None
            return Image(data=data, alt=alt, aspect_ratio=aspect_ratio)
        return Image(url=src, alt=alt, aspect_ratio=aspect_ratio)

    def build_image_bytes(self, data_uri: str) -> bytes | None:
        """Decode a base64 ``data:image/...`` URI, or return ``None``."""
        match = _DATA_URI_RE.match(data_uri)
        if match is None:
            return None
        try:
            data = base64.b64decode(data_uri[match.end():], validate=False)
        except (binascii.Error, ValueError):
            return None
        return data or None

    def build_scroll_view(self, child: Widget | None) -> Widget | None:
        if child is None:
            return None
        return HorizontalScroll(child)

    def build_table(
        self,
        rows: Sequence[Sequence[TableCell]],
        *,
        border_width: float = 0.0,
    ) -> Table | None:
        """Build a table, padding short rows with empty cells."""
        rows = [row for row in rows if row]
        if not rows:
            return None
        n_columns = max(len(row) for row in rows)
        table_rows = tuple(
            TableRow(tuple(row) + (TableCell(),) * (n_columns - len(row)))
            for row in rows
        )
        return Table(table_rows, border_width=border_width)
