"""Renderable UI primitives produced from markup.

These are plain frozen records describing *what* to draw.  Layout and
painting are the renderer's job.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from htmlstyle.model.colour import RGBA
from htmlstyle.model.text_style import TextStyle
from htmlstyle.model.values import TextAlign, TextDirection


class Widget:
    """Base class for all primitives."""

    @property
    def children(self) -> tuple[Widget, ...]:
        return ()

    def walk(self) -> Iterator[Widget]:
        """Yield this widget and all of its descendants, depth first."""
        stack: list[Widget] = [self]
        while stack:
            widget = stack.pop()
            yield widget
            stack.extend(reversed(widget.children))


@dataclass(frozen=True)
class TextSpan:
    """A run of text drawn with a single style."""

    text: str
    style: TextStyle


@dataclass(frozen=True)
class RichText(Widget):
    """A paragraph of styled text spans.

    Attributes:
        spans: Text runs in reading order.
        text_align: Horizontal alignment of the paragraph.
        text_direction: Base direction of the paragraph.
    """

    spans: tuple[TextSpan, ...]
    text_align: TextAlign = TextAlign.START
    text_direction: TextDirection = TextDirection.LTR

    @property
    def plain_text(self) -> str:
        """The concatenated text of all spans."""
        return "".join(span.text for span in self.spans)


@dataclass(frozen=True)
class Image(Widget):
    """An image from a URL or inline bytes.

    Exactly one of *url* and *data* is set.

    Attributes:
        url: Network or relative URL.
        data: Decoded bytes from a ``data:`` URI.
        alt: Alternative text.
        aspect_ratio: Width divided by height, when both are known.
    """

    url: str | None = None
    data: bytes | None = None
    alt: str | None = None
    aspect_ratio: float | None = None

    def __post_init__(self) -> None:
        if (self.url is None) == (self.data is None):
            raise ValueError("exactly one of url and data must be given")


@dataclass(frozen=True)
class Divider(Widget):
    """A horizontal rule."""

    thickness: float = 1.0
    colour: RGBA = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class EdgeInsets:
    """Offsets on each side of a box, in logical pixels."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def is_zero(self) -> bool:
        return not (self.left or self.top or self.right or self.bottom)


@dataclass(frozen=True)
class Padding(Widget):
    child: Widget
    padding: EdgeInsets

    @property
    def children(self) -> tuple[Widget, ...]:
        return (self.child,)


@dataclass(frozen=True)
class DecoratedBox(Widget):
    """Paints a background colour behind its child."""

    child: Widget
    colour: RGBA

    @property
    def children(self) -> tuple[Widget, ...]:
        return (self.child,)


@dataclass(frozen=True)
class Column(Widget):
    """Children stacked vertically, stretched to the full width."""

    widgets: tuple[Widget, ...]

    @property
    def children(self) -> tuple[Widget, ...]:
        return self.widgets


@dataclass(frozen=True)
class HorizontalScroll(Widget):
    """Lets a wide child scroll horizontally instead of overflowing."""

    child: Widget

    @property
    def children(self) -> tuple[Widget, ...]:
        return (self.child,)


@dataclass(frozen=True)
class TableCell(Widget):
    child: Widget | None = None
    header: bool = False

    @property
    def children(self) -> tuple[Widget, ...]:
        return (self.child,) if self.child is not None else ()


@dataclass(frozen=True)
class TableRow(Widget):
    cells: tuple[TableCell, ...]

    @property
    def children(self) -> tuple[Widget, ...]:
        return self.cells


@dataclass(frozen=True)
class Table(Widget):
    """A grid of cells.

    Attributes:
        rows: Rows in document order (head, body, foot).
        border_width: Width of cell borders; ``0`` draws none.
    """

    rows: tuple[TableRow, ...]
    border_width: float = 0.0

    @property
    def children(self) -> tuple[Widget, ...]:
        return self.rows

    @property
    def column_count(self) -> int:
        return max((len(row.cells) for row in self.rows), default=0)
