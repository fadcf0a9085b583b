"""Walk an HTML element tree and build widget primitives.

Every element gets a child :class:`HtmlStyleBuilder` via ``sub()``;
tag defaults, caller tag styles and the element's ``style`` attribute
are turned into contributions on it.  Styles are built lazily by the
:class:`WidgetFactory` when text spans or em-based insets need them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

from htmlstyle._constants import BLOCK_TAGS, SKIPPED_TAGS, TABLE_SECTION_TAGS
from htmlstyle.construction.css import CssLength, parse_declarations, parse_edge_lengths
from htmlstyle.construction.defaults import root_style
from htmlstyle.construction.style_ops import apply_declaration
from htmlstyle.construction.tags import TAG_STYLES, apply_tag_contributions
from htmlstyle.construction.widget_factory import TextBit, WidgetFactory
from htmlstyle.model.colour import RGBA, normalise_colour
from htmlstyle.model.context import BuildContext
from htmlstyle.model.style_builder import HtmlStyleBuilder
from htmlstyle.model.text_style import TextStyle
from htmlstyle.model.widgets import EdgeInsets, TableCell, Widget

logger = logging.getLogger(__name__)

_SIDES = ("top", "right", "bottom", "left")
_NON_CONTENT = (Comment, Declaration, Doctype, ProcessingInstruction)

Piece = Widget | TextBit


@dataclass
class _Box:
    """Non-inherited box properties of one element."""

    insets: dict[str, CssLength] = field(default_factory=dict)
    background: RGBA | None = None
    display: str | None = None


def build_widget_tree(
    html: str,
    *,
    context: BuildContext | None = None,
    text_style: TextStyle | None = None,
    tag_styles: Mapping[str, str] | None = None,
) -> Widget | None:
    """Convert *html* into a tree of widget primitives.

    Args:
        html: Markup to convert.  Fragments and full documents are both
            accepted.
        context: Ambient context.  Defaults to ``BuildContext()``.
        text_style: Override merged onto the context's default text
            style at the root.
        tag_styles: Extra inline CSS per tag name, applied after the tag
            defaults and before the element's own ``style`` attribute.

    Returns:
        The root widget, or ``None`` if the markup has no visible
        content.
    """
    if context is None:
        context = BuildContext()
    soup = BeautifulSoup(html, "html.parser")
    root = HtmlStyleBuilder.root(root_style(context, text_style))
    walker = _TreeWalker(WidgetFactory(context), tag_styles or {})
    body = root.sub()
    return walker.build_block(walker.walk_children(soup, body), body)


class _TreeWalker:
    def __init__(self, factory: WidgetFactory, tag_styles: Mapping[str, str]) -> None:
        self.factory = factory
        self.tag_styles = {k.lower(): v for k, v in tag_styles.items()}

    @property
    def context(self) -> BuildContext:
        return self.factory.context

    def walk_children(self, element: Tag, builder: HtmlStyleBuilder) -> list[Piece]:
        pieces: list[Piece] = []
        for child in element.children:
            if isinstance(child, _NON_CONTENT):
                continue
            if isinstance(child, NavigableString):
                pieces.append(TextBit(str(child), builder))
            elif isinstance(child, Tag):
                pieces.extend(self.walk_element(child, builder))
        return pieces

    def walk_element(self, element: Tag, parent: HtmlStyleBuilder) -> list[Piece]:
        tag = element.name.lower()
        if tag in SKIPPED_TAGS:
            return []

        builder = parent.sub()
        box = self._apply_styles(element, tag, builder)
        if box.display == "none":
            return []

        if tag == "br":
            return [TextBit("\n", builder, hard_break=True)]
        if tag == "img":
            return self._walk_img(element, builder)
        if tag == "hr":
            divider = self.factory.build_divider()
            return _pieces(self._decorate(divider, box, builder))
        if tag == "table":
            return _pieces(self._decorate(self._walk_table(element, builder), box, builder))

        pieces = self.walk_children(element, builder)
        if tag == "q":
            pieces = [TextBit("“", builder), *pieces, TextBit("”", builder)]
        elif tag == "li":
            pieces = [TextBit(_list_marker(element), builder), *pieces]

        is_block = tag in BLOCK_TAGS
        if box.display is not None:
            is_block = box.display != "inline"
        if not is_block:
            return pieces

        widget = self.build_block(pieces, builder)
        if tag == "pre":
            widget = self.factory.build_scroll_view(widget)
        return _pieces(self._decorate(widget, box, builder))

    def build_block(self, pieces: list[Piece], builder: HtmlStyleBuilder) -> Widget | None:
        """Group inline bits into paragraphs and stack them with block widgets."""
        children: list[Widget | None] = []
        bits: list[TextBit] = []
        for piece in pieces:
            if isinstance(piece, TextBit):
                bits.append(piece)
                continue
            if bits:
                children.append(self.factory.build_text(bits, builder))
                bits = []
            children.append(piece)
        if bits:
            children.append(self.factory.build_text(bits, builder))
        return self.factory.build_column(children)

    def _apply_styles(self, element: Tag, tag: str, builder: HtmlStyleBuilder) -> _Box:
        """Enqueue the element's style contributions and collect its box."""
        box = _Box()
        apply_tag_contributions(tag, _attributes(element), builder)

        sources = [TAG_STYLES.get(tag, ""), self.tag_styles.get(tag, "")]
        inline = element.get("style")
        if isinstance(inline, str):
            sources.append(inline)

        is_block = tag in BLOCK_TAGS or tag in ("hr", "table")
        for source in sources:
            for key, value in parse_declarations(source):
                if key in ("margin", "padding"):
                    for side, length in zip(_SIDES, parse_edge_lengths(value)):
                        _add_inset(box, f"{key}-{side}", length)
                elif key.startswith(("margin-", "padding-")):
                    _add_inset(box, key, _single_length(value))
                elif key == "display":
                    box.display = value.strip().lower()
                elif key == "background-color" and is_block:
                    try:
                        box.background = normalise_colour(value)
                    except ValueError:
                        logger.debug("ignoring background-color: %s", value)
                else:
                    apply_declaration(builder, key, value)
        return box

    def _decorate(
        self,
        widget: Widget | None,
        box: _Box,
        builder: HtmlStyleBuilder,
    ) -> Widget | None:
        widget = self.factory.build_decorated_box(widget, box.background)
        if not box.insets or widget is None:
            return widget
        # Insets in em are relative to the element's own font size.
        style = builder.build(self.context)
        font_size = style.font_size or self.context.default_font_size
        resolved = {side: 0.0 for side in _SIDES}
        for key, length in box.insets.items():
            side = key.split("-", 1)[1]
            resolved[side] += max(length.resolve(font_size, self.context.default_font_size), 0.0)
        return self.factory.build_padding(widget, EdgeInsets(**resolved))

    def _walk_img(self, element: Tag, builder: HtmlStyleBuilder) -> list[Piece]:
        attributes = _attributes(element)
        alt = attributes.get("alt") or attributes.get("title")
        image = self.factory.build_image(
            attributes.get("src"),
            alt=alt,
            width=_int_attribute(attributes.get("width")),
            height=_int_attribute(attributes.get("height")),
        )
        if image is not None:
            return [image]
        return [TextBit(alt, builder)] if alt else []

    def _walk_table(self, element: Tag, builder: HtmlStyleBuilder) -> Widget | None:
        caption: Widget | None = None
        rows: list[list[TableCell]] = []
        for child in element.find_all(True, recursive=False):
            name = child.name.lower()
            if name == "caption":
                caption = self.build_block(self.walk_element(child, builder), builder)
            elif name == "tr":
                rows.append(self._walk_row(child, builder))
            elif name in TABLE_SECTION_TAGS:
                section = builder.sub()
                self._apply_styles(child, name, section)
                for tr in child.find_all("tr", recursive=False):
                    rows.append(self._walk_row(tr, section))

        border = _int_attribute(_attributes(element).get("border")) or 0
        table = self.factory.build_table(rows, border_width=float(border))
        scroll = self.factory.build_scroll_view(table)
        return self.factory.build_column([caption, scroll])

    def _walk_row(self, tr: Tag, parent: HtmlStyleBuilder) -> list[TableCell]:
        row_builder = parent.sub()
        self._apply_styles(tr, "tr", row_builder)
        cells: list[TableCell] = []
        for cell in tr.find_all(("td", "th"), recursive=False):
            name = cell.name.lower()
            cell_builder = row_builder.sub()
            box = self._apply_styles(cell, name, cell_builder)
            pieces = self.walk_children(cell, cell_builder)
            widget = self._decorate(self.build_block(pieces, cell_builder), box, cell_builder)
            cells.append(TableCell(widget, header=name == "th"))
        return cells


def _pieces(widget: Widget | None) -> list[Piece]:
    return [widget] if widget is not None else []


def _attributes(element: Tag) -> dict[str, str]:
    attributes: dict[str, str] = {}
    for key, value in element.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        attributes[key.lower()] = value
    return attributes


def _add_inset(box: _Box, key: str, length: CssLength | None) -> None:
    if length is None:
        return
    side = key.split("-", 1)[1]
    if side not in _SIDES:
        return
    # Margin and padding on one side add up; a later declaration of
    # the same property replaces the earlier one.
    box.insets[key] = length


def _single_length(value: str) -> CssLength | None:
    top, _, _, _ = parse_edge_lengths(value)
    return top


def _int_attribute(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(float(value.strip().removesuffix("px")))
    except ValueError:
        return None


def _list_marker(li: Tag) -> str:
    parent = li.parent
    if isinstance(parent, Tag) and parent.name.lower() == "ol":
        start = _int_attribute(_attributes(parent).get("start"))
        if start is None:
            start = 1
        index = len(li.find_previous_siblings("li"))
        return f"{start + index}. "
    return "• "
