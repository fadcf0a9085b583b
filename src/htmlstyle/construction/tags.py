"""Default styling for HTML tags.

Most tags are described by the inline CSS they imply
(:data:`TAG_STYLES`), which goes through the same path as ``style``
attributes.  Tags whose styling depends on the ambient context
(platform fonts, theme colours) enqueue context-dependent
contributions in :func:`apply_tag_contributions`.
"""

from __future__ import annotations

from htmlstyle.construction.style_ops import style_decoration, style_value
from htmlstyle.model.context import BuildContext, Platform
from htmlstyle.model.html_style import HtmlStyle
from htmlstyle.model.style_builder import HtmlStyleBuilder
from htmlstyle.model.text_style import TextDecoration, TextStyle
from htmlstyle.model.values import TextAlign, TextDirection

_ITALIC = "font-style: italic"
_BOLD = "font-weight: bold"

TAG_STYLES: dict[str, str] = {
    "address": _ITALIC,
    "b": _BOLD,
    "big": "font-size: larger",
    "blockquote": "margin: 1em 40px",
    "center": "text-align: center",
    "cite": _ITALIC,
    "dd": "margin-left: 40px",
    "del": "text-decoration: line-through",
    "dfn": _ITALIC,
    "dl": "margin: 1em 0",
    "em": _ITALIC,
    "figure": "margin: 1em 40px",
    "h1": "font-size: 2em; font-weight: bold; margin: 0.67em 0",
    "h2": "font-size: 1.5em; font-weight: bold; margin: 0.83em 0",
    "h3": "font-size: 1.17em; font-weight: bold; margin: 1em 0",
    "h4": "font-weight: bold; margin: 1.33em 0",
    "h5": "font-size: 0.83em; font-weight: bold; margin: 1.67em 0",
    "h6": "font-size: 0.67em; font-weight: bold; margin: 2.33em 0",
    "hr": "margin-bottom: 1em",
    "i": _ITALIC,
    "ins": "text-decoration: underline",
    "mark": "background-color: yellow",
    "ol": "margin: 1em 0; padding-left: 40px",
    "p": "margin: 1em 0",
    "pre": "white-space: pre; margin: 1em 0",
    "s": "text-decoration: line-through",
    "small": "font-size: smaller",
    "strike": "text-decoration: line-through",
    "strong": _BOLD,
    "sub": "font-size: smaller",
    "sup": "font-size: smaller",
    "th": "font-weight: bold; text-align: center",
    "u": "text-decoration: underline",
    "ul": "margin: 1em 0; padding-left: 40px",
    "var": _ITALIC,
}
"""Inline CSS implied by each tag, applied before author styles."""

MONOSPACE_TAGS: frozenset[str] = frozenset({"code", "kbd", "pre", "samp", "tt"})


def monospace_family(platform: Platform) -> str:
    """Return the monospace font family for *platform*."""
    if platform in (Platform.IOS, Platform.MACOS):
        return "Courier"
    return "monospace"


def _style_monospace(style: HtmlStyle, context: BuildContext) -> HtmlStyle:
    return style.merge_with(TextStyle(font_family=monospace_family(context.platform)))


def _style_link(style: HtmlStyle, context: BuildContext) -> HtmlStyle:
    style = style_decoration(style, TextDecoration.UNDERLINE)
    return style.merge_with(TextStyle(color=context.link_colour))


def apply_tag_contributions(
    tag: str,
    attributes: dict[str, str],
    builder: HtmlStyleBuilder,
) -> None:
    """Enqueue the contributions a tag and its presentational attributes need.

    Covers the context-dependent tag styles and the ``dir`` and legacy
    ``align`` attributes.  Tag styles expressible as plain CSS live in
    :data:`TAG_STYLES` instead.
    """
    if tag in MONOSPACE_TAGS:
        builder.enqueue_with_context(_style_monospace)
    if tag == "a" and attributes.get("href") is not None:
        builder.enqueue_with_context(_style_link)

    direction = attributes.get("dir", "").strip().lower()
    if direction in ("ltr", "rtl"):
        builder.enqueue(style_value, TextDirection(direction))

    align = attributes.get("align", "").strip().lower()
    if align in ("left", "right", "center", "justify"):
        builder.enqueue(style_value, TextAlign(align))
