"""CSS declarations turned into style contributions.

Each ``style_*`` function is a contribution callback: it receives the
snapshot being built and its input, and returns a snapshot derived
with ``copy_with``/``merge_with`` so the parent reference is kept.
:func:`apply_declaration` maps one CSS declaration onto the right
callback and enqueues it.
"""

from __future__ import annotations

import functools
import logging

from htmlstyle.construction.css import (
    parse_font_size,
    parse_length,
    parse_text_decoration,
)
from htmlstyle.model.colour import normalise_colour
from htmlstyle.model.context import BuildContext
from htmlstyle.model.html_style import HtmlStyle
from htmlstyle.model.style_builder import HtmlStyleBuilder
from htmlstyle.model.text_style import (
    FONT_WEIGHT_NORMAL,
    FontStyle,
    TextDecoration,
    TextDecorationStyle,
    TextStyle,
    parse_font_weight,
)
from htmlstyle.model.values import (
    CssWhitespace,
    LineHeight,
    TextAlign,
    TextDirection,
)

logger = logging.getLogger(__name__)


def style_color(style: HtmlStyle, colour: object) -> HtmlStyle:
    return style.merge_with(TextStyle(color=colour))


def style_background_color(style: HtmlStyle, colour: object) -> HtmlStyle:
    return style.merge_with(TextStyle(background_color=colour))


def style_font_family(style: HtmlStyle, family: str) -> HtmlStyle:
    return style.merge_with(TextStyle(font_family=family))


def style_font_size(style: HtmlStyle, size: float) -> HtmlStyle:
    return style.merge_with(TextStyle(font_size=size))


def style_font_size_css(style: HtmlStyle, value: str, context: BuildContext) -> HtmlStyle:
    """Resolve a CSS font-size against the parent and the context default.

    ``em``, ``%``, ``larger`` and ``smaller`` are relative to the
    parent element's size, so a later declaration on the same element
    replaces an earlier one instead of compounding it.  ``rem`` is
    relative to the root snapshot, which already carries the text
    scale factor.  Unresolvable values leave *style* unchanged.
    """
    size = parse_font_size(
        value,
        _inherited(style).font_size,
        context.default_font_size,
        root_size=_root(style).font_size,
    )
    if size is None:
        return style
    return style_font_size(style, size)


def style_font_style(style: HtmlStyle, font_style: FontStyle) -> HtmlStyle:
    return style.merge_with(TextStyle(font_style=font_style))


def style_font_weight(style: HtmlStyle, value: str | int) -> HtmlStyle:
    parent = _inherited(style).text_style.font_weight or FONT_WEIGHT_NORMAL
    weight = parse_font_weight(value, parent)
    if weight is None:
        return style
    return style.merge_with(TextStyle(font_weight=weight))


def style_text_decoration(style: HtmlStyle, value: str) -> HtmlStyle:
    """Set decoration lines on top of the parent's, plus an optional style.

    ``none`` clears all lines.
    """
    decoration = parse_text_decoration(value, _inherited(style).text_decoration)
    decoration_style = _decoration_style_token(value)
    if decoration is None and decoration_style is None:
        return style
    return style.merge_with(
        TextStyle(decoration=decoration, decoration_style=decoration_style),
    )


def style_decoration(style: HtmlStyle, line: TextDecoration) -> HtmlStyle:
    """Add *line* to the inherited decoration."""
    current = style.text_decoration or TextDecoration.NONE
    return style.merge_with(TextStyle(decoration=current | line))


def style_decoration_style(style: HtmlStyle, value: TextDecorationStyle) -> HtmlStyle:
    return style.merge_with(TextStyle(decoration_style=value))


def style_line_height(style: HtmlStyle, value: str) -> HtmlStyle:
    """Store a line height multiplier.

    Unit-less numbers are multipliers; lengths and percentages are
    divided by the current font size.  ``normal`` leaves the style
    unchanged.
    """
    height = _line_height_multiplier(value, style.font_size)
    if height is None:
        return style
    return style.copy_with(value=LineHeight(height))


def style_value(style: HtmlStyle, value: object) -> HtmlStyle:
    """Layer a typed value (direction, whitespace, alignment, ...) in."""
    return style.copy_with(value=value)


def _inherited(style: HtmlStyle) -> HtmlStyle:
    """The parent element's snapshot, or *style* itself at the root."""
    return style.parent if style.parent is not None else style


def _root(style: HtmlStyle) -> HtmlStyle:
    while style.parent is not None:
        style = style.parent
    return style


def _line_height_multiplier(value: str, font_size: float | None) -> float | None:
    token = value.strip().lower()
    if token == "normal":
        return None
    try:
        multiplier = float(token)
    except ValueError:
        length = parse_length(token)
        if length is None or not font_size:
            return None
        if length.unit == "%":
            multiplier = length.number / 100.0
        else:
            multiplier = length.resolve(font_size) / font_size
    return multiplier if multiplier > 0 else None


def _decoration_style_token(value: str) -> TextDecorationStyle | None:
    for token in value.strip().lower().split():
        try:
            return TextDecorationStyle(token)
        except ValueError:
            continue
    return None


def _first_font_family(value: str) -> str | None:
    for family in value.split(","):
        family = family.strip().strip("'\"").strip()
        if family:
            return family
    return None


def _parse_colour(value: str) -> tuple[float, float, float, float] | None:
    try:
        return normalise_colour(value)
    except ValueError:
        return None


def apply_declaration(builder: HtmlStyleBuilder, key: str, value: str) -> bool:
    """Enqueue the contribution for one inherited CSS declaration.

    Values that can be validated without the build context are checked
    here so invalid declarations add nothing to the queue.

    Returns:
        ``True`` if a contribution was enqueued; ``False`` if the
        property or value is not supported (logged at ``DEBUG``).
    """
    token = value.strip().lower()

    if key == "color":
        colour = _parse_colour(value)
        if colour is not None:
            builder.enqueue(style_color, colour)
            return True

    elif key == "background-color":
        colour = _parse_colour(value)
        if colour is not None:
            builder.enqueue(style_background_color, colour)
            return True

    elif key == "font-family":
        family = _first_font_family(value)
        if family is not None:
            builder.enqueue(style_font_family, family)
            return True

    elif key == "font-size":
        builder.enqueue_with_context(
            functools.partial(_font_size_with_context, value=value),
        )
        return True

    elif key == "font-style":
        if token in ("italic", "oblique"):
            builder.enqueue(style_font_style, FontStyle.ITALIC)
            return True
        if token == "normal":
            builder.enqueue(style_font_style, FontStyle.NORMAL)
            return True

    elif key == "font-weight":
        if token in ("bolder", "lighter") or parse_font_weight(token) is not None:
            builder.enqueue(style_font_weight, token)
            return True

    elif key in ("text-decoration", "text-decoration-line"):
        if parse_text_decoration(value) is not None or (
            key == "text-decoration" and _decoration_style_token(value) is not None
        ):
            builder.enqueue(style_text_decoration, value)
            return True

    elif key == "text-decoration-style":
        decoration_style = _decoration_style_token(value)
        if decoration_style is not None:
            builder.enqueue(style_decoration_style, decoration_style)
            return True

    elif key == "line-height":
        builder.enqueue(style_line_height, value)
        return True

    elif key == "white-space":
        try:
            builder.enqueue(style_value, CssWhitespace(token))
            return True
        except ValueError:
            pass

    elif key == "direction":
        try:
            builder.enqueue(style_value, TextDirection(token))
            return True
        except ValueError:
            pass

    elif key == "text-align":
        try:
            builder.enqueue(style_value, TextAlign(token))
            return True
        except ValueError:
            pass

    logger.debug("ignoring unsupported declaration %s: %s", key, value)
    return False


def _font_size_with_context(
    style: HtmlStyle, context: BuildContext, *, value: str,
) -> HtmlStyle:
    return style_font_size_css(style, value, context)
