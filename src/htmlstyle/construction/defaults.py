"""Initial style values derived from the ambient context."""

from __future__ import annotations

from htmlstyle.model.context import BuildContext
from htmlstyle.model.html_style import HtmlStyle
from htmlstyle.model.text_style import TextStyle
from htmlstyle.model.values import CssWhitespace, TextScaleFactor


def default_values(context: BuildContext) -> list[object]:
    """Return the values every root snapshot starts from.

    The list holds the context's default :class:`TextStyle`, its
    :class:`TextScaleFactor` and :class:`TextDirection`, and
    :attr:`CssWhitespace.NORMAL`.
    """
    return [
        context.default_text_style,
        TextScaleFactor(context.text_scale_factor),
        context.text_direction,
        CssWhitespace.NORMAL,
    ]


def root_style(
    context: BuildContext,
    text_style: TextStyle | None = None,
) -> HtmlStyle:
    """Create the root snapshot for *context* with an optional override."""
    return HtmlStyle.root(default_values(context), text_style)
