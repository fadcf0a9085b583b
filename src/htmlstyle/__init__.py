"""htmlstyle: HTML markup to renderable UI primitives with CSS-like styling.

Markup is walked top-down; every element gets a style builder chained
to its parent's, and concrete styles are only resolved (and cached)
when text needs them.

Example usage::

    from htmlstyle import HtmlWidget

    widget = HtmlWidget("<p>Hello <b>world</b></p>")
    tree = widget.build()
"""

from htmlstyle.construction.build_tree import build_widget_tree
from htmlstyle.construction.defaults import default_values, root_style
from htmlstyle.construction.styles import StyleSet, load_styles, save_styles
from htmlstyle.model import (
    BuildContext,
    Colour,
    Column,
    CssWhitespace,
    DecoratedBox,
    Divider,
    EdgeInsets,
    FontStyle,
    HorizontalScroll,
    HtmlStyle,
    HtmlStyleBuilder,
    HtmlWidget,
    Image,
    LineHeight,
    Padding,
    Platform,
    RichText,
    Table,
    TableCell,
    TableRow,
    TextAlign,
    TextDecoration,
    TextDecorationStyle,
    TextDirection,
    TextScaleFactor,
    TextSpan,
    TextStyle,
    TypedValues,
    Widget,
    normalise_colour,
)

__all__ = [
    "BuildContext",
    "Colour",
    "Column",
    "CssWhitespace",
    "DecoratedBox",
    "Divider",
    "EdgeInsets",
    "FontStyle",
    "HorizontalScroll",
    "HtmlStyle",
    "HtmlStyleBuilder",
    "HtmlWidget",
    "Image",
    "LineHeight",
    "Padding",
    "Platform",
    "RichText",
    "StyleSet",
    "Table",
    "TableCell",
    "TableRow",
    "TextAlign",
    "TextDecoration",
    "TextDecorationStyle",
    "TextDirection",
    "TextScaleFactor",
    "TextSpan",
    "TextStyle",
    "TypedValues",
    "Widget",
    "build_widget_tree",
    "default_values",
    "load_styles",
    "normalise_colour",
    "root_style",
    "save_styles",
]
