"""Core data model for htmlstyle: values, snapshots, builders and widgets.

Everything is re-exported here so that ``from htmlstyle.model import
HtmlStyle`` works without knowing the module layout.
"""

from htmlstyle.model.colour import RGBA, Colour, colour_to_hex, normalise_colour
from htmlstyle.model.context import BuildContext, Platform
from htmlstyle.model.html_style import HtmlStyle
from htmlstyle.model.html_widget import HtmlWidget
from htmlstyle.model.style_builder import (
    Contribution,
    ContributionKind,
    HtmlStyleBuilder,
)
from htmlstyle.model.text_style import (
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
    TextScaleFactor,
    TypedValues,
)
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

__all__ = [
    "BuildContext",
    "Colour",
    "Column",
    "Contribution",
    "ContributionKind",
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
    "RGBA",
    "RichText",
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
    "colour_to_hex",
    "normalise_colour",
    "parse_font_weight",
]
