"""Markup conversion: HTML to widget primitives via the style builder tree."""

from htmlstyle.construction.build_tree import build_widget_tree
from htmlstyle.construction.css import (
    CssLength,
    parse_declarations,
    parse_edge_lengths,
    parse_font_size,
    parse_length,
    parse_text_decoration,
)
from htmlstyle.construction.defaults import default_values, root_style
from htmlstyle.construction.style_ops import apply_declaration
from htmlstyle.construction.styles import StyleSet, load_styles, save_styles
from htmlstyle.construction.tags import TAG_STYLES, monospace_family
from htmlstyle.construction.widget_factory import TextBit, WidgetFactory

__all__ = [
    "CssLength",
    "StyleSet",
    "TAG_STYLES",
    "TextBit",
    "WidgetFactory",
    "apply_declaration",
    "build_widget_tree",
    "default_values",
    "load_styles",
    "monospace_family",
    "parse_declarations",
    "parse_edge_lengths",
    "parse_font_size",
    "parse_length",
    "parse_text_decoration",
    "root_style",
    "save_styles",
]
