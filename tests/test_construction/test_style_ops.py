"""Tests for CSS declarations applied as style contributions."""

import pytest

from htmlstyle.construction.defaults import root_style
from htmlstyle.construction.style_ops import apply_declaration
from htmlstyle.model.context import BuildContext
from htmlstyle.model.style_builder import HtmlStyleBuilder
from htmlstyle.model.text_style import (
    FontStyle,
    TextDecoration,
    TextDecorationStyle,
    TextStyle,
)
from htmlstyle.model.values import CssWhitespace, TextAlign, TextDirection


@pytest.fixture
def context():
    return BuildContext(default_text_style=TextStyle(font_size=16.0, color="black"))


@pytest.fixture
def root(context):
    return HtmlStyleBuilder.root(root_style(context))


def _built(root, context, *declarations):
    builder = root.sub()
    for key, value in declarations:
        apply_declaration(builder, key, value)
    return builder.build(context)


class TestColourDeclarations:
    def test_color(self, root, context):
        assert _built(root, context, ("color", "#ff0000")).color == (1.0, 0.0, 0.0, 1.0)

    def test_invalid_color_not_enqueued(self, root):
        builder = root.sub()
        assert not apply_declaration(builder, "color", "nope")
        assert not builder.has_contributions

    def test_background_color(self, root, context):
        built = _built(root, context, ("background-color", "yellow"))
        assert built.text_style.background_color == (1.0, 1.0, 0.0, 1.0)


class TestFontDeclarations:
    def test_font_family_first_entry(self, root, context):
        built = _built(root, context, ("font-family", '"Fira Sans", Arial, sans-serif'))
        assert built.text_style.font_family == "Fira Sans"

    def test_font_size_px(self, root, context):
        assert _built(root, context, ("font-size", "20px")).font_size == 20.0

    def test_font_size_em_of_parent(self, root, context):
        parent = root.sub()
        apply_declaration(parent, "font-size", "10px")
        child = parent.sub()
        apply_declaration(child, "font-size", "2em")
        assert child.build(context).font_size == 20.0

    def test_font_size_keyword_uses_context_default(self, root):
        builder = root.sub()
        apply_declaration(builder, "font-size", "x-large")
        small = BuildContext(default_text_style=TextStyle(font_size=10.0))
        assert builder.build(small).font_size == 15.0

    def test_invalid_font_size_keeps_parent(self, root, context):
        assert _built(root, context, ("font-size", "enormous")).font_size == 16.0

    def test_font_style(self, root, context):
        built = _built(root, context, ("font-style", "oblique"))
        assert built.text_style.font_style is FontStyle.ITALIC

    def test_font_weight(self, root, context):
        assert _built(root, context, ("font-weight", "bold")).text_style.font_weight == 700

    def test_font_weight_bolder_relative_to_parent(self, root, context):
        parent = root.sub()
        apply_declaration(parent, "font-weight", "600")
        child = parent.sub()
        apply_declaration(child, "font-weight", "bolder")
        assert child.build(context).text_style.font_weight == 900

    def test_font_weight_bolder_replaces_same_element_weight(self, root, context):
        built = _built(root, context, ("font-weight", "bold"), ("font-weight", "bolder"))
        assert built.text_style.font_weight == 700

    def test_font_size_em_replaces_same_element_size(self, root, context):
        built = _built(root, context, ("font-size", "2em"), ("font-size", "1.5em"))
        assert built.font_size == 24.0

    def test_font_size_larger_replaces_same_element_size(self, root, context):
        built = _built(root, context, ("font-size", "40px"), ("font-size", "larger"))
        assert built.font_size == pytest.approx(16.0 * 1.2)

    def test_font_size_rem_uses_scaled_root(self):
        scaled = BuildContext(
            default_text_style=TextStyle(font_size=14.0), text_scale_factor=1.5,
        )
        parent = HtmlStyleBuilder.root(root_style(scaled)).sub()
        apply_declaration(parent, "font-size", "40px")
        child = parent.sub()
        apply_declaration(child, "font-size", "1rem")
        assert child.build(scaled).font_size == 21.0

    def test_unknown_font_weight_ignored(self, root):
        assert not apply_declaration(root.sub(), "font-weight", "chunky")


class TestDecorationDeclarations:
    def test_underline(self, root, context):
        built = _built(root, context, ("text-decoration", "underline"))
        assert built.text_decoration == TextDecoration.UNDERLINE

    def test_inherits_and_combines(self, root, context):
        parent = root.sub()
        apply_declaration(parent, "text-decoration", "underline")
        child = parent.sub()
        apply_declaration(child, "text-decoration-line", "line-through")
        expected = TextDecoration.UNDERLINE | TextDecoration.LINE_THROUGH
        assert child.build(context).text_decoration == expected

    def test_none_clears(self, root, context):
        built = _built(
            root, context,
            ("text-decoration", "underline"), ("text-decoration", "none"),
        )
        assert built.text_decoration == TextDecoration.NONE

    def test_shorthand_style(self, root, context):
        built = _built(root, context, ("text-decoration", "underline wavy"))
        assert built.text_style.decoration_style is TextDecorationStyle.WAVY

    def test_same_element_replaces_lines(self, root, context):
        built = _built(
            root, context,
            ("text-decoration", "underline"), ("text-decoration", "line-through"),
        )
        assert built.text_decoration == TextDecoration.LINE_THROUGH

    def test_decoration_style(self, root, context):
        built = _built(root, context, ("text-decoration-style", "double"))
        assert built.text_style.decoration_style is TextDecorationStyle.DOUBLE


class TestTypedValueDeclarations:
    def test_line_height_multiplier(self, root, context):
        built = _built(root, context, ("line-height", "1.5"))
        assert built.text_style.height == 1.5

    def test_line_height_length(self, root, context):
        built = _built(root, context, ("line-height", "24px"))
        assert built.text_style.height == 1.5

    def test_line_height_percent(self, root, context):
        built = _built(root, context, ("line-height", "200%"))
        assert built.text_style.height == 2.0

    def test_line_height_normal(self, root, context):
        built = _built(root, context, ("line-height", "1.5"), ("line-height", "normal"))
        assert built.text_style.height == 1.5

    def test_white_space(self, root, context):
        assert _built(root, context, ("white-space", "pre")).whitespace is CssWhitespace.PRE

    def test_direction(self, root, context):
        assert _built(root, context, ("direction", "rtl")).text_direction is TextDirection.RTL

    def test_text_align(self, root, context):
        assert _built(root, context, ("text-align", "center")).text_align is TextAlign.CENTER

    def test_invalid_text_align(self, root):
        assert not apply_declaration(root.sub(), "text-align", "middle")


class TestUnsupported:
    def test_unknown_property(self, root, caplog):
        builder = root.sub()
        with caplog.at_level("DEBUG", logger="htmlstyle.construction.style_ops"):
            assert not apply_declaration(builder, "transform", "rotate(3deg)")
        assert "transform" in caplog.text
        assert not builder.has_contributions
