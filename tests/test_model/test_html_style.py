"""Tests for HtmlStyle snapshots."""

import pytest

from htmlstyle.model.html_style import HtmlStyle
from htmlstyle.model.text_style import TextDecoration, TextStyle
from htmlstyle.model.values import (
    CssWhitespace,
    LineHeight,
    TextAlign,
    TextDirection,
    TextScaleFactor,
)


def _root(font_size=14.0, scale=1.0, **kwargs):
    values = [
        TextStyle(font_size=font_size, color="black"),
        TextScaleFactor(scale),
        TextDirection.LTR,
        CssWhitespace.NORMAL,
    ]
    return HtmlStyle.root(values, **kwargs)


class TestRoot:
    def test_no_parent(self):
        assert _root().parent is None

    def test_font_size_scaled(self):
        assert _root(14.0, 1.5).font_size == 21.0

    def test_unit_scale_leaves_size_exact(self):
        assert _root(14.0, 1.0).font_size == 14.0

    def test_widget_text_style_merged(self):
        root = _root(widget_text_style=TextStyle(color="red"))
        assert root.color == (1.0, 0.0, 0.0, 1.0)
        assert root.font_size == 14.0

    def test_widget_font_size_is_scaled(self):
        root = _root(scale=2.0, widget_text_style=TextStyle(font_size=10.0))
        assert root.font_size == 20.0

    def test_missing_text_style_raises(self):
        with pytest.raises(ValueError, match="TextStyle"):
            HtmlStyle.root([TextScaleFactor(1.0)])

    def test_missing_scale_factor_not_applied(self):
        root = HtmlStyle.root([TextStyle(font_size=12.0)])
        assert root.font_size == 12.0
        assert root.text_scale_factor == 1.0

    def test_scale_without_font_size(self):
        root = HtmlStyle.root([TextStyle(color="red"), TextScaleFactor(2.0)])
        assert root.font_size is None


class TestDerivedAccessors:
    def test_defaults_when_values_absent(self):
        root = HtmlStyle.root([TextStyle()])
        assert root.text_direction is TextDirection.LTR
        assert root.whitespace is CssWhitespace.NORMAL
        assert root.text_align is TextAlign.START
        assert root.text_decoration is None
        assert root.color is None

    def test_values_read_from_store(self):
        root = _root().copy_with(value=TextDirection.RTL)
        assert root.text_direction is TextDirection.RTL

    def test_text_scale_factor(self):
        assert _root(scale=1.25).text_scale_factor == 1.25

    def test_text_style_without_line_height(self):
        root = _root()
        assert root.text_style.height is None
        assert root.text_style is root.text_style

    def test_text_style_applies_line_height(self):
        style = _root().copy_with(value=LineHeight(1.5))
        assert style.text_style.height == 1.5
        assert style.text_style.font_size == 14.0

    def test_value_absent(self):
        assert _root().value(LineHeight) is None


class TestCopyAndMerge:
    def test_copy_with_value_keeps_parent_and_style(self):
        root = _root()
        child = root.copy_with(parent=root)
        updated = child.copy_with(value=CssWhitespace.PRE)
        assert updated.parent is root
        assert updated.whitespace is CssWhitespace.PRE
        assert updated.font_size == child.font_size
        assert child.whitespace is CssWhitespace.NORMAL

    def test_copy_with_parent(self):
        root = _root()
        child = root.copy_with(parent=root)
        assert child.parent is root
        assert child is not root

    def test_merge_with_keeps_parent_and_values(self):
        root = _root()
        child = root.copy_with(parent=root, value=TextDirection.RTL)
        merged = child.merge_with(TextStyle(decoration=TextDecoration.UNDERLINE))
        assert merged.parent is root
        assert merged.text_direction is TextDirection.RTL
        assert merged.text_decoration == TextDecoration.UNDERLINE

    def test_merge_none_fields_fall_through(self):
        merged = _root().merge_with(TextStyle(font_size=20.0))
        assert merged.font_size == 20.0
        assert merged.color == (0.0, 0.0, 0.0, 1.0)

    def test_snapshots_compare_by_identity(self):
        root = _root()
        assert root.copy_with() != root.copy_with()

    def test_immutable(self):
        with pytest.raises(AttributeError):
            _root().parent = None

    def test_depth(self):
        root = _root()
        child = root.copy_with(parent=root)
        grandchild = child.copy_with(parent=child)
        assert root.depth == 0
        assert grandchild.depth == 2
