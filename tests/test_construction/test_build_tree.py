"""Tests for converting markup into widget trees."""

import pytest

from htmlstyle.construction.build_tree import build_widget_tree
from htmlstyle.model.context import BuildContext, Platform
from htmlstyle.model.text_style import FontStyle, TextDecoration, TextStyle
from htmlstyle.model.values import TextAlign, TextDirection
from htmlstyle.model.widgets import (
    Column,
    DecoratedBox,
    Divider,
    HorizontalScroll,
    Image,
    Padding,
    RichText,
    Table,
)


@pytest.fixture
def context():
    return BuildContext(default_text_style=TextStyle(font_size=16.0, color="black"))


def _texts(widget):
    return [w for w in widget.walk() if isinstance(w, RichText)]


def _build(html, context, **kwargs):
    return build_widget_tree(html, context=context, **kwargs)


class TestInlineText:
    def test_plain_text(self, context):
        widget = _build("Hello world", context)
        assert isinstance(widget, RichText)
        assert widget.plain_text == "Hello world"
        assert widget.spans[0].style.font_size == 16.0

    def test_empty_markup(self, context):
        assert _build("", context) is None
        assert _build("   <!-- comment -->  ", context) is None

    def test_bold_span(self, context):
        widget = _build("Hello <b>world</b>", context)
        assert [s.text for s in widget.spans] == ["Hello ", "world"]
        assert widget.spans[1].style.font_weight == 700

    def test_nested_inheritance(self, context):
        widget = _build(
            '<span style="color: red">a<i>b<span style="font-size: 20px">c</span></i></span>',
            context,
        )
        a, b, c = widget.spans
        assert a.style.color == (1.0, 0.0, 0.0, 1.0)
        assert b.style.color == a.style.color
        assert b.style.font_style is FontStyle.ITALIC
        assert c.style.font_size == 20.0
        assert c.style.font_style is FontStyle.ITALIC

    def test_unstyled_spans_merge(self, context):
        widget = _build("a<span>b</span><span>c</span>", context)
        assert len(widget.spans) == 1
        assert widget.plain_text == "abc"

    def test_decorations_combine(self, context):
        widget = _build("<u>a<s>b</s></u>", context)
        expected = TextDecoration.UNDERLINE | TextDecoration.LINE_THROUGH
        assert widget.spans[1].style.decoration == expected

    def test_br(self, context):
        assert _build("one<br>two", context).plain_text == "one\ntwo"

    def test_q_adds_quotes(self, context):
        assert _build("<q>hi</q>", context).plain_text == "“hi”"

    def test_skipped_tags(self, context):
        widget = _build("<style>p { color: red }</style><script>x()</script>ok", context)
        assert widget.plain_text == "ok"

    def test_display_none(self, context):
        widget = _build('a<span style="display: none">hidden</span>b', context)
        assert widget.plain_text == "ab"

    def test_code_uses_platform_font(self):
        widget = build_widget_tree("<code>x</code>", context=BuildContext(platform=Platform.IOS))
        assert widget.spans[0].style.font_family == "Courier"

    def test_link(self, context):
        widget = _build('<a href="#">go</a>', context)
        assert widget.spans[0].style.color == context.link_colour
        assert widget.spans[0].style.decoration == TextDecoration.UNDERLINE

    def test_font_size_keyword(self, context):
        widget = _build('<span style="font-size: xx-large">x</span>', context)
        assert widget.spans[0].style.font_size == 32.0

    def test_text_style_override(self, context):
        widget = _build("x", context, text_style=TextStyle(color="blue"))
        assert widget.spans[0].style.color == (0.0, 0.0, 1.0, 1.0)

    def test_scale_factor_applied_once(self):
        ctx = BuildContext(
            default_text_style=TextStyle(font_size=10.0), text_scale_factor=2.0,
        )
        widget = build_widget_tree('a<span style="font-size: 1.5em">b</span>', context=ctx)
        assert widget.spans[0].style.font_size == 20.0
        assert widget.spans[1].style.font_size == 30.0


class TestBlocks:
    def test_paragraphs_stack(self, context):
        widget = _build("<p>one</p><p>two</p>", context)
        assert isinstance(widget, Column)
        assert [t.plain_text for t in _texts(widget)] == ["one", "two"]

    def test_paragraph_margin_in_em(self, context):
        widget = _build("<p>one</p>", context)
        assert isinstance(widget, Padding)
        assert widget.padding.top == 16.0
        assert widget.padding.bottom == 16.0

    def test_heading(self, context):
        widget = _build("<h1>Title</h1>", context)
        assert isinstance(widget, Padding)
        span = widget.child.spans[0]
        assert span.style.font_size == 32.0
        assert span.style.font_weight == 700
        # Margins are relative to the heading's own size.
        assert widget.padding.top == pytest.approx(0.67 * 32.0)

    def test_inline_text_around_block(self, context):
        widget = _build("before<div>inside</div>after", context)
        assert [t.plain_text for t in _texts(widget)] == ["before", "inside", "after"]

    def test_text_align(self, context):
        widget = _build('<div style="text-align: right">x</div>', context)
        assert widget.text_align is TextAlign.RIGHT

    def test_text_align_inherited(self, context):
        widget = _build('<div style="text-align: center"><div>x</div></div>', context)
        assert widget.text_align is TextAlign.CENTER

    def test_dir_attribute(self, context):
        widget = _build('<div dir="rtl">x</div>', context)
        assert widget.text_direction is TextDirection.RTL

    def test_block_background(self, context):
        widget = _build('<div style="background-color: #ff0">x</div>', context)
        assert isinstance(widget, DecoratedBox)
        assert widget.colour == (1.0, 1.0, 0.0, 1.0)

    def test_inline_background(self, context):
        widget = _build("<mark>x</mark>", context)
        assert isinstance(widget, RichText)
        assert widget.spans[0].style.background_color == (1.0, 1.0, 0.0, 1.0)

    def test_margin_and_padding_add(self, context):
        widget = _build('<div style="margin-left: 4px; padding-left: 6px">x</div>', context)
        assert widget.padding.left == 10.0

    def test_display_block(self, context):
        widget = _build('<span style="display: block">a</span>b', context)
        assert [t.plain_text for t in _texts(widget)] == ["a", "b"]

    def test_pre(self, context):
        widget = _build("<pre>  a\n  b</pre>", context)
        scroll = next(w for w in widget.walk() if isinstance(w, HorizontalScroll))
        text = scroll.child
        assert text.plain_text == "  a\n  b"
        assert text.spans[0].style.font_family == "monospace"

    def test_lists(self, context):
        widget = _build("<ul><li>a</li><li>b</li></ul><ol start=3><li>c</li></ol>", context)
        assert [t.plain_text for t in _texts(widget)] == ["• a", "• b", "3. c"]

    def test_ordered_list_numbering(self, context):
        widget = _build("<ol><li>a</li><li>b</li></ol>", context)
        assert [t.plain_text for t in _texts(widget)] == ["1. a", "2. b"]

    def test_ordered_list_start_zero(self, context):
        widget = _build('<ol start="0"><li>a</li><li>b</li></ol>', context)
        assert [t.plain_text for t in _texts(widget)] == ["0. a", "1. b"]

    def test_tag_styles(self, context):
        widget = _build("<p>x</p>", context, tag_styles={"P": "color: green; margin: 0"})
        assert isinstance(widget, RichText)
        assert widget.spans[0].style.color == TextStyle(color="green").color

    def test_inline_em_replaces_tag_font_size(self, context):
        widget = _build('<h1 style="font-size: 1.5em">x</h1>', context)
        assert widget.child.spans[0].style.font_size == 24.0

    def test_tag_styles_em_replaces_tag_font_size(self, context):
        widget = _build("<h2>x</h2>", context, tag_styles={"h2": "font-size: 1em"})
        assert widget.child.spans[0].style.font_size == 16.0

    def test_inline_bolder_on_bold_tag(self, context):
        widget = _build('<h1 style="font-weight: bolder">x</h1>', context)
        assert widget.child.spans[0].style.font_weight == 700

    def test_rem_follows_scaled_root(self):
        ctx = BuildContext(
            default_text_style=TextStyle(font_size=14.0), text_scale_factor=1.5,
        )
        widget = build_widget_tree(
            '<div style="font-size: 2em"><span style="font-size: 1rem">x</span></div>',
            context=ctx,
        )
        assert widget.spans[0].style.font_size == 21.0

    def test_inline_style_beats_tag_styles(self, context):
        widget = _build(
            '<b style="font-weight: normal">x</b>', context,
            tag_styles={"b": "font-weight: 900"},
        )
        assert widget.spans[0].style.font_weight == 400


class TestReplacedElements:
    def test_hr(self, context):
        widget = _build("<hr>", context)
        assert isinstance(widget, Padding)
        assert isinstance(widget.child, Divider)
        assert widget.padding.bottom == 16.0

    def test_img(self, context):
        widget = _build('<img src="a.png" width="40" height="20" alt="A">', context)
        assert isinstance(widget, Image)
        assert widget.url == "a.png"
        assert widget.aspect_ratio == 2.0

    def test_img_without_source_uses_alt(self, context):
        widget = _build('<img alt="missing">', context)
        assert isinstance(widget, RichText)
        assert widget.plain_text == "missing"

    def test_table(self, context):
        widget = _build(
            "<table border=1><caption>Cap</caption>"
            "<thead><tr><th>H1</th><th>H2</th></tr></thead>"
            "<tbody><tr><td>a</td><td>b</td></tr><tr><td>c</td></tr></tbody>"
            "</table>",
            context,
        )
        table = next(w for w in widget.walk() if isinstance(w, Table))
        assert table.border_width == 1.0
        assert len(table.rows) == 3
        assert table.column_count == 2
        header = table.rows[0].cells[0]
        assert header.header
        assert header.child.spans[0].style.font_weight == 700
        assert header.child.text_align is TextAlign.CENTER
        assert table.rows[2].cells[1].child is None
        assert _texts(widget)[0].plain_text == "Cap"


class TestDeepMarkup:
    def test_deep_nesting(self, context):
        depth = 200
        html = '<span style="color: red">' * depth + "x" + "</span>" * depth
        widget = _build(html, context)
        assert widget.plain_text == "x"
