"""Tests for htmlstyle public API."""

import htmlstyle
from htmlstyle import HtmlWidget, RichText, Table


class TestPublicAPI:
    def test_all_names_importable(self):
        for name in htmlstyle.__all__:
            assert hasattr(htmlstyle, name), f"{name} not importable from htmlstyle"

    def test_html_widget_build(self):
        tree = HtmlWidget("<p>Hello <b>world</b></p>").build()
        texts = [w for w in tree.walk() if isinstance(w, RichText)]
        assert texts[0].plain_text == "Hello world"

    def test_html_widget_tag_styles_normalised(self):
        widget = HtmlWidget("x", tag_styles={"P": "color: red"})
        assert widget.tag_styles == {"p": "color: red"}

    def test_html_widget_rejects_non_str(self):
        import pytest

        with pytest.raises(TypeError, match="html must be a str"):
            HtmlWidget(b"<p>x</p>")

    def test_end_to_end_from_file(self, article_path, styles_path):
        widget = HtmlWidget.from_file(article_path, styles_path=styles_path)
        context = htmlstyle.load_styles(styles_path).context
        tree = widget.build(context)
        texts = [w for w in tree.walk() if isinstance(w, RichText)]
        plain = [t.plain_text for t in texts]
        assert plain[0] == "Style resolution"
        assert "Sample article" not in " ".join(plain)
        heading = texts[0].spans[0].style
        assert heading.font_size == 18.0 * 1.75
        assert heading.font_family == "Georgia"
        assert any(isinstance(w, Table) for w in tree.walk())
        assert "• cached by identity" in plain
