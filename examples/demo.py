"""Demo script: build the sample article and print the widget outline."""

from pathlib import Path

from htmlstyle import HtmlWidget, RichText, load_styles

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"


def _outline(widget, depth=0):
    label = type(widget).__name__
    if isinstance(widget, RichText):
        first = widget.spans[0].style
        label += f" {widget.plain_text[:40]!r} ({first.font_size:g}px)"
    print("  " * depth + label)
    for child in widget.children:
        _outline(child, depth + 1)


def main():
    styles_path = FIXTURES / "styles.json"
    context = load_styles(styles_path).context
    widget = HtmlWidget.from_file(FIXTURES / "article.html", styles_path=styles_path)
    tree = widget.build(context)
    if tree is None:
        print("Nothing to render")
        return
    _outline(tree)


if __name__ == "__main__":
    main()
