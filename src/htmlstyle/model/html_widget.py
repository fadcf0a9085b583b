from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from htmlstyle.model.context import BuildContext
from htmlstyle.model.text_style import TextStyle
from htmlstyle.model.widgets import Widget


@dataclass
class HtmlWidget:
    """Top-level object holding markup and the styling applied to it.

    Attributes:
        html: The markup to render.
        text_style: Override merged onto the context's default text
            style at the root.
        tag_styles: Extra inline CSS per tag name (e.g.
            ``{"h1": "color: navy"}``), applied after the tag defaults
            and before each element's ``style`` attribute.
    """

    html: str
    text_style: TextStyle | None = None
    tag_styles: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.html, str):
            raise TypeError(f"html must be a str, got {type(self.html).__name__}")
        self.tag_styles = {k.lower(): v for k, v in self.tag_styles.items()}

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        styles_path: str | Path | None = None,
    ) -> HtmlWidget:
        """Create an HtmlWidget from an HTML file.

        Args:
            path: Path to the markup file (read as UTF-8).
            styles_path: Optional JSON style file (see
                :func:`~htmlstyle.construction.styles.load_styles`)
                providing ``text_style`` and ``tag_styles``.
        """
        html = Path(path).read_text(encoding="utf-8")
        if styles_path is None:
            return cls(html)

        from htmlstyle.construction.styles import load_styles

        styles = load_styles(styles_path)
        return cls(
            html,
            text_style=styles.text_style,
            tag_styles=styles.tag_styles or {},
        )

    def build(self, context: BuildContext | None = None) -> Widget | None:
        """Convert the markup into widget primitives.

        Args:
            context: Ambient context.  Defaults to ``BuildContext()``.

        Returns:
            The root widget, or ``None`` if there is nothing visible.

        See Also:
            :func:`htmlstyle.construction.build_tree.build_widget_tree`
        """
        from htmlstyle.construction.build_tree import build_widget_tree

        return build_widget_tree(
            self.html,
            context=context,
            text_style=self.text_style,
            tag_styles=self.tag_styles,
        )
