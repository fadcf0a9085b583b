"""Shared constants used across the model and construction layers."""

ABSOLUTE_FONT_SIZES: dict[str, float] = {
    "xx-small": 0.5625,
    "x-small": 0.625,
    "small": 0.8125,
    "medium": 1.0,
    "large": 1.125,
    "x-large": 1.5,
    "xx-large": 2.0,
}
"""CSS absolute-size keywords as multiples of the default font size."""

LARGER_FACTOR: float = 1.2
"""``font-size: larger`` multiplies the parent size by this."""

SMALLER_FACTOR: float = 15 / 18
"""``font-size: smaller`` multiplies the parent size by this."""

PX_PER_PT: float = 96 / 72
"""CSS reference pixels per typographic point."""

SKIPPED_TAGS: frozenset[str] = frozenset({
    "head", "script", "style", "template", "title", "meta", "link", "noscript",
})
"""Elements whose content is never rendered."""

BLOCK_TAGS: frozenset[str] = frozenset({
    "address", "article", "aside", "blockquote", "body", "center", "dd",
    "div", "dl", "dt", "figcaption", "figure", "footer", "h1", "h2", "h3",
    "h4", "h5", "h6", "header", "html", "li", "main", "nav", "ol", "p",
    "pre", "section", "ul",
})
"""Elements that start a new block of content."""

TABLE_SECTION_TAGS: frozenset[str] = frozenset({"thead", "tbody", "tfoot"})
