"""Style set save/load for JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from htmlstyle.model import BuildContext, TextStyle

_VALID_SECTIONS = frozenset({"context", "tag_styles", "text_style"})


@dataclass
class StyleSet:
    """A collection of style settings loaded from or saved to a file.

    All fields are optional.  A ``StyleSet`` loaded from a file that
    only contains ``"text_style"`` will have ``context`` and
    ``tag_styles`` set to ``None``.

    Attributes:
        text_style: Override merged onto the default text style at the
            root.
        context: Ambient build context.
        tag_styles: Extra inline CSS per tag name.
    """

    text_style: TextStyle | None = None
    context: BuildContext | None = None
    tag_styles: dict[str, str] | None = None


def save_styles(
    path: str | Path,
    *,
    text_style: TextStyle | None = None,
    context: BuildContext | None = None,
    tag_styles: dict[str, str] | None = None,
) -> None:
    """Save style settings to a JSON file.

    Only sections that are not ``None`` are written.  The file is
    human-readable with two-space indentation.

    Args:
        path: Destination file path.
        text_style: Root text style override.
        context: Ambient build context.
        tag_styles: Extra inline CSS per tag name.
    """
    data: dict = {}
    if text_style is not None:
        data["text_style"] = text_style.to_dict()
    if context is not None:
        data["context"] = context.to_dict()
    if tag_styles is not None:
        data["tag_styles"] = dict(tag_styles)

    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_styles(path: str | Path) -> StyleSet:
    """Load style settings from a JSON file.

    All sections are optional.  Unknown top-level keys raise
    :class:`ValueError`.

    Args:
        path: Source file path.

    Returns:
        A :class:`StyleSet` with the parsed sections.

    Raises:
        ValueError: If the file contains unknown top-level keys, or if
            ``tag_styles`` is not a mapping of strings.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    text_style = None
    if "text_style" in data:
        text_style = TextStyle.from_dict(data["text_style"])

    context = None
    if "context" in data:
        context = BuildContext.from_dict(data["context"])

    tag_styles = None
    if "tag_styles" in data:
        raw = data["tag_styles"]
        if not isinstance(raw, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in raw.items()
        ):
            raise ValueError("tag_styles must map tag names to CSS strings")
        tag_styles = dict(raw)

    return StyleSet(text_style=text_style, context=context, tag_styles=tag_styles)
