from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from htmlstyle.model._util import _field_defaults
from htmlstyle.model.colour import RGBA, Colour, normalise_colour
from htmlstyle.model.text_style import TextStyle
from htmlstyle.model.values import TextDirection


class Platform(StrEnum):
    """Target platform the primitives will be rendered on."""

    ANDROID = "android"
    FUCHSIA = "fuchsia"
    IOS = "ios"
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


def _default_text_style() -> TextStyle:
    return TextStyle(
        color="black",
        font_family="sans-serif",
        font_size=14.0,
        font_weight=400,
    )


@dataclass(frozen=True)
class BuildContext:
    """Ambient state available only when styles are built.

    Contributions that need platform or theme information read it from
    the context at build time rather than capturing it when they are
    enqueued.  See
    :meth:`~htmlstyle.model.style_builder.HtmlStyleBuilder.enqueue_with_context`.

    Attributes:
        platform: Target platform.  Selects platform-specific font
            families (e.g. for ``<code>``).
        default_text_style: The host's default text style.  Provides
            the base style of the root snapshot and the reference size
            for CSS absolute font-size keywords.
        text_scale_factor: Accessibility text scaling applied once to
            the root font size.
        text_direction: Ambient text direction.
        link_colour: Colour used for ``<a>`` elements.
    """

    platform: Platform = Platform.LINUX
    default_text_style: TextStyle = field(default_factory=_default_text_style)
    text_scale_factor: float = 1.0
    text_direction: TextDirection = TextDirection.LTR
    link_colour: RGBA | Colour = (0.098, 0.396, 0.71, 1.0)

    def __post_init__(self) -> None:
        if isinstance(self.platform, str):
            object.__setattr__(self, "platform", Platform(self.platform))
        if isinstance(self.text_direction, str):
            object.__setattr__(
                self, "text_direction", TextDirection(self.text_direction),
            )
        object.__setattr__(self, "link_colour", normalise_colour(self.link_colour))
        if self.text_scale_factor <= 0:
            raise ValueError(
                f"text_scale_factor must be positive, got {self.text_scale_factor}"
            )

    @property
    def default_font_size(self) -> float:
        """Font size of :attr:`default_text_style` (``14.0`` if unset)."""
        size = self.default_text_style.font_size
        return size if size is not None else 14.0

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.
        """
        defaults = _field_defaults(type(self), exclude=frozenset({"link_colour"}))
        d: dict = {}
        for name, default in defaults.items():
            val = getattr(self, name)
            if val != default:
                d[name] = str(val) if isinstance(val, StrEnum) else val
        if self.default_text_style != _default_text_style():
            d["default_text_style"] = self.default_text_style.to_dict()
        if self.link_colour != normalise_colour(type(self).link_colour):
            d["link_colour"] = list(self.link_colour)
        return d

    @classmethod
    def from_dict(cls, d: dict) -> BuildContext:
        """Deserialise from a dictionary."""
        kwargs: dict = {}
        for name in ("platform", "text_scale_factor", "text_direction"):
            if name in d:
                kwargs[name] = d[name]
        if "default_text_style" in d:
            kwargs["default_text_style"] = TextStyle.from_dict(d["default_text_style"])
        if "link_colour" in d:
            val = d["link_colour"]
            kwargs["link_colour"] = tuple(val) if isinstance(val, list) else val
        return cls(**kwargs)
