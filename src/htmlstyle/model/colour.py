from __future__ import annotations

import re

#: A colour specification accepted throughout htmlstyle.
#:
#: Can be any of:
#:
#: - A CSS colour name or hex string (e.g. ``"red"``, ``"#f00"``,
#:   ``"#ff000080"``).
#: - A CSS functional colour (``"rgb(255, 0, 0)"``,
#:   ``"rgba(255, 0, 0, 0.5)"``).
#: - A single float for grey (``0.0`` = black, ``1.0`` = white).
#: - An RGB or RGBA tuple or list with values in ``[0, 1]``.
#:
#: See :func:`normalise_colour` for conversion to a normalised RGBA tuple.
Colour = str | float | tuple[float, ...] | list[float]

#: A normalised ``(r, g, b, a)`` colour with components in ``[0, 1]``.
RGBA = tuple[float, float, float, float]

_FUNCTIONAL_RE = re.compile(
    r"^rgba?\(\s*(?P<args>[^)]*)\)$",
    re.IGNORECASE,
)


def _parse_channel(token: str) -> float:
    """Parse one ``rgb()`` channel, either ``0..255`` or a percentage."""
    if token.endswith("%"):
        return float(token[:-1]) / 100.0
    return float(token) / 255.0


def _parse_alpha(token: str) -> float:
    if token.endswith("%"):
        return float(token[:-1]) / 100.0
    return float(token)


def _parse_functional(colour: str) -> RGBA | None:
    """Parse ``rgb()`` / ``rgba()`` notation, or return ``None``."""
    match = _FUNCTIONAL_RE.match(colour.strip())
    if match is None:
        return None
    args = match.group("args").replace("/", " ")
    tokens = [t for t in re.split(r"[\s,]+", args) if t]
    if len(tokens) not in (3, 4):
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    try:
        r, g, b = (_parse_channel(t) for t in tokens[:3])
        a = _parse_alpha(tokens[3]) if len(tokens) == 4 else 1.0
    except ValueError:
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    # CSS clamps out-of-range channels rather than rejecting them.
    return tuple(min(max(c, 0.0), 1.0) for c in (r, g, b, a))  # type: ignore[return-value]


def normalise_colour(colour: Colour) -> RGBA:
    """Convert a colour specification to a normalised (r, g, b, a) tuple.

    Accepts CSS colour names (e.g. ``"red"``), hex strings
    (e.g. ``"#FF0000"``), ``rgb()``/``rgba()`` notation, grey floats
    (e.g. ``0.7``), or RGB/RGBA tuples (e.g. ``(1.0, 0.3, 0.3)``).

    Args:
        colour: The colour to normalise.

    Returns:
        A tuple of four floats in [0, 1].

    Raises:
        ValueError: If the colour cannot be interpreted.
    """
    if isinstance(colour, (int, float)) and not isinstance(colour, bool):
        f = float(colour)
        if not 0.0 <= f <= 1.0:
            raise ValueError(f"Grey value must be in [0, 1], got {f}")
        return (f, f, f, 1.0)

    if isinstance(colour, (tuple, list)):
        if len(colour) not in (3, 4):
            raise ValueError(
                f"colour sequence must have 3 or 4 elements, got {len(colour)}"
            )
        components = tuple(float(c) for c in colour)
        for name, val in zip("rgba", components):
            if not 0.0 <= val <= 1.0:
                raise ValueError(
                    f"colour component {name} must be in [0, 1], got {val}"
                )
        if len(components) == 3:
            components = (*components, 1.0)
        return components  # type: ignore[return-value]

    if isinstance(colour, str):
        functional = _parse_functional(colour)
        if functional is not None:
            return functional
        name = colour.strip().lower()
        if name == "transparent":
            return (0.0, 0.0, 0.0, 0.0)

        from matplotlib.colors import to_rgba

        try:
            return to_rgba(name)
        except ValueError:
            raise ValueError(f"Unrecognised colour name: {colour!r}")

    raise ValueError(f"Cannot interpret colour: {colour!r}")


def colour_to_hex(colour: Colour) -> str:
    """Return *colour* as ``#rrggbb`` (or ``#rrggbbaa`` when translucent)."""
    from matplotlib.colors import to_hex

    rgba = normalise_colour(colour)
    return to_hex(rgba, keep_alpha=rgba[3] < 1.0)
