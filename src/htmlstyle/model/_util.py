"""Shared serialisation helpers for model dataclasses."""

from __future__ import annotations

import dataclasses
from enum import Enum

_field_defaults_cache: dict[tuple[type, frozenset[str]], dict] = {}


def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with simple defaults are included; fields listed in
    *exclude* are skipped.  Results are cached per ``(cls, exclude)``.
    """
    key = (cls, exclude)
    if key not in _field_defaults_cache:
        # default_factory fields also report MISSING here.
        _field_defaults_cache[key] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
            and f.name not in exclude
        }
    return _field_defaults_cache[key]


def _non_default_items(obj: object, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return the fields of *obj* that differ from their defaults.

    Enum members are written as their values so the result is
    JSON-compatible.
    """
    d: dict = {}
    for name, default in _field_defaults(type(obj), exclude=exclude).items():
        val = getattr(obj, name)
        if val != default:
            d[name] = val.value if isinstance(val, Enum) else val
    return d
