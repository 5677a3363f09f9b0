from __future__ import annotations

import dataclasses
import math
from typing import Any, Mapping

import yaml

from .model import FontWeight, Style, StyleConfiguration

SLOT_ALIASES = {
    "codeBlock": "code_block",
    "listPrefix": "list_prefix",
}
STYLE_KEY_ALIASES = {
    "fontSize": "font_size",
    "size": "font_size",
    "fontWeight": "weight",
    "isItalic": "italic",
}
SLOT_NAMES = tuple(f.name for f in dataclasses.fields(StyleConfiguration))


def load_configuration(text: str) -> StyleConfiguration:
    """Parse a YAML style sheet into a StyleConfiguration.

    The document maps slot names to style fields, e.g.::

        h1: {font_size: 28, weight: bold}
        listPrefix: {weight: light}

    Slots and fields left out keep their defaults.
    """
    data = yaml.safe_load(text)
    if data is None:
        return StyleConfiguration()
    if not isinstance(data, dict):
        raise ValueError("Style YAML root must be a mapping of slot names to styles.")
    return configuration_from_dict(data)


def configuration_from_dict(data: Mapping[str, Any]) -> StyleConfiguration:
    defaults = StyleConfiguration()
    overrides: dict[str, Style] = {}
    for key, value in data.items():
        slot = SLOT_ALIASES.get(key, key)
        if slot not in SLOT_NAMES:
            raise ValueError(f"Unknown style slot: {key!r}")
        if value is None:
            continue
        if not isinstance(value, Mapping):
            raise ValueError(f"Style for {key!r} must be a mapping, got {type(value).__name__}")
        overrides[slot] = _style_from_dict(key, value, getattr(defaults, slot))
    return dataclasses.replace(defaults, **overrides)


def _style_from_dict(slot: str, data: Mapping[str, Any], base: Style) -> Style:
    fields: dict[str, Any] = {}
    for key, value in data.items():
        name = STYLE_KEY_ALIASES.get(key, key)
        if name == "font_size":
            fields[name] = _font_size(slot, value)
        elif name == "weight":
            fields[name] = _font_weight(slot, value)
        elif name == "italic":
            if not isinstance(value, bool):
                raise ValueError(f"{slot}.italic must be true or false, got {value!r}")
            fields[name] = value
        else:
            raise ValueError(f"Unknown style field {slot}.{key}")
    return dataclasses.replace(base, **fields)


def _font_size(slot: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{slot}.font_size must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{slot}.font_size must be finite, got {value!r}")
    if value <= 0:
        raise ValueError(f"{slot}.font_size must be positive, got {value!r}")
    return value


def _font_weight(slot: str, value: Any) -> FontWeight:
    try:
        return FontWeight(str(value).lower())
    except ValueError:
        allowed = ", ".join(w.value for w in FontWeight)
        raise ValueError(f"{slot}.weight must be one of {allowed}, got {value!r}") from None
