from __future__ import annotations

import re


DEFAULT_COLOR = "black"

_OPACITY_TOKEN = re.compile(r"^-?\d*\.?\d+%?$")


def parse_opacity(raw: str) -> float:
    """`"50%"` -> 0.5, `"0.5"` -> 0.5."""

    text = raw.strip()
    if text.endswith("%"):
        return float(text[:-1]) / 100
    return float(text)


def parse_color(value: str) -> tuple[str, float | None]:
    """Split a `"<color> <opacity>"` compound into its parts.

    Only a trailing bare number or percentage counts as opacity, so CSS
    functions such as `"rgb(0, 0, 0)"` stay whole. A plain color yields
    `(color, None)`.
    """

    text = value.strip()
    head, sep, tail = text.rpartition(" ")
    if not sep or not head.strip() or not _OPACITY_TOKEN.match(tail):
        return text, None
    return head.strip(), parse_opacity(tail)
