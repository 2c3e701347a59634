from __future__ import annotations

import math
import re

from .metrics import measure_text


# Pixels kept free at the right edge to absorb measurement error.
SAFETY_MARGIN = 10.0

_PARAGRAPH_BREAK = re.compile(r"\r?\n")


def wrap_lines(
    text: str,
    max_width: float,
    font_size: float,
    bold: bool = False,
    max_lines: int | None = None,
) -> list[str]:
    """Greedy word wrap of `text` into lines no wider than `max_width`.

    - Explicit line breaks start a new paragraph; an empty paragraph yields "".
    - A single word wider than the limit is kept whole on its own line.
    - `max_lines` truncates trailing lines without any marker.
    """

    limit = max_width - SAFETY_MARGIN
    lines: list[str] = []
    for paragraph in _PARAGRAPH_BREAK.split(text):
        current = ""
        for word in paragraph.strip().split(" "):
            candidate = f"{current} {word}" if current else word
            if current and measure_text(candidate, font_size, bold) > limit:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    if max_lines is not None:
        del lines[max(0, max_lines):]
    return lines


def max_lines_for_height(max_height: float | None, line_height: float) -> int | None:
    if max_height is None:
        return None
    return math.floor(max_height / line_height)
