from __future__ import annotations


class SvgLayerError(ValueError):
    """Raised when a definition or drawable is built from invalid input."""
