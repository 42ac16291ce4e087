"""Display formatting for table cells."""

from __future__ import annotations

ELLIPSIS = "..."


def truncate(text: str, width: int) -> str:
    """Fit `text` into `width` characters.

    Widths of 3 or less are hard-cut; wider cells end in an ellipsis when
    the text overflows.
    """
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def format_price(value: float) -> str:
    return f"€{value:.2f}"
