"""Render primitives shared by the views.

A rendered screen is a list of styled text blocks; the terminal painter
decides how each style looks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SELECTION_MARKER = "▶ "
NO_MARKER = "  "


class Style(str, Enum):
    HEADER = "header"
    BODY = "body"
    STATUS = "status"


@dataclass(frozen=True)
class Block:
    text: str
    style: Style


def marker(index: int, selected: int) -> str:
    return SELECTION_MARKER if index == selected else NO_MARKER
