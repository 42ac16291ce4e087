from __future__ import annotations

from tui.state import MENU_ITEMS, AppState

from .base import marker


def render_menu(state: AppState) -> str:
    lines = ["Seleziona un'opzione:", ""]
    for i, item in enumerate(MENU_ITEMS):
        lines.append(marker(i, state.selected) + item)
    return "\n".join(lines)
