from __future__ import annotations

from tui.state import LIST_SCREENS, AppState

BASE_BINDINGS = "↑↓: Naviga | INVIO: Seleziona"
LIST_BINDINGS = "N: Nuovo | R: Aggiorna"
BACK_BINDING = "ESC: Indietro/Esci"


def render_status_bar(state: AppState) -> str:
    """Status text followed by the keys that do something on this screen."""
    parts = [state.status, BASE_BINDINGS]
    if state.screen in LIST_SCREENS:
        parts.append(LIST_BINDINGS)
    parts.append(BACK_BINDING)
    return " | ".join(parts)
