"""Customer list table."""

from __future__ import annotations

from gazie.models.schemas import CustomerRecord
from gazie.utils.text import truncate
from tui.state import AppState

from .base import NO_MARKER, marker

TITLE = "📋 GESTIONE CLIENTI"
EMPTY_HINT = "Nessun cliente presente. Premi 'N' per aggiungerne uno."

CODE_WIDTH = 8
NAME_WIDTH = 22
CITY_WIDTH = 14
PHONE_WIDTH = 12


def format_row(customer: CustomerRecord) -> str:
    return (
        f"{customer.code:<{CODE_WIDTH}}  "
        f"{truncate(customer.name, NAME_WIDTH):<{NAME_WIDTH}}  "
        f"{truncate(customer.city or '', CITY_WIDTH):<{CITY_WIDTH}}  "
        f"{truncate(customer.phone or '', PHONE_WIDTH):<{PHONE_WIDTH}}"
    )


def render_customers(state: AppState) -> str:
    lines = [
        TITLE,
        "",
        NO_MARKER + f"{'Codice':<{CODE_WIDTH}}  {'Nome':<{NAME_WIDTH}}  "
        f"{'Città':<{CITY_WIDTH}}  {'Telefono':<{PHONE_WIDTH}}",
        NO_MARKER + "  ".join("-" * w for w in (CODE_WIDTH, NAME_WIDTH, CITY_WIDTH, PHONE_WIDTH)),
    ]
    for i, customer in enumerate(state.customers):
        lines.append(marker(i, state.selected) + format_row(customer))
    if not state.customers:
        lines.extend(["", EMPTY_HINT])
    return "\n".join(lines)
