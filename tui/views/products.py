"""Product list table."""

from __future__ import annotations

from gazie.models.schemas import ProductRecord
from gazie.utils.text import format_price, truncate
from tui.state import AppState

from .base import NO_MARKER, marker

TITLE = "📦 GESTIONE PRODOTTI"
EMPTY_HINT = "Nessun prodotto presente. Premi 'N' per aggiungerne uno."

CODE_WIDTH = 8
NAME_WIDTH = 22
PRICE_WIDTH = 8
STOCK_WIDTH = 8


def format_row(product: ProductRecord) -> str:
    return (
        f"{product.code:<{CODE_WIDTH}}  "
        f"{truncate(product.name, NAME_WIDTH):<{NAME_WIDTH}}  "
        f"{format_price(product.price):<{PRICE_WIDTH}}  "
        f"{product.stock}"
    )


def render_products(state: AppState) -> str:
    lines = [
        TITLE,
        "",
        NO_MARKER + f"{'Codice':<{CODE_WIDTH}}  {'Nome':<{NAME_WIDTH}}  "
        f"{'Prezzo':<{PRICE_WIDTH}}  {'Giacenza':<{STOCK_WIDTH}}",
        NO_MARKER + "  ".join("-" * w for w in (CODE_WIDTH, NAME_WIDTH, PRICE_WIDTH, STOCK_WIDTH)),
    ]
    for i, product in enumerate(state.products):
        lines.append(marker(i, state.selected) + format_row(product))
    if not state.products:
        lines.extend(["", EMPTY_HINT])
    return "\n".join(lines)
