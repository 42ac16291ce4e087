"""Screen rendering: a pure function from AppState to text blocks."""

from __future__ import annotations

from typing import Callable, Dict, List

from tui.components.status_bar import render_status_bar
from tui.state import AppState, Screen

from .base import Block, Style
from .customers import render_customers
from .forms import render_customer_form, render_product_form
from .menu import render_menu
from .products import render_products

HEADER_TITLE = "🏢 GAzie TUI - Gestione Aziendale"

BODY_RENDERERS: Dict[Screen, Callable[[AppState], str]] = {
    Screen.MAIN_MENU: render_menu,
    Screen.CUSTOMER_LIST: render_customers,
    Screen.PRODUCT_LIST: render_products,
    Screen.CUSTOMER_FORM: render_customer_form,
    Screen.PRODUCT_FORM: render_product_form,
}


def render(state: AppState) -> List[Block]:
    return [
        Block(HEADER_TITLE, Style.HEADER),
        Block(BODY_RENDERERS[state.screen](state), Style.BODY),
        Block(render_status_bar(state), Style.STATUS),
    ]


__all__ = ["Block", "Style", "HEADER_TITLE", "render"]
