"""Application state and its transition function.

`AppState` is an immutable snapshot; `reduce()` maps (snapshot, event) to
a new snapshot plus an optional effect for the runner to execute. Only the
runner talks to the database, so everything here is pure and testable
without a store or a terminal.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

from gazie.forms import FormError, parse_customer_form, parse_product_form
from gazie.models.schemas import CustomerInput, CustomerRecord, ProductInput, ProductRecord

from .keys import Event, Key, KeyEvent, ResizeEvent


class Screen(str, Enum):
    MAIN_MENU = "main_menu"
    CUSTOMER_LIST = "customer_list"
    PRODUCT_LIST = "product_list"
    CUSTOMER_FORM = "customer_form"
    PRODUCT_FORM = "product_form"


class FormMode(str, Enum):
    NONE = ""
    NEW = "new"
    EDIT = "edit"  # rendered, but no transition sets it


FORM_SCREENS = frozenset({Screen.CUSTOMER_FORM, Screen.PRODUCT_FORM})
LIST_SCREENS = frozenset({Screen.CUSTOMER_LIST, Screen.PRODUCT_LIST})

MENU_ITEMS = ("📋 Anagrafica Clienti", "📦 Anagrafica Prodotti", "❌ Esci")
MENU_CUSTOMERS, MENU_PRODUCTS, MENU_QUIT = range(len(MENU_ITEMS))

NEW_RECORD_KEY = "n"
RELOAD_KEY = "r"
FORM_CHARS = frozenset(string.ascii_letters + string.digits + "|.@-_")

WELCOME = "Benvenuto in GAzie TUI"
CANCELLED = "Annullato"
RELOADED = "Dati aggiornati"
CUSTOMERS_TITLE = "Gestione Clienti"
PRODUCTS_TITLE = "Gestione Prodotti"
NEW_CUSTOMER = "Nuovo cliente"
NEW_PRODUCT = "Nuovo prodotto"
CUSTOMER_SAVED = "Cliente salvato con successo"
PRODUCT_SAVED = "Prodotto salvato con successo"


@dataclass(frozen=True)
class AppState:
    screen: Screen = Screen.MAIN_MENU
    selected: int = 0
    form_data: str = ""
    form_mode: FormMode = FormMode.NONE
    status: str = WELCOME
    width: int = 80
    height: int = 24
    customers: Tuple[CustomerRecord, ...] = ()
    products: Tuple[ProductRecord, ...] = ()

    @property
    def in_form(self) -> bool:
        return self.screen in FORM_SCREENS

    @property
    def list_length(self) -> int:
        """Length of the list the selection moves through."""
        if self.screen == Screen.CUSTOMER_LIST:
            return len(self.customers)
        if self.screen == Screen.PRODUCT_LIST:
            return len(self.products)
        return len(MENU_ITEMS)


# Effects requested by a transition and carried out by the runner.


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Reload:
    pass


@dataclass(frozen=True)
class SaveCustomer:
    payload: CustomerInput


@dataclass(frozen=True)
class SaveProduct:
    payload: ProductInput


Effect = Union[Quit, Reload, SaveCustomer, SaveProduct]
Transition = Tuple[AppState, Optional[Effect]]

QUIT = Quit()
RELOAD = Reload()


def clamp_selection(selected: int, length: int) -> int:
    return max(0, min(selected, length - 1))


def _go(state: AppState, screen: Screen, **changes) -> AppState:
    return replace(state, screen=screen, selected=0, **changes)


def reduce(state: AppState, event: Event) -> Transition:
    """Apply one event to the snapshot."""
    if isinstance(event, ResizeEvent):
        return replace(state, width=event.width, height=event.height), None
    if not isinstance(event, KeyEvent):
        return state, None

    key = event.key
    if key == Key.ESCAPE:
        if state.in_form:
            cancelled = _go(
                state, Screen.MAIN_MENU, form_data="", form_mode=FormMode.NONE, status=CANCELLED
            )
            return cancelled, None
        return state, QUIT
    if key == Key.UP:
        return replace(state, selected=clamp_selection(state.selected - 1, state.list_length)), None
    if key == Key.DOWN:
        return replace(state, selected=clamp_selection(state.selected + 1, state.list_length)), None
    if key == Key.ENTER:
        return _confirm(state)
    if state.in_form:
        return _edit_form(state, event), None
    if key == Key.RUNE and state.screen in LIST_SCREENS:
        return _list_command(state, event.char)
    return state, None


def _confirm(state: AppState) -> Transition:
    if state.screen == Screen.MAIN_MENU:
        if state.selected == MENU_CUSTOMERS:
            return _go(state, Screen.CUSTOMER_LIST, status=CUSTOMERS_TITLE), None
        if state.selected == MENU_PRODUCTS:
            return _go(state, Screen.PRODUCT_LIST, status=PRODUCTS_TITLE), None
        if state.selected == MENU_QUIT:
            return state, QUIT
        return state, None

    try:
        if state.screen == Screen.CUSTOMER_FORM:
            return state, SaveCustomer(parse_customer_form(state.form_data, len(state.customers)))
        if state.screen == Screen.PRODUCT_FORM:
            return state, SaveProduct(parse_product_form(state.form_data, len(state.products)))
    except FormError as exc:
        return replace(state, status=str(exc)), None
    return state, None


def _edit_form(state: AppState, event: KeyEvent) -> AppState:
    if event.key == Key.BACKSPACE:
        return replace(state, form_data=state.form_data[:-1])
    if event.key == Key.SPACE:
        return replace(state, form_data=state.form_data + " ")
    if event.key == Key.RUNE and event.char in FORM_CHARS:
        return replace(state, form_data=state.form_data + event.char)
    return state


def _list_command(state: AppState, char: str) -> Transition:
    if char == RELOAD_KEY:
        return state, RELOAD
    if char == NEW_RECORD_KEY:
        if state.screen == Screen.CUSTOMER_LIST:
            screen, status = Screen.CUSTOMER_FORM, NEW_CUSTOMER
        else:
            screen, status = Screen.PRODUCT_FORM, NEW_PRODUCT
        return _go(state, screen, form_data="", form_mode=FormMode.NEW, status=status), None
    return state, None


# Folding effect outcomes back into the snapshot.


def apply_reloaded(
    state: AppState,
    customers: Sequence[CustomerRecord],
    products: Sequence[ProductRecord],
    status: str = RELOADED,
) -> AppState:
    reloaded = replace(state, customers=tuple(customers), products=tuple(products), status=status)
    return replace(reloaded, selected=clamp_selection(reloaded.selected, reloaded.list_length))


def apply_customer_saved(state: AppState, customers: Sequence[CustomerRecord]) -> AppState:
    return _go(
        state,
        Screen.CUSTOMER_LIST,
        customers=tuple(customers),
        form_data="",
        form_mode=FormMode.NONE,
        status=CUSTOMER_SAVED,
    )


def apply_product_saved(state: AppState, products: Sequence[ProductRecord]) -> AppState:
    return _go(
        state,
        Screen.PRODUCT_LIST,
        products=tuple(products),
        form_data="",
        form_mode=FormMode.NONE,
        status=PRODUCT_SAVED,
    )


def apply_write_failed(state: AppState, error: Exception) -> AppState:
    """Keep the form as typed so the user can fix it and resubmit."""
    return replace(state, status=f"Errore: {error}")
