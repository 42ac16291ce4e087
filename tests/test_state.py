import random
from dataclasses import replace

import pytest

from gazie.forms import INVALID_PRICE, MISSING_CUSTOMER_FIELDS
from gazie.models.schemas import CustomerRecord, ProductRecord
from tui.keys import Key, KeyEvent, ResizeEvent, rune
from tui.state import (
    CANCELLED,
    FORM_CHARS,
    MENU_ITEMS,
    QUIT,
    RELOAD,
    AppState,
    FormMode,
    SaveCustomer,
    SaveProduct,
    Screen,
    apply_customer_saved,
    apply_product_saved,
    apply_reloaded,
    apply_write_failed,
    reduce,
)

UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
ENTER = KeyEvent(Key.ENTER)
ESCAPE = KeyEvent(Key.ESCAPE)
BACKSPACE = KeyEvent(Key.BACKSPACE)
SPACE = KeyEvent(Key.SPACE)


def customers(n):
    return tuple(CustomerRecord(id=i + 1, code=f"C{i:03d}", name=f"Cliente {i}") for i in range(n))


def products(n):
    return tuple(ProductRecord(id=i + 1, code=f"P{i:03d}", name=f"Prodotto {i}", price=1.0) for i in range(n))


def step(state, *events):
    for event in events:
        state, effect = reduce(state, event)
        assert effect is None
    return state


# ===========================================================================
# Navigation
# ===========================================================================


def test_initial_state_is_main_menu():
    state = AppState()
    assert state.screen == Screen.MAIN_MENU
    assert state.selected == 0
    assert state.form_mode == FormMode.NONE


@pytest.mark.parametrize(
    "selected,screen",
    [(0, Screen.CUSTOMER_LIST), (1, Screen.PRODUCT_LIST)],
)
def test_menu_confirm_opens_list(selected, screen):
    state, effect = reduce(AppState(selected=selected), ENTER)
    assert effect is None
    assert state.screen == screen
    assert state.selected == 0


def test_menu_confirm_on_exit_quits():
    state, effect = reduce(AppState(selected=2), ENTER)
    assert effect == QUIT


@pytest.mark.parametrize("screen", [Screen.MAIN_MENU, Screen.CUSTOMER_LIST, Screen.PRODUCT_LIST])
def test_escape_outside_forms_quits(screen):
    _, effect = reduce(AppState(screen=screen), ESCAPE)
    assert effect == QUIT


@pytest.mark.parametrize("screen", [Screen.CUSTOMER_FORM, Screen.PRODUCT_FORM])
def test_escape_in_form_returns_to_menu(screen):
    state = AppState(screen=screen, form_data="half|typed", form_mode=FormMode.NEW, selected=1)
    state, effect = reduce(state, ESCAPE)
    assert effect is None
    assert state.screen == Screen.MAIN_MENU
    assert state.form_data == ""
    assert state.status == CANCELLED
    assert state.selected == 0


def test_up_down_clamp_on_menu():
    state = step(AppState(), UP)
    assert state.selected == 0
    state = step(state, DOWN, DOWN, DOWN, DOWN)
    assert state.selected == len(MENU_ITEMS) - 1


def test_down_on_empty_list_stays_at_zero():
    state = step(AppState(screen=Screen.CUSTOMER_LIST), DOWN, DOWN)
    assert state.selected == 0


@pytest.mark.parametrize("seed", range(20))
def test_selection_always_within_active_list(seed):
    rng = random.Random(seed)
    n_customers = rng.randint(0, 6)
    n_products = rng.randint(0, 6)
    state = AppState(customers=customers(n_customers), products=products(n_products))

    for _ in range(200):
        event = rng.choice([UP, DOWN, UP, DOWN, ENTER, rune("n"), ESCAPE])
        if event == ESCAPE and not state.in_form:
            continue
        if event == ENTER and (state.in_form or state.selected == 2):
            continue
        state, effect = reduce(state, event)
        assert effect is None
        assert 0 <= state.selected <= max(state.list_length - 1, 0)


def test_new_record_key_opens_form():
    state = step(AppState(screen=Screen.CUSTOMER_LIST, customers=customers(2)), rune("n"))
    assert state.screen == Screen.CUSTOMER_FORM
    assert state.form_mode == FormMode.NEW
    assert state.form_data == ""

    state = step(AppState(screen=Screen.PRODUCT_LIST), rune("n"))
    assert state.screen == Screen.PRODUCT_FORM


def test_new_and_reload_keys_ignored_on_menu():
    state = AppState()
    assert reduce(state, rune("n")) == (state, None)
    assert reduce(state, rune("r")) == (state, None)


@pytest.mark.parametrize("screen", [Screen.CUSTOMER_LIST, Screen.PRODUCT_LIST])
def test_reload_key_requests_reload(screen):
    state = AppState(screen=screen)
    assert reduce(state, rune("r")) == (state, RELOAD)


def test_resize_updates_dimensions():
    state = step(AppState(), ResizeEvent(120, 40))
    assert (state.width, state.height) == (120, 40)


def test_snapshot_is_replaced_not_mutated():
    before = AppState()
    after = step(before, DOWN)
    assert before.selected == 0
    assert after is not before


# ===========================================================================
# Form editing
# ===========================================================================


def test_form_typing_filters_characters():
    state = AppState(screen=Screen.CUSTOMER_FORM)
    state = step(state, rune("A"), rune("z"), rune("9"), SPACE, rune("|"), rune("@"), rune("."))
    state = step(state, rune("-"), rune("_"), rune("è"), rune("!"), rune("#"))
    assert state.form_data == "Az9 |@.-_"


def test_form_letters_n_and_r_are_typed_not_commands():
    state = step(AppState(screen=Screen.PRODUCT_FORM), rune("n"), rune("r"))
    assert state.form_data == "nr"
    assert state.screen == Screen.PRODUCT_FORM


def test_backspace_drops_last_character():
    state = step(AppState(screen=Screen.CUSTOMER_FORM, form_data="ab"), BACKSPACE)
    assert state.form_data == "a"
    state = step(state, BACKSPACE, BACKSPACE)
    assert state.form_data == ""


def test_typing_outside_forms_is_ignored():
    state = AppState(screen=Screen.CUSTOMER_LIST)
    assert step(state, rune("x"), SPACE, BACKSPACE) == state


def test_accepted_character_set():
    assert set("|.@-_") <= FORM_CHARS
    assert " " not in FORM_CHARS
    assert "è" not in FORM_CHARS


# ===========================================================================
# Submission
# ===========================================================================


def test_customer_submit_with_too_few_fields_only_sets_status():
    state = AppState(screen=Screen.CUSTOMER_FORM, form_data="Mario|C1|Roma")
    new_state, effect = reduce(state, ENTER)
    assert effect is None
    assert new_state == replace(state, status=MISSING_CUSTOMER_FIELDS)


def test_product_submit_with_bad_price_only_sets_status():
    state = AppState(screen=Screen.PRODUCT_FORM, form_data="Widget|P100|notanumber|desc")
    new_state, effect = reduce(state, ENTER)
    assert effect is None
    assert new_state == replace(state, status=INVALID_PRICE)


def test_customer_submit_requests_save_with_generated_code():
    state = AppState(
        screen=Screen.CUSTOMER_FORM,
        customers=customers(3),
        form_data="Mario Rossi||Roma|06-123456|mario@email.it",
    )
    new_state, effect = reduce(state, ENTER)
    assert new_state == state
    assert isinstance(effect, SaveCustomer)
    assert effect.payload.code == "C004"


def test_product_submit_requests_save():
    state = AppState(screen=Screen.PRODUCT_FORM, products=products(1), form_data="Widget||9.99|desc")
    _, effect = reduce(state, ENTER)
    assert isinstance(effect, SaveProduct)
    assert effect.payload.code == "P002"
    assert effect.payload.price == pytest.approx(9.99)


def test_enter_on_list_is_noop():
    state = AppState(screen=Screen.CUSTOMER_LIST, customers=customers(2))
    assert reduce(state, ENTER) == (state, None)


# ===========================================================================
# Effect outcomes
# ===========================================================================


def test_customer_saved_moves_to_list_and_clears_form():
    state = AppState(screen=Screen.CUSTOMER_FORM, form_data="x|y|z|w", form_mode=FormMode.NEW)
    state = apply_customer_saved(state, customers(4))
    assert state.screen == Screen.CUSTOMER_LIST
    assert state.form_data == ""
    assert len(state.customers) == 4


def test_product_saved_moves_to_list():
    state = apply_product_saved(AppState(screen=Screen.PRODUCT_FORM, form_data="a|b|1|c"), products(2))
    assert state.screen == Screen.PRODUCT_LIST
    assert state.products == products(2)


def test_write_failure_keeps_form():
    state = AppState(screen=Screen.CUSTOMER_FORM, form_data="Dup|CLI001|Roma|1")
    failed = apply_write_failed(state, Exception("UNIQUE constraint failed: customers.code"))
    assert failed.screen == Screen.CUSTOMER_FORM
    assert failed.form_data == state.form_data
    assert failed.status == "Errore: UNIQUE constraint failed: customers.code"


def test_reload_clamps_selection():
    state = AppState(screen=Screen.PRODUCT_LIST, products=products(5), selected=4)
    state = apply_reloaded(state, customers(1), products(2))
    assert state.selected == 1
    assert len(state.customers) == 1
