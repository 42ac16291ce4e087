"""Entry screens for new customers and products.

Both forms take one line of `|`-separated fields; the prompt shows the
field order, what has been typed so far and an example.
"""

from __future__ import annotations

from tui.state import AppState, FormMode

FOOTER = "Premi INVIO per salvare, ESC per annullare"


def _form(title: str, fields: str, data: str, example: str) -> str:
    return "\n".join(
        [
            title,
            "",
            "Inserisci i dati separati da |:",
            fields,
            "",
            f"Dati attuali: {data}",
            "",
            f"Esempio: {example}",
            "",
            FOOTER,
        ]
    )


def render_customer_form(state: AppState) -> str:
    title = "Modifica Cliente" if state.form_mode == FormMode.EDIT else "Nuovo Cliente"
    return _form(
        title,
        "Nome|Codice|Città|Telefono|Email",
        state.form_data,
        "Mario Rossi|C001|Roma|06-123456|mario@email.it",
    )


def render_product_form(state: AppState) -> str:
    title = "Modifica Prodotto" if state.form_mode == FormMode.EDIT else "Nuovo Prodotto"
    return _form(
        title,
        "Nome|Codice|Prezzo|Descrizione",
        state.form_data,
        "Prodotto Base|P001|15.50|Descrizione del prodotto",
    )
