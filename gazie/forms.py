"""Pipe-delimited form parsing.

Forms are typed as a single line with fields separated by `|`:

    customer: Nome|Codice|Città|Telefono[|Email]
    product:  Nome|Codice|Prezzo|Descrizione

An empty code is replaced with the next sequential code for the table
(`C004`, `P012`, ...), computed from the number of rows currently loaded.
"""

from __future__ import annotations

import re
from typing import List

from pydantic import ValidationError

from gazie.models.schemas import CustomerInput, ProductInput

FIELD_SEPARATOR = "|"

CUSTOMER_CODE_PREFIX = "C"
PRODUCT_CODE_PREFIX = "P"

MISSING_CUSTOMER_FIELDS = "Errore: insufficienti dati (Nome|Codice|Città|Telefono)"
MISSING_PRODUCT_FIELDS = "Errore: insufficienti dati (Nome|Codice|Prezzo|Descrizione)"
INVALID_PRICE = "Errore: prezzo non valido"

_DECIMAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class FormError(ValueError):
    """Submitted form text could not be turned into a record."""


def split_fields(buffer: str) -> List[str]:
    return [part.strip() for part in buffer.split(FIELD_SEPARATOR)]


def next_code(prefix: str, count: int) -> str:
    return f"{prefix}{count + 1:03d}"


def parse_price(raw: str) -> float:
    if not _DECIMAL.match(raw):
        raise FormError(INVALID_PRICE)
    return float(raw)


def parse_customer_form(buffer: str, customer_count: int) -> CustomerInput:
    fields = split_fields(buffer)
    if len(fields) < 4:
        raise FormError(MISSING_CUSTOMER_FIELDS)

    name, code, city, phone = fields[:4]
    email = fields[4] if len(fields) > 4 else ""
    return CustomerInput(
        code=code or next_code(CUSTOMER_CODE_PREFIX, customer_count),
        name=name,
        city=city,
        phone=phone,
        email=email,
    )


def parse_product_form(buffer: str, product_count: int) -> ProductInput:
    fields = split_fields(buffer)
    if len(fields) < 4:
        raise FormError(MISSING_PRODUCT_FIELDS)

    name, code, raw_price, description = fields[:4]
    price = parse_price(raw_price)
    try:
        return ProductInput(
            code=code or next_code(PRODUCT_CODE_PREFIX, product_count),
            name=name,
            description=description,
            price=price,
        )
    except ValidationError as exc:
        # Only the price carries constraints beyond being a string.
        raise FormError(INVALID_PRICE) from exc
