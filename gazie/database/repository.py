"""Thin repository helpers for customers and products.

These functions provide a small abstraction over SQLAlchemy sessions; the
gateway wraps them with session lifecycle and error translation.
"""
from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gazie.models.schemas import CustomerInput, ProductInput

from .models import Customer, Product
from .samples import SAMPLE_CUSTOMERS, SAMPLE_MIN_STOCK, SAMPLE_PRODUCTS, SAMPLE_STOCK


def count_customers(session: Session) -> int:
    return session.query(Customer).count()


def count_products(session: Session) -> int:
    return session.query(Product).count()


def list_customers(session: Session) -> List[Customer]:
    """Return every customer ordered by name."""
    return session.query(Customer).order_by(Customer.name).all()


def list_products(session: Session) -> List[Product]:
    """Return every product ordered by name."""
    return session.query(Product).order_by(Product.name).all()


def _customer_row(payload: CustomerInput) -> Customer:
    return Customer(
        code=payload.code,
        name=payload.name,
        city=payload.city,
        phone=payload.phone,
        email=payload.email,
        active=True,
    )


def add_customer(session: Session, payload: CustomerInput) -> Customer:
    """Insert one customer row and return it with server defaults loaded."""
    customer = _customer_row(payload)
    session.add(customer)
    session.commit()
    session.refresh(customer)
    return customer


def _product_row(payload: ProductInput, stock: int = 0, min_stock: int = 0) -> Product:
    return Product(
        code=payload.code,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        stock=stock,
        min_stock=min_stock,
        active=True,
    )


def add_product(session: Session, payload: ProductInput) -> Product:
    """Insert one product row.

    Stock levels are not collected by the form, so new products start at 0.
    """
    product = _product_row(payload)
    session.add(product)
    session.commit()
    session.refresh(product)
    return product


def seed_samples(session: Session) -> Dict[str, int]:
    """Fill empty tables with the sample rows.

    Each table is checked by row count, so a populated table is never
    touched. Each table's rows are committed together, so a failure leaves
    that table empty and the next launch seeds it again. Returns how many
    rows were written per table.
    """
    seeded = {"customers": 0, "products": 0}

    if count_customers(session) == 0:
        _add_all(session, [_customer_row(p) for p in SAMPLE_CUSTOMERS])
        seeded["customers"] = len(SAMPLE_CUSTOMERS)

    if count_products(session) == 0:
        rows = [_product_row(p, SAMPLE_STOCK, SAMPLE_MIN_STOCK) for p in SAMPLE_PRODUCTS]
        _add_all(session, rows)
        seeded["products"] = len(SAMPLE_PRODUCTS)

    return seeded


def _add_all(session: Session, rows: list) -> None:
    session.add_all(rows)
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
