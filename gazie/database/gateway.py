"""Persistence gateway used by the terminal UI.

Owns the engine and session factory and turns SQLAlchemy failures into the
error contract the UI relies on:

- opening/creating the store fails with `StoreOpenError` (fatal at startup);
- list reads never raise, they log and return an empty list;
- inserts raise `DuplicateCodeError`, `ConstraintViolationError` or
  `WriteError`, leaving the session rolled back.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from gazie.models.schemas import CustomerInput, CustomerRecord, ProductInput, ProductRecord
from gazie.utils.logger import get_logger

from . import repository
from .engine import get_engine, init_db

logger = get_logger(__name__)


class GatewayError(Exception):
    """Base class for persistence failures."""


class StoreOpenError(GatewayError):
    """The database file could not be opened or its schema created."""


class ConstraintViolationError(GatewayError):
    """An insert was rejected by a table constraint."""


class DuplicateCodeError(ConstraintViolationError):
    """An insert reused a code that already exists."""


class WriteError(GatewayError):
    """An insert failed for a reason other than a constraint."""


def _error_text(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _records(model, rows, kind: str) -> list:
    """Convert ORM rows to records, skipping rows that cannot be read."""
    records = []
    for row in rows:
        try:
            records.append(model.model_validate(row))
        except ValidationError as exc:
            logger.warning("Skipping unreadable %s row id=%s: %s", kind, row.id, exc)
    return records


class Gateway:
    """Customer/product store backed by one SQLite file."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        *,
        engine: Optional[Engine] = None,
        seed_samples: bool = True,
    ):
        try:
            self.engine = engine or get_engine(database_url)
        except (OSError, SQLAlchemyError) as exc:
            raise StoreOpenError(f"cannot open database: {exc}") from exc
        self.seed_samples = seed_samples
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    def initialize(self) -> None:
        """Create missing tables and seed empty ones.

        Safe to call on every launch: tables are created IF NOT EXISTS and
        seeding only runs against tables with zero rows.
        """
        try:
            init_db(self.engine)
            if not self.seed_samples:
                return
            with self._session_factory() as session:
                seeded = repository.seed_samples(session)
        except SQLAlchemyError as exc:
            logger.error("Database initialization failed: %s", exc)
            raise StoreOpenError(f"cannot initialize database: {_error_text(exc)}") from exc

        if seeded["customers"] or seeded["products"]:
            logger.info(
                "Seeded %d sample customers and %d sample products",
                seeded["customers"],
                seeded["products"],
            )

    def list_customers(self) -> List[CustomerRecord]:
        try:
            with self._session_factory() as session:
                rows = repository.list_customers(session)
                return _records(CustomerRecord, rows, "customer")
        except (SQLAlchemyError, ValueError) as exc:
            logger.warning("Failed to load customers: %s", exc)
            return []

    def list_products(self) -> List[ProductRecord]:
        try:
            with self._session_factory() as session:
                rows = repository.list_products(session)
                return _records(ProductRecord, rows, "product")
        except (SQLAlchemyError, ValueError) as exc:
            logger.warning("Failed to load products: %s", exc)
            return []

    def insert_customer(
        self, code: str, name: str, city: str = "", phone: str = "", email: str = ""
    ) -> CustomerRecord:
        try:
            payload = CustomerInput(code=code, name=name, city=city, phone=phone, email=email)
        except ValidationError as exc:
            raise ConstraintViolationError(f"invalid customer: {exc.errors()[0]['msg']}") from exc
        with self._session_factory() as session:
            try:
                row = repository.add_customer(session, payload)
            except SQLAlchemyError as exc:
                session.rollback()
                raise self._translate(exc, "customer", code) from exc
            logger.info("Inserted customer %s (%s)", row.code, row.name)
            return CustomerRecord.model_validate(row)

    def insert_product(
        self, code: str, name: str, description: str, price: float
    ) -> ProductRecord:
        try:
            payload = ProductInput(code=code, name=name, description=description, price=price)
        except ValidationError as exc:
            raise ConstraintViolationError(f"invalid product: {exc.errors()[0]['msg']}") from exc
        with self._session_factory() as session:
            try:
                row = repository.add_product(session, payload)
            except SQLAlchemyError as exc:
                session.rollback()
                raise self._translate(exc, "product", code) from exc
            logger.info("Inserted product %s (%s)", row.code, row.name)
            return ProductRecord.model_validate(row)

    def close(self) -> None:
        self.engine.dispose()

    @staticmethod
    def _translate(exc: SQLAlchemyError, kind: str, code: str) -> GatewayError:
        text = _error_text(exc)
        logger.warning("Insert of %s %r failed: %s", kind, code, text)
        if isinstance(exc, IntegrityError):
            if "UNIQUE" in text.upper():
                return DuplicateCodeError(text)
            return ConstraintViolationError(text)
        return WriteError(text)
