from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    Float,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()

# SQLite's CURRENT_TIMESTAMP layout, plus the variants older rows may carry.
TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
)


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parse a stored timestamp; unreadable values become `datetime.min`."""
    if not value:
        return datetime.min
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return datetime.min


class LenientTimestamp(TypeDecorator):
    """Text timestamp column that never fails on load.

    SQLAlchemy's SQLite DateTime raises on malformed strings; rows written by
    other tools must still be listable, so parsing falls back to the zero
    timestamp instead.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if isinstance(value, datetime):
            return value.strftime(TIMESTAMP_FORMATS[0])
        return value

    def process_result_value(self, value, dialect):
        return parse_timestamp(value)


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    city = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    active = Column(Boolean, default=True, server_default=text("1"))
    created = Column(LenientTimestamp, server_default=text("CURRENT_TIMESTAMP"))

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Customer(id={self.id}, code={self.code}, name={self.name})"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, default=0, server_default=text("0"))
    stock = Column(Integer, default=0, server_default=text("0"))
    min_stock = Column(Integer, default=0, server_default=text("0"))
    active = Column(Boolean, default=True, server_default=text("1"))
    created = Column(LenientTimestamp, server_default=text("CURRENT_TIMESTAMP"))

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Product(id={self.id}, code={self.code}, price={self.price})"
