"""Database models, engine helpers and the persistence gateway."""
from .engine import get_engine, init_db
from .gateway import (
    ConstraintViolationError,
    DuplicateCodeError,
    Gateway,
    GatewayError,
    StoreOpenError,
    WriteError,
)
from .models import Base, Customer, Product

__all__ = [
    "get_engine",
    "init_db",
    "Gateway",
    "GatewayError",
    "StoreOpenError",
    "ConstraintViolationError",
    "DuplicateCodeError",
    "WriteError",
    "Base",
    "Customer",
    "Product",
]
