"""Data schemas and validation."""
from .schemas import CustomerInput, CustomerRecord, ProductInput, ProductRecord

__all__ = [
    "CustomerInput",
    "CustomerRecord",
    "ProductInput",
    "ProductRecord",
]
