"""Pydantic schemas for registry rows.

`*Input` models are the contract for inserts (what a submitted form turns
into); `*Record` models are the read-only rows handed to the UI, built
straight from ORM instances so no live session object leaks out.
"""
import math
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CustomerInput(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(min_length=1)
    name: str
    city: str = ""
    phone: str = ""
    email: str = ""


class ProductInput(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(min_length=1)
    name: str
    description: str = ""
    price: float = Field(ge=0)

    @field_validator("price")
    @classmethod
    def price_finite(cls, v: float) -> float:
        if math.isnan(v) or math.isinf(v):
            raise ValueError("price must be a finite number")
        return v


class _Record(BaseModel):
    """Row read back from the store.

    NULLs in nullable columns load as the field default, matching what a
    row inserted by this app would hold.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v, info):
        if v is None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return v


class CustomerRecord(_Record):
    id: int
    code: str
    name: str
    city: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    active: bool = True
    created: datetime = datetime.min


class ProductRecord(_Record):
    id: int
    code: str
    name: str
    description: Optional[str] = None
    price: float = 0.0
    stock: int = 0
    min_stock: int = 0
    active: bool = True
    created: datetime = datetime.min
