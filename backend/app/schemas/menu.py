from pydantic import Field, field_validator
from typing import Optional
from decimal import Decimal
from app.schemas.base import CamelModel


class MenuItemResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    category: Optional[str] = None
    is_special: bool


class MenuItemCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    category: Optional[str] = None
    is_special: bool = False


class MenuItemUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    category: Optional[str] = None
    is_special: Optional[bool] = None

    @field_validator("name", "price", "is_special")
    @classmethod
    def not_null(cls, value):
        # Колонки NOT NULL: null можно только не передавать
        if value is None:
            raise ValueError("must not be null")
        return value
