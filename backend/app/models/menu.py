from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from decimal import Decimal

if TYPE_CHECKING:
    from .order import OrderItem


class MenuItem(SQLModel, table=True):
    __tablename__ = "menu_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None
    price: Decimal = Field(max_digits=10, decimal_places=2)
    category: Optional[str] = Field(default=None, index=True)
    is_special: bool = Field(default=False)

    # Relationships
    order_items: List["OrderItem"] = Relationship(back_populates="product")
