from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

if TYPE_CHECKING:
    from .user import User
    from .menu import MenuItem


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PREPARING = "Preparing"
    READY = "Ready"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    # Сумма приходит от клиента и сохраняется как есть
    total_cost: Decimal = Field(max_digits=10, decimal_places=2)

    status: OrderStatus = Field(default=OrderStatus.PENDING)
    delivery_method: Optional[str] = None
    payment_method: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    user: Optional["User"] = Relationship(back_populates="orders")
    items: List["OrderItem"] = Relationship(back_populates="order")


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True)
    product_id: int = Field(foreign_key="menu_items.id")
    quantity: int

    # Relationships
    order: Optional[Order] = Relationship(back_populates="items")
    product: Optional["MenuItem"] = Relationship(back_populates="order_items")
