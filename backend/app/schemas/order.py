from pydantic import Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from app.models.order import OrderStatus
from app.schemas.base import CamelModel


class OrderItemCreate(CamelModel):
    product_id: int
    quantity: int = Field(gt=0)


class OrderCreate(CamelModel):
    # Если не указан, заказ оформляется на текущего пользователя
    user_id: Optional[int] = None
    items: List[OrderItemCreate] = Field(min_length=1)

    total_cost: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    delivery_method: str
    payment_method: str


class OrderItemResponse(CamelModel):
    id: int
    product_id: int
    quantity: int


class OrderResponse(CamelModel):
    id: int
    user_id: int
    total_cost: Decimal
    status: OrderStatus
    delivery_method: Optional[str] = None
    payment_method: Optional[str] = None

    created_at: datetime
    items: List[OrderItemResponse] = []


class OrderStatusUpdate(CamelModel):
    status: OrderStatus
