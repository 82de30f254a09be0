from .menu import MenuItemResponse, MenuItemCreate, MenuItemUpdate
from .order import OrderCreate, OrderItemCreate, OrderResponse, OrderStatusUpdate

__all__ = [
    "MenuItemResponse", "MenuItemCreate", "MenuItemUpdate",
    "OrderCreate", "OrderItemCreate", "OrderResponse", "OrderStatusUpdate",
]
