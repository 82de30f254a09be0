from .user import User, UserRole, PasswordReset
from .menu import MenuItem
from .order import Order, OrderItem, OrderStatus

__all__ = [
    "User", "UserRole", "PasswordReset",
    "MenuItem",
    "Order", "OrderItem", "OrderStatus",
]
