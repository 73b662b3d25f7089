from .menu_item import MenuItem
from .order import Order, TierEnum
from .order_item import OrderItem

__all__ = [
    "MenuItem",
    "Order",
    "TierEnum",
    "OrderItem",
]
