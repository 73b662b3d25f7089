from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel


def format_timestamp(value: datetime) -> str:
    """
    ISO-8601 в UTC с миллисекундами и суффиксом Z: 2025-01-31T09:15:02.123Z.
    SQLite возвращает naive datetime, считаем его UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderLineRead(BaseModel):
    id: str
    name: str
    qty: int
    price: int
    subtotal: int

    @classmethod
    def from_orm_line(cls, line):
        return cls(
            id=line.item_id,
            name=line.name,
            qty=line.qty,
            price=line.price,
            subtotal=line.subtotal,
        )


class OrderRead(BaseModel):
    id: str
    at: str
    tier: str
    total: int
    items: List[OrderLineRead] = []

    @classmethod
    def from_orm_order(cls, order):
        tier = order.tier.value if hasattr(order.tier, "value") else order.tier
        return cls(
            id=order.id,
            at=format_timestamp(order.created_at),
            tier=tier,
            total=order.total,
            items=[OrderLineRead.from_orm_line(line) for line in order.items],
        )


class OrderList(BaseModel):
    orders: List[OrderRead]


class OrderCreate(BaseModel):
    """
    Тело POST /orders: {"tier": "H" | "S", "lines": [{"id": ..., "qty": ...}]}.
    Поля намеренно не типизированы: проверку делает create_order,
    чтобы ошибки были одинаковыми для API и для прямых вызовов.
    """
    tier: Any = None
    lines: Any = None
