import math
import re
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple
from uuid import uuid4

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cafe_pos.db.base import MAX_AMOUNT
from cafe_pos.exceptions import InvalidRequest, ReferenceNotFound, StorageFailure
from cafe_pos.models import MenuItem, Order, OrderItem, TierEnum
from cafe_pos.schemas.order import OrderLineRead, OrderRead, format_timestamp

logger = structlog.get_logger(__name__)

VALID_TIERS = {tier.value for tier in TierEnum}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def generate_order_id() -> str:
    return uuid4().hex


def normalize_qty(raw: Any) -> int:
    """
    Приводит количество к целому >= 0. Ничего не отклоняет:
    None, мусор и отрицательные значения дают 0, "3 шт" даёт 3, 2.7 даёт 2.
    """
    if raw is None or isinstance(raw, bool):
        qty = 0
    elif isinstance(raw, int):
        qty = raw
    elif isinstance(raw, float):
        qty = int(raw) if math.isfinite(raw) else 0
    elif isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        qty = int(match.group(1)) if match else 0
    else:
        qty = 0
    return max(0, qty)


def select_price(item: MenuItem, tier: TierEnum) -> int:
    return item.price_here if tier == TierEnum.here else item.price_away


async def resolve_lines(db: AsyncSession, tier: Any, lines: Any) -> Tuple[TierEnum, List[OrderLineRead], int]:
    """
    Проверяет запрос и считает цены по текущему каталогу.
    Количество, сумма позиции и итог не больше MAX_AMOUNT, иначе InvalidRequest.
    Ничего не пишет: при любой ошибке в базе не остаётся следов.
    Возвращает (tier, позиции, итог).
    """
    if not isinstance(tier, str) or tier not in VALID_TIERS:
        raise InvalidRequest(f"Invalid tier: {tier!r}")
    if not isinstance(lines, list):
        raise InvalidRequest("lines must be a list")

    tier = TierEnum(tier)
    resolved = []
    total = 0

    for line in lines:
        if not isinstance(line, dict):
            raise InvalidRequest(f"Invalid order line: {line!r}")
        item_id = line.get("id")
        if not isinstance(item_id, str):
            raise InvalidRequest(f"Invalid item id: {item_id!r}")

        item = await db.get(MenuItem, item_id)
        if not item:
            raise ReferenceNotFound(item_id)

        price = select_price(item, tier)
        qty = normalize_qty(line.get("qty"))
        if qty > MAX_AMOUNT:
            raise InvalidRequest(f"Quantity too large for item {item_id!r}")
        subtotal = price * qty
        if subtotal > MAX_AMOUNT:
            raise InvalidRequest(f"Subtotal too large for item {item_id!r}")
        total += subtotal
        if total > MAX_AMOUNT:
            raise InvalidRequest("Order total too large")

        # название и цена копируются в заказ: правки каталога историю не меняют
        resolved.append(OrderLineRead(id=item_id, name=item.name, qty=qty, price=price, subtotal=subtotal))

    return tier, resolved, total


async def create_order(db: AsyncSession, tier: Any, lines: Any) -> OrderRead:
    """
    Создаёт заказ с позициями одной транзакцией.
    Либо в базе появляется заказ со всеми позициями, либо ничего.
    """
    try:
        tier, resolved, total = await resolve_lines(db, tier, lines)
    except ReferenceNotFound as e:
        logger.info("order_rejected", reason="item_not_found", item_id=e.item_id)
        raise
    except InvalidRequest as e:
        logger.info("order_rejected", reason="invalid_body", detail=str(e))
        raise

    order_id = generate_order_id()
    created_at = datetime.now(timezone.utc)

    order = Order(
        id=order_id,
        created_at=created_at,
        tier=tier,
        total=total,
    )
    order.items = [
        OrderItem(item_id=line.id, name=line.name, qty=line.qty, price=line.price, subtotal=line.subtotal)
        for line in resolved
    ]
    db.add(order)

    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("order_commit_failed", order_id=order_id, error=str(e))
        raise StorageFailure(f"Could not save order {order_id}") from e

    logger.info("order_created", order_id=order_id, tier=tier.value, total=total, lines=len(resolved))

    return OrderRead(
        id=order_id,
        at=format_timestamp(created_at),
        tier=tier.value,
        total=total,
        items=resolved,
    )


async def get_orders(db: AsyncSession) -> List[Order]:
    """
    Возвращает все заказы с позициями, новые первыми.
    """
    stmt = (
        select(Order)
        .options(selectinload(Order.items))
        .order_by(Order.created_at.desc())
    )
    result = await db.execute(stmt)
    return result.scalars().unique().all()


async def get_order_by_id(db: AsyncSession, order_id: str) -> Optional[Order]:
    """
    Возвращает заказ по ID с подгруженными позициями.
    Предотвращает MissingGreenlet при сериализации.
    """
    stmt = (
        select(Order)
        .where(Order.id == order_id)
        .options(selectinload(Order.items))
    )
    result = await db.execute(stmt)
    return result.scalars().unique().first()


async def delete_order(session: AsyncSession, order_id: str) -> bool:
    """
    Удаляет заказ вместе со всеми позициями.
    """
    order = await get_order_by_id(session, order_id)
    if not order:
        return False
    lines = len(order.items)
    await session.delete(order)
    await session.commit()
    logger.info("order_deleted", order_id=order_id, lines=lines)
    return True
