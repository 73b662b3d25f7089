from typing import List, Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_pos.exceptions import DuplicateItem
from cafe_pos.models import MenuItem
from cafe_pos.schemas.menu_item import ItemCreate, ItemUpdate

logger = structlog.get_logger(__name__)


async def list_items(db: AsyncSession) -> List[MenuItem]:
    """
    Возвращает весь каталог, отсортированный по категории и названию.
    """
    result = await db.execute(select(MenuItem).order_by(MenuItem.category, MenuItem.name))
    return result.scalars().all()


async def get_item(db: AsyncSession, item_id: str) -> Optional[MenuItem]:
    return await db.get(MenuItem, item_id)


async def create_item(db: AsyncSession, item_in: ItemCreate) -> MenuItem:
    """
    Добавляет товар в каталог. id задаёт вызывающий и он должен быть уникальным.
    """
    if await db.get(MenuItem, item_in.id) is not None:
        raise DuplicateItem(item_in.id)

    item = MenuItem(**item_in.model_dump())
    db.add(item)
    try:
        await db.commit()
    except IntegrityError as e:
        # параллельный запрос успел вставить тот же id
        await db.rollback()
        raise DuplicateItem(item_in.id) from e

    logger.info("item_created", item_id=item.id, category=item.category)
    return item


async def update_item(db: AsyncSession, item_id: str, item_in: ItemUpdate) -> Optional[MenuItem]:
    """
    Обновляет только переданные поля (None означает "не менять").
    Возвращает None, если товара нет.
    """
    item = await db.get(MenuItem, item_id)
    if not item:
        return None

    update_data = item_in.model_dump(exclude_none=True)
    for key, value in update_data.items():
        setattr(item, key, value)

    await db.commit()
    logger.info("item_updated", item_id=item_id, fields=sorted(update_data))
    return item


async def delete_item(db: AsyncSession, item_id: str) -> bool:
    """
    Удаляет товар. Уже оформленные заказы хранят копию названия и цены и не меняются.
    """
    item = await db.get(MenuItem, item_id)
    if not item:
        return False
    await db.delete(item)
    await db.commit()
    logger.info("item_deleted", item_id=item_id)
    return True
