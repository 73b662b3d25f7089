from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_pos.api.deps import require_admin
from cafe_pos.crud.menu_item import create_item, delete_item, list_items, update_item
from cafe_pos.db.session import get_async_session
from cafe_pos.exceptions import NotFound
from cafe_pos.schemas.menu_item import ItemCreate, ItemList, ItemRead, ItemUpdate


router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=ItemList)
async def list_items_endpoint(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает каталог, отсортированный по категории и названию.
    """
    items = await list_items(db)
    return ItemList(items=[ItemRead.model_validate(i) for i in items])


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_item_endpoint(item_in: ItemCreate, db: AsyncSession = Depends(get_async_session)):
    await create_item(db, item_in)
    return {"ok": True}


@router.put("/{item_id}", dependencies=[Depends(require_admin)])
async def update_item_endpoint(
    item_in: ItemUpdate,
    item_id: str = Path(..., description="ID товара"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Частичное обновление товара: меняются только переданные поля.
    """
    item = await update_item(db, item_id, item_in)
    if not item:
        raise NotFound(f"Item {item_id} not found")
    return {"ok": True}


@router.delete("/{item_id}", dependencies=[Depends(require_admin)])
async def remove_item(item_id: str, db: AsyncSession = Depends(get_async_session)):
    """
    Удаляет товар. Отсутствующий id не ошибка.
    """
    await delete_item(db, item_id)
    return {"ok": True}
