from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from cafe_pos.api.deps import require_admin
from cafe_pos.crud.order import create_order, delete_order, get_order_by_id, get_orders
from cafe_pos.db.session import get_async_session
from cafe_pos.exceptions import NotFound
from cafe_pos.schemas.order import OrderCreate, OrderList, OrderRead


router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderList)
async def list_orders(db: AsyncSession = Depends(get_async_session)):
    """
    Возвращает все заказы с позициями, новые первыми.
    """
    orders = await get_orders(db)
    return OrderList(orders=[OrderRead.from_orm_order(o) for o in orders])


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: str = Path(..., description="ID заказа"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Возвращает детализацию заказа по id.
    """
    order = await get_order_by_id(db, order_id)
    if not order:
        raise NotFound(f"Order {order_id} not found")
    return OrderRead.from_orm_order(order)


@router.post("", status_code=201, response_model=OrderRead)
async def create_order_endpoint(order_in: OrderCreate, db: AsyncSession = Depends(get_async_session)):
    """
    Создаёт заказ. Цены берутся из каталога по tier: H - в зале, S - навынос.
    """
    return await create_order(db, order_in.tier, order_in.lines)


@router.delete("/{order_id}", dependencies=[Depends(require_admin)])
async def remove_order(order_id: str, db: AsyncSession = Depends(get_async_session)):
    """
    Удаляет заказ вместе с позициями.
    """
    await delete_order(db, order_id)
    return {"ok": True}
