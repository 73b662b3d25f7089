from typing import List, Optional

from pydantic import BaseModel, Field, conint, constr

from cafe_pos.db.base import MAX_AMOUNT


class ItemRead(BaseModel):
    id: str
    name: str
    unit: str = ""
    category: str
    price_here: int = Field(alias="priceH")
    price_away: int = Field(alias="priceS")

    class Config:
        from_attributes = True
        populate_by_name = True


class ItemList(BaseModel):
    items: List[ItemRead]


class ItemCreate(BaseModel):
    id: constr(min_length=1, max_length=64)
    name: constr(min_length=1, max_length=128)
    unit: constr(max_length=32) = ""
    category: constr(min_length=1, max_length=64)
    # строго целые, 1.5 и "150" не принимаем
    price_here: conint(strict=True, ge=0, le=MAX_AMOUNT) = Field(alias="priceH")
    price_away: conint(strict=True, ge=0, le=MAX_AMOUNT) = Field(alias="priceS")

    class Config:
        populate_by_name = True


class ItemUpdate(BaseModel):
    """Частичное обновление: не переданные поля остаются как были."""
    name: Optional[constr(min_length=1, max_length=128)] = None
    unit: Optional[constr(max_length=32)] = None
    category: Optional[constr(min_length=1, max_length=64)] = None
    price_here: Optional[conint(strict=True, ge=0, le=MAX_AMOUNT)] = Field(default=None, alias="priceH")
    price_away: Optional[conint(strict=True, ge=0, le=MAX_AMOUNT)] = Field(default=None, alias="priceS")

    class Config:
        populate_by_name = True
        extra = "forbid"
