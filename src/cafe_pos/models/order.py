import enum
from sqlalchemy import BigInteger, Column, String, DateTime, Enum as SAEnum
from sqlalchemy.orm import relationship
from ..db.base import Base


class TierEnum(str, enum.Enum):
    here = "H"  # в зале
    away = "S"  # навынос


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(32), primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    tier = Column(
        SAEnum(TierEnum, name="order_tier", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    total = Column(BigInteger, nullable=False)

    # позиции принадлежат заказу и удаляются вместе с ним
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
