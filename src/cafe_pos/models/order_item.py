from sqlalchemy import BigInteger, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(32), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    # без FK на items: удаление товара из каталога не трогает историю заказов
    item_id = Column(String(64), nullable=False)
    name = Column(String(128), nullable=False)  # фиксируется на момент заказа
    qty = Column(BigInteger, nullable=False, default=0)
    price = Column(BigInteger, nullable=False)  # фиксируется на момент заказа
    subtotal = Column(BigInteger, nullable=False)

    # связи
    order = relationship("Order", back_populates="items")
