from sqlalchemy import BigInteger, Column, String
from ..db.base import Base


class MenuItem(Base):
    __tablename__ = "items"

    id = Column(String(64), primary_key=True)  # задаётся администратором
    name = Column(String(128), nullable=False)
    unit = Column(String(32), nullable=False, default="", server_default="")
    category = Column(String(64), nullable=False)  # кофе, еда, десерт и т.д.
    # цены в копейках, отдельно для зала и навынос
    price_here = Column(BigInteger, nullable=False)
    price_away = Column(BigInteger, nullable=False)
