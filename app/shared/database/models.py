# app/shared/database/models.py
from sqlalchemy import Column, BigInteger, Integer, Date, Numeric

from app.config.database import Base


class Venta(Base):
    """Modelo de Venta"""
    __tablename__ = "ventas"

    # sqlite solo autoincrementa INTEGER PRIMARY KEY
    id_venta = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True, index=True)
    id_cliente = Column(BigInteger, nullable=False, index=True)
    id_vendedor = Column(BigInteger, nullable=False)
    fecha_venta = Column(Date, nullable=False)
    total = Column(Numeric(12, 2), nullable=False)
    id_metodopago = Column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<Venta id={self.id_venta} cliente={self.id_cliente} total={self.total}>"
