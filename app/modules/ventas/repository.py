from sqlalchemy.orm import Session
from sqlalchemy import delete, func
from typing import List, Optional, Tuple
from decimal import Decimal
import logging

from app.shared.database.models import Venta

logger = logging.getLogger(__name__)

class VentasRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Venta]:
        return self.db.query(Venta).order_by(Venta.id_venta).all()

    def get_by_id(self, id_venta: int) -> Optional[Venta]:
        return self.db.get(Venta, id_venta)

    def list_by_cliente(self, id_cliente: int) -> List[Venta]:
        """Ventas de un cliente (igualdad exacta de id_cliente)"""
        return self.db.query(Venta).filter(
            Venta.id_cliente == id_cliente
        ).order_by(Venta.id_venta).all()

    def save(self, venta: Venta) -> Venta:
        try:
            self.db.add(venta)
            self.db.commit()
            self.db.refresh(venta)
        except Exception:
            logger.exception("Error guardando venta")
            self.db.rollback()
            raise
        logger.info(f"Venta guardada con ID: {venta.id_venta}")
        return venta

    def delete_by_id(self, id_venta: int) -> bool:
        """
        Eliminar en una sola sentencia condicional.

        Returns:
            bool: True si existía una fila con ese ID
        """
        try:
            result = self.db.execute(delete(Venta).where(Venta.id_venta == id_venta))
            self.db.commit()
        except Exception:
            logger.exception(f"Error eliminando venta {id_venta}")
            self.db.rollback()
            raise
        return result.rowcount > 0

    def totals(self) -> Tuple[int, Decimal]:
        """Cantidad de ventas y suma de totales en un solo query"""
        cantidad, suma = self.db.query(
            func.count(Venta.id_venta),
            func.coalesce(func.sum(Venta.total), 0)
        ).one()
        return cantidad or 0, Decimal(str(suma))
