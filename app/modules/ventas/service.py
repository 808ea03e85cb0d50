# app/modules/ventas/service.py
from sqlalchemy.orm import Session
from typing import List, Optional
from decimal import Decimal
import logging

from .repository import VentasRepository
from .schemas import VentaCreate, EstadisticasVentas
from app.shared.database.models import Venta

logger = logging.getLogger(__name__)

class VentasService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = VentasRepository(db)

    def listar(self) -> List[Venta]:
        return self.repository.list_all()

    def obtener_por_id(self, id_venta: int) -> Optional[Venta]:
        """Venta con ese ID o None si no existe"""
        return self.repository.get_by_id(id_venta)

    def guardar(self, venta_data: VentaCreate) -> Venta:
        logger.info(f"Registrando venta - Cliente: {venta_data.id_cliente}, Vendedor: {venta_data.id_vendedor}")
        return self.repository.save(venta_data.to_entity())

    def eliminar(self, id_venta: int) -> bool:
        """
        Eliminar una venta si existe.

        La comprobación y el borrado son una sola sentencia, así dos DELETE
        concurrentes del mismo ID no pueden reportar éxito ambos.
        """
        eliminada = self.repository.delete_by_id(id_venta)
        if eliminada:
            logger.info(f"Venta {id_venta} eliminada")
        return eliminada

    def buscar_por_cliente(self, id_cliente: int) -> List[Venta]:
        return self.repository.list_by_cliente(id_cliente)

    def estadisticas(self) -> EstadisticasVentas:
        """Cantidad, suma y promedio de los totales (promedio 0 sin ventas)"""
        cantidad, total = self.repository.totals()
        promedio = total / cantidad if cantidad > 0 else Decimal("0")
        return EstadisticasVentas(
            cantidadVentas=cantidad,
            totalVentas=total,
            promedioVentas=promedio
        )
