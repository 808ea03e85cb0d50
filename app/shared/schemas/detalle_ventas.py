# app/shared/schemas/detalle_ventas.py
from pydantic import BaseModel
from typing import Optional

from app.shared.schemas.common import Monto


class DetalleVentaDTO(BaseModel):
    """Línea de venta tal como la expone el microservicio Detalle Ventas"""
    idDetalle: Optional[int] = None
    idVenta: Optional[int] = None
    idProducto: Optional[int] = None
    cantidad: Optional[int] = None
    precioUnitario: Optional[Monto] = None
