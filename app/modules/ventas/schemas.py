# app/modules/ventas/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List
from decimal import Decimal
from datetime import date

from app.shared.schemas.common import Monto
from app.shared.database.models import Venta
from app.shared.schemas.detalle_ventas import DetalleVentaDTO


class VentaCreate(BaseModel):
    """Cuerpo de POST /ventas"""
    id_cliente: int = Field(..., gt=0, description="ID del cliente")
    id_vendedor: int = Field(..., gt=0, description="ID del vendedor")
    fechaVenta: date = Field(..., description="Fecha de la venta")
    total: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Monto total")
    id_metodopago: int = Field(..., gt=0, description="ID del método de pago")

    def to_entity(self) -> Venta:
        return Venta(
            id_cliente=self.id_cliente,
            id_vendedor=self.id_vendedor,
            fecha_venta=self.fechaVenta,
            total=self.total,
            id_metodopago=self.id_metodopago,
        )


class VentaDTO(BaseModel):
    """Proyección de solo lectura de una Venta"""
    model_config = ConfigDict(frozen=True)

    id_venta: int
    id_cliente: int
    id_vendedor: int
    fechaVenta: date
    total: Monto
    id_metodopago: int

    @classmethod
    def from_entity(cls, venta: Venta) -> "VentaDTO":
        return cls(
            id_venta=venta.id_venta,
            id_cliente=venta.id_cliente,
            id_vendedor=venta.id_vendedor,
            fechaVenta=venta.fecha_venta,
            total=venta.total,
            id_metodopago=venta.id_metodopago,
        )


class EstadisticasVentas(BaseModel):
    cantidadVentas: int
    totalVentas: Monto
    promedioVentas: Monto


class VentaConDetalles(BaseModel):
    venta: VentaDTO
    detalles: List[DetalleVentaDTO]
    totalDetalles: int


class EstadisticasCompletas(BaseModel):
    ventas: EstadisticasVentas
    productos: Dict[str, Any]
    microservicios: Dict[str, bool]
