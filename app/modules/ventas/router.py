# app/modules/ventas/router.py
from fastapi import APIRouter, Body, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session
import logging

from app.config.database import get_db
from app.config.settings import settings
from app.shared.schemas.common import entity_model, collection_model
from app.shared.services.detalle_ventas_client import DetalleVentasClient, get_detalle_ventas_client
from .links import VentaLinkBuilder
from .service import VentasService
from .schemas import (
    VentaCreate, VentaDTO, VentaConDetalles, EstadisticasCompletas
)

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "Venta no encontrada"

NOT_FOUND = {404: {"description": NOT_FOUND_MESSAGE}}


def get_link_builder(request: Request) -> VentaLinkBuilder:
    return VentaLinkBuilder(str(request.base_url), settings.gateway_base_url)


def _venta_items(ventas, links: VentaLinkBuilder):
    return [
        entity_model(VentaDTO.from_entity(venta), links.venta_item(venta.id_venta))
        for venta in ventas
    ]


@router.get(
    "",
    summary="Listar todas las ventas",
    responses={204: {"description": "No hay ventas"}}
)
async def listar_ventas(
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder)
):
    """Todas las ventas con enlaces HATEOAS"""
    ventas = VentasService(db).listar()

    if not ventas:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return collection_model("ventas", _venta_items(ventas, links), links.ventas_collection())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crear nueva venta",
    responses={400: {"description": "Datos de venta inválidos"}}
)
async def crear_venta(
    venta: VentaCreate = Body(..., description="Datos de la venta"),
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder)
):
    nueva = VentasService(db).guardar(venta)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=entity_model(VentaDTO.from_entity(nueva), links.venta(nueva.id_venta))
    )


@router.get("/stats", summary="Obtener estadísticas de ventas")
async def obtener_estadisticas(
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder)
):
    """Cantidad, total y promedio de las ventas registradas"""
    stats = VentasService(db).estadisticas()
    return entity_model(stats, links.stats())


@router.get("/stats/completas", summary="Obtener estadísticas completas")
async def obtener_estadisticas_completas(
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder),
    detalle_ventas: DetalleVentasClient = Depends(get_detalle_ventas_client)
):
    """
    Estadísticas combinadas de ventas y productos

    **Incluye:**
    - Estadísticas locales de ventas
    - Estadísticas de productos desde Detalle Ventas (vacías si no responde)
    - Disponibilidad del microservicio Detalle Ventas
    """
    stats = EstadisticasCompletas(
        ventas=VentasService(db).estadisticas(),
        productos=await detalle_ventas.obtener_estadisticas_productos(),
        microservicios={
            "detalleVentasDisponible": await detalle_ventas.is_detalle_ventas_available()
        }
    )
    return entity_model(stats, links.stats_completas())


@router.get("/productos/mas-vendidos", summary="Obtener productos más vendidos")
async def obtener_productos_mas_vendidos(
    links: VentaLinkBuilder = Depends(get_link_builder),
    detalle_ventas: DetalleVentasClient = Depends(get_detalle_ventas_client)
):
    productos = await detalle_ventas.obtener_productos_mas_vendidos()
    return entity_model({"productos": productos}, links.mas_vendidos())


@router.get(
    "/cliente/{id_cliente}",
    summary="Buscar ventas por cliente",
    responses={204: {"description": "No hay ventas para este cliente"}}
)
async def buscar_por_cliente(
    id_cliente: int,
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder)
):
    ventas = VentasService(db).buscar_por_cliente(id_cliente)

    if not ventas:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return collection_model("ventas", _venta_items(ventas, links), links.cliente_collection(id_cliente))


@router.get("/{id_venta}", summary="Obtener venta por ID", responses=NOT_FOUND)
async def obtener_venta(
    id_venta: int,
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder)
):
    venta = VentasService(db).obtener_por_id(id_venta)
    if venta is None:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)

    return entity_model(VentaDTO.from_entity(venta), links.venta(id_venta))


@router.get("/{id_venta}/con-detalles", summary="Obtener venta con detalles", responses=NOT_FOUND)
async def obtener_venta_con_detalles(
    id_venta: int,
    db: Session = Depends(get_db),
    links: VentaLinkBuilder = Depends(get_link_builder),
    detalle_ventas: DetalleVentasClient = Depends(get_detalle_ventas_client)
):
    """
    Venta junto con sus líneas de producto desde Detalle Ventas.

    Si el microservicio no responde la venta se devuelve igual, sin detalles.
    """
    venta = VentasService(db).obtener_por_id(id_venta)
    if venta is None:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)

    detalles = await detalle_ventas.obtener_detalles_por_venta(id_venta)

    venta_completa = VentaConDetalles(
        venta=VentaDTO.from_entity(venta),
        detalles=detalles,
        totalDetalles=len(detalles)
    )
    return entity_model(venta_completa, links.con_detalles(id_venta))


@router.delete("/{id_venta}", summary="Eliminar venta", responses=NOT_FOUND)
async def eliminar_venta(
    id_venta: int,
    db: Session = Depends(get_db)
):
    if not VentasService(db).eliminar(id_venta):
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)

    return PlainTextResponse("Venta eliminada exitosamente")
