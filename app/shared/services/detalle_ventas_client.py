# app/shared/services/detalle_ventas_client.py
import httpx
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from app.config.settings import settings
from app.shared.schemas.detalle_ventas import DetalleVentaDTO

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RespuestaInvalida(Exception):
    """El microservicio respondió algo que no se puede interpretar"""


@dataclass(frozen=True)
class RemoteResult(Generic[T]):
    """
    Resultado de una llamada al microservicio.

    Cualquier fallo (red, timeout, status, cuerpo mal formado) se reduce al
    valor de respaldo y el motivo queda en `error`.
    """
    value: T
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None


def parse_decimal(value: Any) -> Decimal:
    """Precio exacto a partir de str, int o float tal como llegó en el JSON"""
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise RespuestaInvalida(f"Precio inválido: {value!r}")


class DetalleVentasClient:
    """Cliente para comunicación con el microservicio de Detalle Ventas"""

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def _get_with_fallback(
        self,
        path: str,
        parse: Callable[[Any], T],
        fallback: T
    ) -> RemoteResult[T]:
        url = f"{self.base_url}{path}"
        try:
            async with self._client() as client:
                response = await client.get(url)

            if response.status_code != 200:
                raise RespuestaInvalida(f"status {response.status_code}")

            return RemoteResult(value=parse(response.json()))

        except (httpx.HTTPError, ValueError, RespuestaInvalida) as e:
            # ValueError cubre cuerpos que no son JSON
            logger.warning(f"Detalle Ventas no disponible en {url}: {e}")
            return RemoteResult(value=fallback, error=str(e) or type(e).__name__)

    async def obtener_detalles(self, id_venta: int) -> RemoteResult[List[DetalleVentaDTO]]:
        return await self._get_with_fallback(
            f"/detalles/venta/{id_venta}", _parse_detalles, []
        )

    async def obtener_detalles_por_venta(self, id_venta: int) -> List[DetalleVentaDTO]:
        """Detalles de una venta; lista vacía si el microservicio falla"""
        return (await self.obtener_detalles(id_venta)).value

    async def obtener_estadisticas_productos(self) -> Dict[str, Any]:
        """Estadísticas de productos; dict vacío si el microservicio falla"""
        result = await self._get_with_fallback(
            "/detalle-ventas/stats/productos", _expect(dict), {}
        )
        return result.value

    async def obtener_productos_mas_vendidos(self) -> List[Dict[str, Any]]:
        """Productos más vendidos; lista vacía si el microservicio falla"""
        result = await self._get_with_fallback(
            "/detalle-ventas/productos/mas-vendidos", _parse_productos, []
        )
        return result.value

    async def is_detalle_ventas_available(self) -> bool:
        """Verificar salud del microservicio"""
        try:
            async with self._client() as client:
                response = await client.get(f"{self.base_url}/actuator/health")
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning(f"Health check de Detalle Ventas falló: {e}")
            return False


def _expect(kind: type) -> Callable[[Any], Any]:
    def parse(body: Any) -> Any:
        if not isinstance(body, kind):
            raise RespuestaInvalida(f"se esperaba {kind.__name__}, llegó {type(body).__name__}")
        return body
    return parse


def _parse_productos(body: Any) -> List[Dict[str, Any]]:
    productos = _expect(list)(body)
    return [p for p in productos if isinstance(p, dict)]


def _parse_detalles(body: Any) -> List[DetalleVentaDTO]:
    """Lee `_embedded.detalleVentaList` del sobre HAL"""
    embedded = _expect(dict)(body).get("_embedded")
    if not isinstance(embedded, dict):
        raise RespuestaInvalida("respuesta sin _embedded")

    detalles = embedded.get("detalleVentaList")
    if not isinstance(detalles, list):
        raise RespuestaInvalida("respuesta sin detalleVentaList")

    return [_parse_detalle(item) for item in detalles]


def _parse_detalle(item: Any) -> DetalleVentaDTO:
    if not isinstance(item, dict):
        raise RespuestaInvalida(f"detalle mal formado: {item!r}")

    precio = item.get("precioUnitario")
    return DetalleVentaDTO(
        idDetalle=item.get("idDetalle"),
        idVenta=item.get("idVenta"),
        idProducto=item.get("idProducto"),
        cantidad=item.get("cantidad"),
        precioUnitario=parse_decimal(precio) if precio is not None else None
    )


def get_detalle_ventas_client() -> DetalleVentasClient:
    """Dependency con la configuración de la app"""
    return DetalleVentasClient(
        base_url=settings.detalle_ventas_base_url,
        connect_timeout=settings.detalle_ventas_connect_timeout,
        read_timeout=settings.detalle_ventas_read_timeout
    )
