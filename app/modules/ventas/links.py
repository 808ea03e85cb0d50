# app/modules/ventas/links.py
"""
Construcción de enlaces hipermedia para los recursos de ventas.

Cada recurso lleva `self`, un enlace al recurso padre y un enlace `gateway`
con la misma ruta servida por el API Gateway.
"""
from app.shared.schemas.common import LinkSet

VENTAS_PATH = "/ventas"


class VentaLinkBuilder:
    def __init__(self, self_base: str, gateway_base: str):
        self.self_base = self_base.rstrip("/")
        self.gateway_base = gateway_base.rstrip("/")

    def _links(self, path: str, *related: tuple) -> LinkSet:
        links = LinkSet().add("self", self.self_base + path)
        for rel, related_path in related:
            links.add(rel, self.self_base + related_path)
        return links.add("gateway", self.gateway_base + path)

    def venta_item(self, id_venta: int) -> LinkSet:
        """Enlaces de una venta dentro de una colección"""
        return self._links(f"{VENTAS_PATH}/{id_venta}", ("ventas", VENTAS_PATH))

    def venta(self, id_venta: int) -> LinkSet:
        path = f"{VENTAS_PATH}/{id_venta}"
        return self._links(path, ("ventas", VENTAS_PATH), ("delete", path))

    def ventas_collection(self) -> LinkSet:
        return self._links(VENTAS_PATH)

    def cliente_collection(self, id_cliente: int) -> LinkSet:
        return self._links(f"{VENTAS_PATH}/cliente/{id_cliente}", ("ventas", VENTAS_PATH))

    def stats(self) -> LinkSet:
        return self._links(f"{VENTAS_PATH}/stats", ("ventas", VENTAS_PATH))

    def con_detalles(self, id_venta: int) -> LinkSet:
        return self._links(
            f"{VENTAS_PATH}/{id_venta}/con-detalles",
            ("venta", f"{VENTAS_PATH}/{id_venta}"),
            ("ventas", VENTAS_PATH),
        )

    def stats_completas(self) -> LinkSet:
        return self._links(
            f"{VENTAS_PATH}/stats/completas",
            ("stats-ventas", f"{VENTAS_PATH}/stats"),
            ("ventas", VENTAS_PATH),
        )

    def mas_vendidos(self) -> LinkSet:
        return self._links(f"{VENTAS_PATH}/productos/mas-vendidos", ("ventas", VENTAS_PATH))
