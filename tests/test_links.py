import pytest

from app.modules.ventas.links import VentaLinkBuilder

pytestmark = pytest.mark.unit

SELF = "http://ventas.local:8181"
GATEWAY = "http://gateway:8888"


@pytest.fixture
def links():
    return VentaLinkBuilder(SELF + "/", GATEWAY + "/")


def test_venta_links(links):
    hal = links.venta(7).to_hal()
    assert hal == {
        "self": {"href": f"{SELF}/ventas/7"},
        "ventas": {"href": f"{SELF}/ventas"},
        "delete": {"href": f"{SELF}/ventas/7"},
        "gateway": {"href": f"{GATEWAY}/ventas/7"},
    }


def test_venta_item_has_no_delete(links):
    assert links.venta_item(7).rels == ["self", "ventas", "gateway"]


def test_collection_links(links):
    assert links.ventas_collection().to_hal() == {
        "self": {"href": f"{SELF}/ventas"},
        "gateway": {"href": f"{GATEWAY}/ventas"},
    }


def test_cliente_collection_links(links):
    cliente = links.cliente_collection(3)
    assert cliente.get("self").href == f"{SELF}/ventas/cliente/3"
    assert cliente.get("gateway").href == f"{GATEWAY}/ventas/cliente/3"


def test_con_detalles_links(links):
    hal = links.con_detalles(5).to_hal()
    assert hal["self"]["href"] == f"{SELF}/ventas/5/con-detalles"
    assert hal["venta"]["href"] == f"{SELF}/ventas/5"
    assert hal["gateway"]["href"] == f"{GATEWAY}/ventas/5/con-detalles"


def test_stats_links(links):
    assert links.stats().rels == ["self", "ventas", "gateway"]
    completas = links.stats_completas()
    assert completas.rels == ["self", "stats-ventas", "ventas", "gateway"]
    assert completas.get("stats-ventas").href == f"{SELF}/ventas/stats"


def test_mas_vendidos_links(links):
    assert links.mas_vendidos().get("gateway").href == f"{GATEWAY}/ventas/productos/mas-vendidos"
