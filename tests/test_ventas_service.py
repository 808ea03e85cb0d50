from datetime import date
from decimal import Decimal

import pytest

from app.modules.ventas.schemas import VentaCreate
from app.modules.ventas.service import VentasService

pytestmark = pytest.mark.unit


def _venta(**overrides) -> VentaCreate:
    data = {
        "id_cliente": 1,
        "id_vendedor": 2,
        "fechaVenta": date(2024, 1, 15),
        "total": Decimal("10.00"),
        "id_metodopago": 1,
    }
    data.update(overrides)
    return VentaCreate(**data)


def test_guardar_assigns_identifier(db_session):
    service = VentasService(db_session)

    primera = service.guardar(_venta())
    segunda = service.guardar(_venta())

    assert primera.id_venta is not None
    assert segunda.id_venta != primera.id_venta
    assert service.obtener_por_id(primera.id_venta).total == Decimal("10.00")


def test_obtener_por_id_missing_returns_none(db_session):
    assert VentasService(db_session).obtener_por_id(404) is None


def test_eliminar_reports_existence(db_session):
    service = VentasService(db_session)
    venta = service.guardar(_venta())

    assert service.eliminar(venta.id_venta) is True
    assert service.eliminar(venta.id_venta) is False
    assert service.listar() == []


def test_buscar_por_cliente(db_session):
    service = VentasService(db_session)
    service.guardar(_venta(id_cliente=1))
    service.guardar(_venta(id_cliente=2))
    service.guardar(_venta(id_cliente=1))

    assert {v.id_cliente for v in service.buscar_por_cliente(1)} == {1}
    assert len(service.buscar_por_cliente(1)) == 2
    assert service.buscar_por_cliente(9) == []


def test_estadisticas_empty(db_session):
    stats = VentasService(db_session).estadisticas()
    assert stats.cantidadVentas == 0
    assert stats.totalVentas == 0
    assert stats.promedioVentas == 0


def test_estadisticas_keeps_decimal_precision(db_session):
    service = VentasService(db_session)
    service.guardar(_venta(total=Decimal("0.10")))
    service.guardar(_venta(total=Decimal("0.20")))

    stats = service.estadisticas()
    assert stats.cantidadVentas == 2
    assert stats.totalVentas == Decimal("0.30")
    assert stats.promedioVentas == Decimal("0.15")


def test_venta_create_rejects_negative_total():
    with pytest.raises(ValueError):
        _venta(total=Decimal("-1"))
