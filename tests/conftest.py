"""
Pytest Configuration and Fixtures
Base de datos sqlite en memoria y microservicio Detalle Ventas simulado.
"""
from collections.abc import Generator
from datetime import date
from decimal import Decimal

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import Base, get_db
from app.main import app
from app.shared.database.models import Venta
from app.shared.services.detalle_ventas_client import (
    DetalleVentasClient,
    get_detalle_ventas_client,
)

DETALLE_VENTAS_URL = "http://detalle-ventas.test"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


class FakeDetalleVentas:
    """Rutas del microservicio Detalle Ventas respondidas en memoria."""

    def __init__(self):
        self.routes = {}
        self.down = False
        self.requests = []

    def respond(self, path: str, status_code: int = 200, json=None, content=None):
        self.routes[path] = (status_code, json, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("Connection refused", request=request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"error": "Not Found"})
        status_code, body, content = self.routes[request.url.path]
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=body)

    def client(self) -> DetalleVentasClient:
        return DetalleVentasClient(
            base_url=DETALLE_VENTAS_URL,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def detalle_ventas() -> FakeDetalleVentas:
    return FakeDetalleVentas()


@pytest.fixture
def client(session_factory, detalle_ventas) -> Generator[TestClient, None, None]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_detalle_ventas_client] = detalle_ventas.client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def seed_ventas(db_session):
    """Insertar ventas directamente en la BD."""

    def seed(*filas):
        ventas = []
        for fila in filas:
            venta = Venta(
                id_cliente=fila.get("id_cliente", 1),
                id_vendedor=fila.get("id_vendedor", 7),
                fecha_venta=fila.get("fecha_venta", date(2024, 5, 10)),
                total=Decimal(str(fila.get("total", "100.00"))),
                id_metodopago=fila.get("id_metodopago", 2),
            )
            db_session.add(venta)
            ventas.append(venta)
        db_session.commit()
        for venta in ventas:
            db_session.refresh(venta)
        return ventas

    return seed
