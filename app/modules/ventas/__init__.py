# app/modules/ventas/__init__.py
"""
Módulo de Ventas

Expone el CRUD de ventas con enlaces HATEOAS y las consultas combinadas
con el microservicio de Detalle Ventas.

Arquitectura:
- router.py: Endpoints /ventas
- service.py: Lógica de negocio de ventas
- repository.py: Acceso a datos de ventas
- schemas.py: Modelos de request/response
- links.py: Enlaces hipermedia de cada recurso
"""

from .router import router
from .service import VentasService
from .repository import VentasRepository

__all__ = [
    "router",
    "VentasService",
    "VentasRepository"
]
