# app/config/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # App Info
    app_name: str = "API de Ventas - Perfunlandia"
    description: str = "API REST para gestión de ventas con soporte HATEOAS"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./ventas.db")

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8181))
    cors_origins: str = "*"

    # Microservicio Detalle Ventas
    detalle_ventas_base_url: str = os.getenv("DETALLE_VENTAS_BASE_URL", "http://localhost:8082")
    detalle_ventas_connect_timeout: float = 10.0
    detalle_ventas_read_timeout: float = 30.0

    # API Gateway usado en los enlaces "gateway"
    gateway_base_url: str = "http://localhost:8888"

    # Documentación OpenAPI
    contact_name: str = "Equipo de Desarrollo"
    contact_email: str = "desarrollo@perfunlandia.com"
    contact_url: str = "https://perfunlandia.com"
    license_name: str = "MIT License"
    license_url: str = "https://opensource.org/licenses/MIT"

    @property
    def cors_origins_list(self) -> List[str]:
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def openapi_servers(self) -> List[dict]:
        return [
            {"url": f"http://localhost:{self.port}", "description": "Servidor local de desarrollo"},
            {"url": self.gateway_base_url, "description": "API Gateway"},
        ]

settings = Settings()
