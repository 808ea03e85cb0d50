from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
import logging

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_MESSAGE = "Error de validación"


def first_field_error(exc: RequestValidationError) -> str:
    """'campo: mensaje' del primer error de validación"""
    for error in exc.errors():
        # loc viene como ("body", "campo", ...); el prefijo no es parte del campo
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        msg = error.get("msg", DEFAULT_VALIDATION_MESSAGE)
        return f"{'.'.join(loc)}: {msg}" if loc else msg
    return DEFAULT_VALIDATION_MESSAGE


def setup_exception_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        mensaje = first_field_error(exc)
        logger.info(f"{request.method} {request.url.path} - Validación fallida: {mensaje}")
        return PlainTextResponse(mensaje, status_code=400)
