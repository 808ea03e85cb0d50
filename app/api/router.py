# app/api/router.py
from fastapi import APIRouter
from app.modules.ventas.router import router as ventas_router

api_router = APIRouter()

api_router.include_router(
    ventas_router,
    prefix="/ventas",
    tags=["Ventas"]
)
