# app/routers/health.py
"""Service descriptor and liveness endpoints."""

from fastapi import APIRouter
from app.config import settings
from app.schemas.service import HealthOut, ServiceInfo

router = APIRouter()

ENDPOINTS = ["/health", "/api/vehicles", "/api/movements"]


@router.get("/", response_model=ServiceInfo, summary="Service descriptor")
def service_info():
    return ServiceInfo(name=settings.APP_NAME, version=settings.APP_VERSION, endpoints=ENDPOINTS)


@router.get("/health", response_model=HealthOut, summary="Liveness check")
def health_check():
    return HealthOut(ok=True)
