# app/schemas/service.py
from pydantic import BaseModel


class ServiceInfo(BaseModel):
    name: str
    version: str
    endpoints: list[str]


class HealthOut(BaseModel):
    ok: bool
