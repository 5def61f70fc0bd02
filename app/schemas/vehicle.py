# app/schemas/vehicle.py
from app.schemas.base import ApiModel, Timestamp


class VehicleOut(ApiModel):
    id: int
    brand: str
    model: str
    plate: str
    created_at: Timestamp
    updated_at: Timestamp
