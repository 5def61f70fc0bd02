# app/schemas/movement.py
from app.models.movement import MovementType
from app.schemas.base import ApiModel, Timestamp
from app.schemas.vehicle import VehicleOut


class MovementOut(ApiModel):
    id: int
    vehicle_id: int
    driver_name: str
    type: MovementType
    date_time: Timestamp
    odometer_km: int
    created_at: Timestamp


class MovementWithVehicleOut(MovementOut):
    vehicle: VehicleOut


class MovementPage(ApiModel):
    items: list[MovementWithVehicleOut]
    total: int
    page: int
    page_size: int
