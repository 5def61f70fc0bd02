# app/services/vehicle_service.py
"""
Vehicle data access: lookup, registration, partial update and removal.
Unique-plate violations are translated to ErrorCode.CONFLICT; a delete
blocked by existing movements is left to propagate.
"""

from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.errors import DataAccessError, ErrorCode
from app.models.vehicle import Vehicle
from app.utils.logger import get_logger

logger = get_logger(__name__)

PLATE_EXISTS = "Plate already exists"
NOT_FOUND = "Not found"


def list_vehicles(db: Session) -> list[Vehicle]:
    return db.query(Vehicle).order_by(Vehicle.id.desc()).all()


def get_vehicle(db: Session, vehicle_id: int) -> Vehicle:
    vehicle = db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
    if vehicle is None:
        raise DataAccessError(ErrorCode.NOT_FOUND, NOT_FOUND)
    return vehicle


def _commit_plate(db: Session, plate: str):
    """Commit, turning a unique-plate violation into a CONFLICT."""
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Duplicate plate rejected: {plate}")
        raise DataAccessError(ErrorCode.CONFLICT, PLATE_EXISTS)


def create_vehicle(db: Session, data: dict) -> Vehicle:
    now = datetime.utcnow()
    vehicle = Vehicle(**data, created_at=now, updated_at=now)
    db.add(vehicle)
    _commit_plate(db, data["plate"])
    db.refresh(vehicle)
    logger.info(f"Vehicle registered: id={vehicle.id} plate={vehicle.plate}")
    return vehicle


def update_vehicle(db: Session, vehicle_id: int, data: dict) -> Vehicle:
    """Apply only the supplied fields; updated_at is always refreshed."""
    vehicle = get_vehicle(db, vehicle_id)
    for field, value in data.items():
        setattr(vehicle, field, value)
    vehicle.updated_at = datetime.utcnow()
    _commit_plate(db, data.get("plate", vehicle.plate))
    db.refresh(vehicle)
    logger.info(f"Vehicle updated: id={vehicle.id} fields={sorted(data)}")
    return vehicle


def delete_vehicle(db: Session, vehicle_id: int):
    vehicle = get_vehicle(db, vehicle_id)
    db.delete(vehicle)
    try:
        db.commit()
    except IntegrityError:
        # Movements still reference it (FK RESTRICT)
        db.rollback()
        raise
    logger.info(f"Vehicle removed: id={vehicle_id}")
