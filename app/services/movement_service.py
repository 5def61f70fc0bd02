# app/services/movement_service.py
"""
Movement data access: filtered, paginated history and append-only creation.

Listing never checks that a filtered vehicle exists, an unknown vehicleId
just matches nothing. Creation relies on the movements.vehicle_id foreign
key and reports a violation as ErrorCode.VEHICLE_MISSING.
"""

from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from app.errors import DataAccessError, ErrorCode
from app.models.movement import Movement
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _filtered(db: Session, vehicle_id=None, driver=None, date_from=None, date_to=None):
    q = db.query(Movement)
    if vehicle_id is not None:
        q = q.filter(Movement.vehicle_id == vehicle_id)
    if driver:
        q = q.filter(Movement.driver_name.icontains(driver, autoescape=True))
    if date_from is not None:
        q = q.filter(Movement.date_time >= date_from)
    if date_to is not None:
        q = q.filter(Movement.date_time <= date_to)
    return q


def list_movements(db: Session, page: int, page_size: int, **filters) -> tuple[list[Movement], int]:
    """
    Returns (items, total). Items come newest dateTime first with their
    vehicle loaded; total is the match count before pagination.
    """
    total = _filtered(db, **filters).count()
    items = (
        _filtered(db, **filters)
        .options(joinedload(Movement.vehicle))
        .order_by(Movement.date_time.desc(), Movement.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return items, total


def create_movement(db: Session, data: dict) -> Movement:
    movement = Movement(**data, created_at=datetime.utcnow())
    db.add(movement)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Movement rejected, vehicle {data['vehicle_id']} does not exist")
        raise DataAccessError(ErrorCode.VEHICLE_MISSING, "vehicleId does not exist")
    db.refresh(movement)
    logger.info(
        f"Movement logged: id={movement.id} vehicle={movement.vehicle_id} "
        f"type={movement.type.value} odometer={movement.odometer_km}"
    )
    return movement
