# app/routers/movements.py
"""Movement log: filtered/paginated history and creation of ENTRY/EXIT records."""

from typing import Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.errors import DataAccessError, to_http_exception
from app.schemas.movement import MovementOut, MovementPage
from app.services import movement_service
from app.utils.validators import normalize_pagination, validate_movement_create, validate_movement_filters

router = APIRouter()


@router.get("/movements", response_model=MovementPage, summary="List movements with filters")
def list_movements(
    page: Optional[str] = None,
    page_size: Optional[str] = Query(default=None, alias="pageSize"),
    vehicle_id: Optional[str] = Query(default=None, alias="vehicleId"),
    driver: Optional[str] = None,
    date_from: Optional[str] = Query(default=None, alias="from"),
    date_to: Optional[str] = Query(default=None, alias="to"),
    db: Session = Depends(get_db),
):
    """
    Newest dateTime first. `driver` is a case-insensitive substring match,
    `from`/`to` are inclusive bounds on dateTime.
    """
    page, page_size = normalize_pagination(page, page_size)
    filters = validate_movement_filters(vehicle_id, driver, date_from, date_to)
    items, total = movement_service.list_movements(db, page, page_size, **filters)
    return {"items": items, "total": total, "page": page, "page_size": page_size}


@router.post("/movements", response_model=MovementOut, status_code=status.HTTP_201_CREATED,
             summary="Log a vehicle entry or exit")
def create_movement(body: Optional[dict] = Body(default=None), db: Session = Depends(get_db)):
    data = validate_movement_create(body)
    try:
        return movement_service.create_movement(db, data)
    except DataAccessError as e:
        raise to_http_exception(e)
