# app/routers/vehicles.py
"""Vehicle registry: list, fetch, register, partially update and remove vehicles."""

from typing import Optional
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.errors import DataAccessError, to_http_exception
from app.schemas.vehicle import VehicleOut
from app.services import vehicle_service
from app.utils.validators import parse_id, validate_vehicle_create, validate_vehicle_update

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles, newest first")
def list_vehicles(db: Session = Depends(get_db)):
    return vehicle_service.list_vehicles(db)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Fetch one vehicle")
def get_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    try:
        return vehicle_service.get_vehicle(db, parse_id(vehicle_id))
    except DataAccessError as e:
        raise to_http_exception(e)


@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Register a vehicle")
def create_vehicle(body: Optional[dict] = Body(default=None), db: Session = Depends(get_db)):
    """brand, model and plate are required; plate must be unique."""
    data = validate_vehicle_create(body)
    try:
        return vehicle_service.create_vehicle(db, data)
    except DataAccessError as e:
        raise to_http_exception(e)


@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Partially update a vehicle")
def update_vehicle(vehicle_id: str, body: Optional[dict] = Body(default=None),
                   db: Session = Depends(get_db)):
    """Only the fields present in the body are changed."""
    vehicle_id = parse_id(vehicle_id)
    data = validate_vehicle_update(body)
    try:
        return vehicle_service.update_vehicle(db, vehicle_id, data)
    except DataAccessError as e:
        raise to_http_exception(e)


@router.delete("/vehicles/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT,
               response_class=Response, summary="Remove a vehicle")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    """
    Refused by the database while movements reference the vehicle; that
    error is not mapped here and ends up as a 500.
    """
    try:
        vehicle_service.delete_vehicle(db, parse_id(vehicle_id))
    except DataAccessError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
