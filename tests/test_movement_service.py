# tests/test_movement_service.py
"""Unit tests for the movement data access service."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from app.errors import DataAccessError, ErrorCode
from app.models.movement import Movement, MovementType
from app.services.movement_service import create_movement


def movement_data(**overrides):
    data = {
        "vehicle_id": 1,
        "driver_name": "John Smith",
        "type": MovementType.EXIT,
        "date_time": datetime(2025, 9, 25, 8, 0, 0),
        "odometer_km": 1200,
    }
    data.update(overrides)
    return data


class TestMovementService:
    def test_create_persists_movement(self):
        db = MagicMock()

        movement = create_movement(db, movement_data())

        db.add.assert_called_once_with(movement)
        db.commit.assert_called_once()
        assert isinstance(movement, Movement)
        assert movement.created_at is not None
        assert movement.date_time == datetime(2025, 9, 25, 8, 0, 0)

    def test_foreign_key_violation_means_vehicle_missing(self):
        db = MagicMock()
        db.commit.side_effect = IntegrityError("INSERT INTO movements ...", {}, Exception("FOREIGN KEY"))

        with pytest.raises(DataAccessError) as exc_info:
            create_movement(db, movement_data(vehicle_id=999999))

        assert exc_info.value.code is ErrorCode.VEHICLE_MISSING
        assert exc_info.value.message == "vehicleId does not exist"
        db.rollback.assert_called_once()
