# tests/test_vehicle_service.py
"""Unit tests for the vehicle data access service."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock
from datetime import datetime
from sqlalchemy.exc import IntegrityError
from app.errors import DataAccessError, ErrorCode
from app.models.vehicle import Vehicle
from app.services import vehicle_service


def integrity_error():
    return IntegrityError("INSERT INTO vehicles ...", {}, Exception("UNIQUE constraint failed"))


class TestVehicleService:
    def test_get_missing_vehicle_raises_not_found(self):
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = None

        with pytest.raises(DataAccessError) as exc_info:
            vehicle_service.get_vehicle(db, 99)
        assert exc_info.value.code is ErrorCode.NOT_FOUND

    def test_create_sets_both_timestamps(self):
        db = MagicMock()

        vehicle = vehicle_service.create_vehicle(db, {"brand": "Ford", "model": "Ranger", "plate": "XYZ-9"})

        db.add.assert_called_once_with(vehicle)
        db.commit.assert_called_once()
        assert vehicle.plate == "XYZ-9"
        assert vehicle.created_at == vehicle.updated_at

    def test_duplicate_plate_becomes_conflict(self):
        db = MagicMock()
        db.commit.side_effect = integrity_error()

        with pytest.raises(DataAccessError) as exc_info:
            vehicle_service.create_vehicle(db, {"brand": "Ford", "model": "Ranger", "plate": "XYZ-9"})

        assert exc_info.value.code is ErrorCode.CONFLICT
        db.rollback.assert_called_once()
        db.refresh.assert_not_called()

    def test_update_changes_only_supplied_fields(self):
        old = datetime(2020, 1, 1)
        vehicle = Vehicle(id=1, brand="Ford", model="Ranger", plate="XYZ-9", created_at=old, updated_at=old)
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = vehicle

        vehicle_service.update_vehicle(db, 1, {"brand": "Kia"})

        assert vehicle.brand == "Kia"
        assert vehicle.model == "Ranger"
        assert vehicle.plate == "XYZ-9"
        assert vehicle.updated_at > old
        assert vehicle.created_at == old

    def test_update_missing_vehicle_never_commits(self):
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = None

        with pytest.raises(DataAccessError):
            vehicle_service.update_vehicle(db, 1, {"brand": "Kia"})
        db.commit.assert_not_called()

    def test_delete_blocked_by_movements_propagates(self):
        db = MagicMock()
        db.query.return_value.filter.return_value.first.return_value = MagicMock()
        db.commit.side_effect = IntegrityError("DELETE FROM vehicles ...", {}, Exception("FOREIGN KEY"))

        with pytest.raises(IntegrityError):
            vehicle_service.delete_vehicle(db, 1)
        db.rollback.assert_called_once()
