# tests/conftest.py
"""Shared fixtures: an in-memory SQLite store wired into the FastAPI app."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before anything under app/ is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from app.database import Base, build_engine, create_tables, get_db
from app.main import app


@pytest.fixture
def db_engine():
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def client(db_session_factory):
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Unhandled errors must come back as 500 responses, not raise in the test
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def make_vehicle(client):
    def _make(plate="ABC-123", brand="Toyota", model="Corolla"):
        resp = client.post("/api/vehicles", json={"brand": brand, "model": model, "plate": plate})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make


@pytest.fixture
def make_movement(client):
    def _make(vehicle_id, **overrides):
        payload = {
            "vehicleId": vehicle_id,
            "driverName": "John Smith",
            "type": "ENTRY",
            "dateTime": "2025-09-25T08:00:00.000Z",
            "odometerKm": 1000,
        }
        payload.update(overrides)
        resp = client.post("/api/movements", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
