# app/models/vehicle.py
"""
Registered vehicles table.
One row per physical vehicle, identified by its unique plate.
Movements reference it with ON DELETE RESTRICT, so a vehicle with
history cannot be removed.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    brand = Column(String(191), nullable=False)
    model = Column(String(191), nullable=False)
    plate = Column(String(191), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.id} plate={self.plate} {self.brand} {self.model}>"
