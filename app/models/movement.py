# app/models/movement.py
"""
Movement log table.
Append-only record of every ENTRY / EXIT at the facility gate, with the
driver, the time the event happened and the odometer reading.
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.database import Base


class MovementType(str, enum.Enum):
    ENTRY = "ENTRY"
    EXIT = "EXIT"


class Movement(Base):
    __tablename__ = "movements"
    __table_args__ = (
        Index("ix_movements_vehicle_id_date_time", "vehicle_id", "date_time"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(
        Integer,
        ForeignKey("vehicles.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    )
    driver_name = Column(String(191), nullable=False, index=True)
    type = Column(Enum(MovementType, name="movement_type"), nullable=False)
    date_time = Column(DateTime, nullable=False, index=True)   # when the event happened
    odometer_km = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False)

    # No backref: deleting a Vehicle must hit the FK, not null out children
    vehicle = relationship("Vehicle")

    def __repr__(self):
        return f"<Movement {self.id} vehicle={self.vehicle_id} type={self.type} at={self.date_time}>"
