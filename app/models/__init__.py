# Vehicle Movements API — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.vehicle import Vehicle                 # noqa
from app.models.movement import Movement, MovementType  # noqa
