# app/utils/validators.py
"""
Input validation and normalization for request fields.
Every check here runs before the database is touched. Failures raise
app.errors.ValidationError, which the app turns into HTTP 400.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from app.errors import ValidationError
from app.models.movement import MovementType

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MAX_INT = 2**31 - 1          # INTEGER column range

VEHICLE_FIELDS = ("brand", "model", "plate")

_DATETIME = TypeAdapter(datetime)
_DATE = TypeAdapter(date)


def to_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """
    Coerce ints, integral floats and numeric strings ("12", " 12 ", "12.0")
    to int. Anything else (bools included) gives `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else default
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return default
        return int(number) if number.is_integer() else default
    return default


def parse_id(value: Any, field: str = "id") -> int:
    number = to_int(value)
    if number is None or not 1 <= number <= MAX_INT:
        raise ValidationError(f"{field} is invalid")
    return number


def clean_text(value: Any) -> Optional[str]:
    """Trimmed string, or None when the value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 datetime, a date-only string or a Unix timestamp.
    Returns a naive UTC datetime, or None if the value cannot be parsed.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        parsed = _DATETIME.validate_python(value)
    except PydanticValidationError:
        if not isinstance(value, str):
            return None
        try:
            parsed = datetime.combine(_DATE.validate_python(value), time())
        except PydanticValidationError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def normalize_pagination(page: Any, page_size: Any) -> tuple[int, int]:
    """Out-of-range or garbage values are clamped/defaulted, never rejected."""
    page = max(1, to_int(page, DEFAULT_PAGE))
    page_size = max(1, min(MAX_PAGE_SIZE, to_int(page_size, DEFAULT_PAGE_SIZE)))
    return page, page_size


# ── Vehicles ────────────────────────────────────────────────────────────────

def validate_vehicle_create(body: Optional[dict]) -> dict:
    body = body or {}
    data = {field: clean_text(body.get(field)) for field in VEHICLE_FIELDS}
    if any(value is None for value in data.values()):
        raise ValidationError("brand, model and plate are required")
    return data


def validate_vehicle_update(body: Optional[dict]) -> dict:
    """Only fields present in the body are returned; each must be non-blank."""
    body = body or {}
    data = {}
    for field in VEHICLE_FIELDS:
        if field not in body:
            continue
        value = clean_text(body[field])
        if value is None:
            raise ValidationError(f"{field} is invalid")
        data[field] = value
    return data


# ── Movements ───────────────────────────────────────────────────────────────

def validate_movement_create(body: Optional[dict]) -> dict:
    body = body or {}

    vehicle_id = parse_id(body.get("vehicleId"), "vehicleId")

    driver_name = clean_text(body.get("driverName"))
    if driver_name is None:
        raise ValidationError("driverName is required")

    movement_type = body.get("type")
    if movement_type not in (MovementType.ENTRY.value, MovementType.EXIT.value):
        raise ValidationError("type must be 'ENTRY' or 'EXIT'")

    date_time = parse_datetime(body.get("dateTime"))
    if date_time is None:
        raise ValidationError("dateTime is invalid (use ISO-8601)")

    odometer_km = to_int(body.get("odometerKm"))
    if odometer_km is None or not 0 <= odometer_km <= MAX_INT:
        raise ValidationError("odometerKm is invalid")

    return {
        "vehicle_id": vehicle_id,
        "driver_name": driver_name,
        "type": MovementType(movement_type),
        "date_time": date_time,
        "odometer_km": odometer_km,
    }


def validate_movement_filters(
    vehicle_id: Any = None,
    driver: Any = None,
    date_from: Any = None,
    date_to: Any = None,
) -> dict:
    """
    Build the movement list filters. A vehicleId that is not an integer (or
    is 0) is dropped; any other integer filters, so -1 matches nothing.
    An unparseable from/to bound is an error.
    """
    filters = {
        "vehicle_id": None,
        "driver": clean_text(driver),
        "date_from": None,
        "date_to": None,
    }
    if vehicle_id:
        number = to_int(vehicle_id)
        if number:
            filters["vehicle_id"] = number
    if date_from:
        filters["date_from"] = parse_datetime(date_from)
        if filters["date_from"] is None:
            raise ValidationError("from is invalid")
    if date_to:
        filters["date_to"] = parse_datetime(date_to)
        if filters["date_to"] is None:
            raise ValidationError("to is invalid")
    return filters
