# app/errors.py
"""
Error taxonomy shared by the validation, data access and routing layers.

ValidationError is raised before the store is touched and always means 400.
DataAccessError carries an ErrorCode; routers turn it into an HTTP status
through ERROR_STATUS, which must cover every ErrorCode member.
"""

import enum

from fastapi import HTTPException, status


class ValidationError(Exception):
    """Malformed or missing input."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ErrorCode(str, enum.Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VEHICLE_MISSING = "vehicle_missing"


class DataAccessError(Exception):
    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


ERROR_STATUS = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.VEHICLE_MISSING: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(exc: DataAccessError) -> HTTPException:
    return HTTPException(status_code=ERROR_STATUS[exc.code], detail=exc.message)
