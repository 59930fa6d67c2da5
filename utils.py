from fastapi import Request
from datetime import datetime, timezone
from bson import ObjectId

from database import MongoStore
from util.cert import TokenStatus, jwt_decode
from util.response import authentication_error, validation_error


def get_store(request: Request) -> MongoStore:
    """
    Used by Depends, returns the store opened at startup
    """
    return request.app.state.store


def validate_object_id(id: str):
    try:
        _id = ObjectId(id)
    except Exception:
        raise validation_error("Invalid Object ID")
    return _id


async def get_current_user(request: Request):
    """
    Used by Depends, returns the decoded token payload
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise authentication_error("Login required to access this route")

    parts = auth_header.split()
    if len(parts) < 2:
        raise authentication_error("jwt must be provided")

    status, result = jwt_decode(parts[1])
    if status != TokenStatus.valid:
        raise authentication_error(result)
    return result


def parse_date(value):
    """
    Parse ISO-8601 text or epoch milliseconds, falling back to now
    """
    dt = None
    if isinstance(value, str) and value:
        try:
            dt = datetime.fromisoformat(value)
        except ValueError:
            dt = None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            dt = None
    if dt is None:
        return datetime.now(timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def serialize(value):
    """
    Make a stored document JSON friendly (ObjectId to str, datetime to ISO-8601)
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize(item) for item in value]
    return value
