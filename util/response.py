from enum import Enum
from fastapi import HTTPException


class ErrorKind(str, Enum):
    validation = "validation"
    authentication = "authentication"
    store = "store"
    internal = "internal"
    http = "http"


class APIError(HTTPException):
    def __init__(self, status_code: int, kind: ErrorKind, detail: str):
        super().__init__(status_code=status_code, detail=detail)
        self.kind = kind


def validation_error(detail: str):
    return APIError(400, ErrorKind.validation, detail)


def authentication_error(detail: str):
    return APIError(400, ErrorKind.authentication, detail)


def generate_error(kind: ErrorKind, detail: str, **extra):
    result = {
        "error": detail,
        "kind": kind,
    }
    if extra:
        result.update(extra)
    return result
