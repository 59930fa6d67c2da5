from contextlib import asynccontextmanager
import logging

from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routers import (
    students_router,
    subjects_router,
    users_router,
)
from database import StoreError, close_mongo_connection, connect_to_mongo
from util.response import ErrorKind, generate_error
import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_runtime_config()
    # A connection error here aborts startup
    app.state.store = await connect_to_mongo()
    try:
        yield
    finally:
        await close_mongo_connection(app.state.store)


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(students_router.router, prefix="/students", tags=["students"])
app.include_router(subjects_router.router, prefix="/subjects", tags=["subjects"])
app.include_router(users_router.router, tags=["users"])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    kind = getattr(exc, "kind", ErrorKind.http)
    return JSONResponse(
        status_code=exc.status_code,
        content=generate_error(kind, str(exc.detail)),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=generate_error(
            ErrorKind.validation, "Validation error", details=jsonable_errors(exc)
        ),
    )


@app.exception_handler(StoreError)
async def store_exception_handler(request: Request, exc: StoreError):
    return JSONResponse(
        status_code=500,
        content=generate_error(ErrorKind.store, str(exc)),
    )


# Custom exception handler for internal server errors
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=generate_error(
            ErrorKind.internal, "An internal server error occurred"
        ),
    )


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()
    ]


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(app=app, host=settings.HOST, port=settings.PORT)
