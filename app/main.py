# app/main.py
"""
FastAPI application entry point.
Includes CORS + security-header middleware, request logging, global error
handlers, all routers, and the database startup/shutdown hooks.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routers import health, vehicles, movements
from app.database import create_tables, dispose_engine
from app.errors import ValidationError
from app.config import settings
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Vehicle Movements API",
    description="Vehicle registry and entry/exit movement log.",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
}


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback server-side; the client only gets a generic message."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


# ── Request Logging + Security Headers Middleware ────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
    except Exception as exc:
        # Built here so the 500 still gets headers and a log line
        response = internal_error_response(request, exc)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    duration = round((time.time() - start) * 1000, 2)
    logger.info(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── CORS (outermost, so every response carries the headers) ─────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # e.g. a body that is not a JSON object
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        # Known path, unknown method: still an unmatched route
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Not Found"})
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    return internal_error_response(request, exc)


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(health.router,    tags=["Service"])
app.include_router(vehicles.router,  prefix="/api", tags=["Vehicles"])
app.include_router(movements.router, prefix="/api", tags=["Movements"])


# ── Startup / Shutdown ───────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info(f"Starting {settings.APP_NAME} {settings.APP_VERSION}...")
    create_tables()
    logger.info("Database tables ready")
    logger.info(f"Listening on http://{settings.HOST}:{settings.PORT} (docs at /docs)")


@app.on_event("shutdown")
async def shutdown():
    logger.info(f"{settings.APP_NAME} shutting down, releasing database connections")
    dispose_engine()


def run():
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
