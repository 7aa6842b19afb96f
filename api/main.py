import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from copies import router as copies_router
from core import config
from core.db import Database
from core.errors import DependencyMissingError, NotFoundError, PortierError, ValidationError
from core.logs import configure_logging
from core.storage import PostgresStorage
from keys import router as keys_router
from tenants import router as tenants_router
from users import router as users_router

logger = logging.getLogger("portier")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = getattr(app.state, "settings", None) or config.load_settings()
    configure_logging(settings.log_level)

    # One database client per process, shared by every request.
    database = Database(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )
    await database.connect()
    storage = PostgresStorage(database, table=settings.cache_table)
    await storage.init()

    app.state.settings = settings
    app.state.db = database
    app.state.storage = storage
    try:
        yield
    finally:
        logger.info("Shutting down gracefully...")
        await database.close()
        logger.info("Database connection closed.")
        logger.info("Server stopped.")


app = FastAPI(title="portier", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    logger.info("request method=%s path=%s", request.method, request.url.path)
    request.state.storage = getattr(request.app.state, "storage", None)
    return await call_next(request)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return _error(400, "Invalid request.")
    first = errors[0]
    if first.get("type") == "json_invalid":
        return _error(400, "Invalid JSON body.")
    parts = [part for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    if parts and all(isinstance(part, int) for part in parts):
        return _error(400, "Invalid JSON body.")
    location = ".".join(str(part) for part in parts)
    message = str(first.get("msg") or "Invalid value.")
    return _error(400, f"{location}: {message}" if location else message)


@app.exception_handler(ValidationError)
async def validation_error(_: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, str(exc))


@app.exception_handler(NotFoundError)
async def not_found_error(_: Request, exc: NotFoundError) -> JSONResponse:
    return _error(404, str(exc))


@app.exception_handler(DependencyMissingError)
async def dependency_missing_error(request: Request, exc: DependencyMissingError) -> JSONResponse:
    logger.warning("dependency_missing path=%s error=%s", request.url.path, exc)
    return _error(500, str(exc))


@app.exception_handler(PortierError)
async def internal_error(request: Request, exc: PortierError) -> JSONResponse:
    logger.error("request_failed path=%s error=%s", request.url.path, exc)
    return _error(500, "Internal server error.")


app.include_router(tenants_router.router, tags=["tenants"])
app.include_router(users_router.router, tags=["users"])
app.include_router(keys_router.router, tags=["keys"])
app.include_router(copies_router.router, tags=["copies"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Welcome to portier!"


if __name__ == "__main__":
    settings = config.load_settings()
    app.state.settings = settings
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())
