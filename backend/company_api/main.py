from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import os
from pathlib import Path

from company_api.api.middleware import (
    AuthorizationMiddleware,
    LatencyLoggingMiddleware,
    PanicRecoveryMiddleware,
)
from company_api.api.router import api_router
from company_api.core.config import settings
from company_api.core.errors import ErrorResponse
from company_api.core.logging_setup import setup_logging
from company_api.db.init_db import create_tables

setup_logging()
logger = logging.getLogger(__name__)


def _run_migrations_if_needed() -> bool:
    """Apply Alembic migrations to head when running with ENV=prod.

    Controlled by env var AUTO_APPLY_MIGRATIONS (default: '1'). Returns True if
    migrations were applied.
    """
    if settings.env.lower() != "prod":
        return False
    if os.getenv("AUTO_APPLY_MIGRATIONS", "1") != "1":
        return False
    from alembic import command
    from alembic.config import Config

    alembic_ini = Path(__file__).resolve().parents[1] / "alembic.ini"
    if not alembic_ini.exists():
        logger.warning("alembic.ini not found at %s, skipping auto-migrations", alembic_ini)
        return False
    cfg = Config(str(alembic_ini))
    # Ensure script_location resolves correctly when launched from arbitrary CWD
    cfg.set_main_option("script_location", str(Path(__file__).resolve().parents[1] / "alembic"))
    logger.info("Applying Alembic migrations -> head ...")
    command.upgrade(cfg, "head")
    logger.info("Migrations applied successfully")
    return True


app = FastAPI(title=settings.app_name, version="0.1.0")

# Starlette wraps in reverse order: recover -> log -> authorize -> routes
app.add_middleware(AuthorizationMiddleware)
app.add_middleware(LatencyLoggingMiddleware)
app.add_middleware(PanicRecoveryMiddleware)

app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    body = ErrorResponse(code=exc.status_code, message=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.error("got wrong request data on %s: %s", request.url.path, errors)
    body = ErrorResponse(code=400, message=f"got wrong request data: {errors}")
    return JSONResponse(status_code=400, content=body.model_dump())


@app.on_event("startup")
def startup():
    logger.info("start application")
    if not _run_migrations_if_needed():
        create_tables()


def run():
    """Console entry point: serve the API until SIGINT/SIGTERM."""
    import uvicorn

    logger.info("server listening address %s:%s", settings.app_host, settings.app_port)
    uvicorn.run(
        app,
        host=settings.app_host,
        port=settings.app_port,
        timeout_graceful_shutdown=settings.graceful_timeout,
    )
    logger.info("shutting down")


if __name__ == "__main__":
    run()
