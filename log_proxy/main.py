from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from log_proxy import __version__
from log_proxy.config import Settings, settings as default_settings
from log_proxy.domain.exceptions import PayloadTooLargeError
from log_proxy.domain.services.log_service import LogService
from log_proxy.infrastructure.console.console_writer import ConsoleWriter
from log_proxy.middleware import (
    CorsMiddleware,
    ErrorHandlingMiddleware,
    LoggingMiddleware,
    RequestValidationMiddleware,
)
from log_proxy.rendering import LogRenderer, Palette
from log_proxy.routes import fallback_router, health_router, ingest_router
from log_proxy.schemas.logs import PayloadTooLargeResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_service: LogService = app.state.log_service
    log_service.announce_startup(app.state.settings.PORT)
    yield
    log_service.announce_shutdown()


def build_log_service(settings: Settings) -> LogService:
    palette = Palette.ansi() if settings.color_enabled else Palette.plain()
    return LogService(renderer=LogRenderer(palette=palette), console=ConsoleWriter())


def create_app(settings: Optional[Settings] = None, log_service: Optional[LogService] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Log Proxy",
        description="Prints log messages posted by client applications to the server terminal",
        version=__version__,
        lifespan=lifespan,
        # Every path other than / answers 405
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.log_service = log_service or build_log_service(settings)

    @app.exception_handler(PayloadTooLargeError)
    async def payload_too_large(request: Request, exc: PayloadTooLargeError):
        error = PayloadTooLargeResponse(limit=exc.limit)
        return JSONResponse(status_code=413, content=error.model_dump())

    # Order matters - last added is first executed
    app.add_middleware(RequestValidationMiddleware, max_request_size=settings.MAX_BODY_SIZE)
    app.add_middleware(ErrorHandlingMiddleware, enable_error_logging=True)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorsMiddleware)

    app.include_router(health_router)
    app.include_router(ingest_router)
    app.include_router(fallback_router)

    return app


app = create_app()
