"""FastAPI application entry point"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sihs_cms import __version__
from sihs_cms.api import (
    admins,
    auth,
    departments,
    downloads,
    faculty,
    health,
    news_events,
    notifications,
    research,
    site_settings,
    sliders,
)
from sihs_cms.api.deps import SessionValidator
from sihs_cms.config import Settings, settings as default_settings
from sihs_cms.errors import AppError, ServerError
from sihs_cms.middleware.rate_limit import limiter
from sihs_cms.utils.auth import Authenticator
from sihs_cms.utils.jwt_utils import TokenSigner
from sihs_cms.utils.logger import logger, setup_logging


def _error(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def _register_error_handlers(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": "Route not found", "path": request.url.path},
            )
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(
            "Rate limit exceeded",
            extra={"path": request.url.path, "method": request.method},
        )
        return _error(429, "Too many requests, please try again later")

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"Database error: {exc}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=True,
        )
        return _error(500, ServerError.default_message, None if settings.is_production else str(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for uncaught errors"""
        logger.error(
            f"Unhandled exception: {exc}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=True,
        )
        return _error(500, ServerError.default_message, None if settings.is_production else str(exc))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and wire the auth services from ``settings``"""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("SIHS backend starting up", extra={"action": "startup"})
        yield
        logger.info("SIHS backend shutting down", extra={"action": "shutdown"})

    app = FastAPI(
        title="SIHS CMS",
        description="Content management API with admin authentication",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # ===== Services =====

    auth_config = settings.auth_config()
    signer = TokenSigner(auth_config)
    app.state.settings = settings
    app.state.authenticator = Authenticator(auth_config, signer)
    app.state.session_validator = SessionValidator(signer)
    app.state.limiter = limiter

    # ===== Middleware =====

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.METRICS_ENABLED:
        from prometheus_fastapi_instrumentator import Instrumentator

        from sihs_cms.middleware.monitoring import MonitoringMiddleware

        app.add_middleware(MonitoringMiddleware)
        Instrumentator(
            should_group_status_codes=True,
            should_ignore_untemplated=True,
            excluded_handlers=["/metrics", "/api/health", "/api/health/ready"],
        ).instrument(app).expose(app, endpoint=settings.METRICS_PATH, include_in_schema=False)

    # ===== Routes =====

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(admins.router)
    app.include_router(departments.router)
    app.include_router(news_events.router)
    app.include_router(notifications.router)
    app.include_router(faculty.router)
    app.include_router(downloads.router)
    app.include_router(research.router)
    app.include_router(sliders.router)
    app.include_router(site_settings.router)

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "success": True,
            "message": "SIHS API Server",
            "version": __version__,
            "endpoints": {
                "health": "/api/health",
                "auth": "/api/admin/auth",
                "admins": "/api/admin/admins",
                "departments": "/api/departments",
                "newsEvents": "/api/news-events",
                "notifications": "/api/notifications",
                "faculty": "/api/faculty",
                "downloads": "/api/downloads",
                "research": "/api/research",
                "slider": "/api/slider",
                "siteSettings": "/api/site-settings",
            },
        }

    _register_error_handlers(app, settings)
    return app


app = create_app()
