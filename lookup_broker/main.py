from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routers
from .routers.lookup import router as lookup_router

# Core modules
from .core.config import Settings, settings as default_settings
from .core.cors import SingleOriginCorsMiddleware
from .core.errors import BrokerError
from .core.logging import configure_logging, CorrelationIdMiddleware
from .core.metrics import PromMiddleware, metrics_endpoint
from .services.lookup_service import LookupBroker

async def broker_error_handler(request: Request, exc: BrokerError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)

async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unknown path and known path with the wrong method look the same
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)

def create_app(settings: Settings | None = None, broker: LookupBroker | None = None) -> FastAPI:
    """
    App factory so tests and ASGI servers can instantiate cleanly.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)  # Set up JSON logs + request-id filter

    # No docs routes: anything but the lookup endpoints must 404
    app = FastAPI(
        title="Hail Lookup Broker",
        version="1.0.0",
        description="Resolves coordinates to ZIP, impact population and property attributes.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,  # "/census-lookup/" is an unknown path, not a redirect
    )
    app.state.settings = settings
    app.state.broker = broker or LookupBroker(settings)

    app.add_exception_handler(BrokerError, broker_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # Observability middlewares (added first => innermost)
    if settings.PROMETHEUS_ENABLED:
        app.add_middleware(PromMiddleware)       # Records req/latency metrics
    app.add_middleware(CorrelationIdMiddleware)  # Adds/propagates X-Request-Id

    # CORS outermost so 404s and error bodies get the headers too
    app.add_middleware(SingleOriginCorsMiddleware, allow_origin=settings.ALLOW_ORIGIN)

    # Meta routes
    if settings.HEALTH_ENABLED:
        @app.get("/health", tags=["meta"])
        def health():
            return {"status": "ok"}

    if settings.PROMETHEUS_ENABLED:
        # Standard Prometheus scrape endpoint
        app.add_route("/metrics", metrics_endpoint, methods=["GET"])

    # Business routes
    app.include_router(lookup_router, tags=["lookup"])

    return app

app = create_app()
