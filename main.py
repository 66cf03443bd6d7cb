from typing import List, Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.middleware.trustedhost import TrustedHostMiddleware
from api.criteria import router as criteria_router
from api.healthcheck import router as healthcheck_router
from config.paths import CLASS_CRITERIA_PATH
from core.registry import ClassCriteriaRegistry, load_registry
from utils.logger import logger
import os
import secrets

API_KEY_HEADER = "x-api-key"
HEALTH_PATH = "/api/health/check"

# Paths served without the API key
PUBLIC_PATHS = ("/openapi.json", "/redoc", "/docs", HEALTH_PATH)


def _split_env(name: str) -> List[str]:
    return [item for item in os.getenv(name, "").split(",") if item]


def _is_public(path: str) -> bool:
    return path in PUBLIC_PATHS or path.startswith("/docs/")


def _criteria_openapi(app: FastAPI):
    """OpenAPI schema with the API key scheme applied to every route except health."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description="Student class criteria API",
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})[
        "ApiKeyAuth"
    ] = {"type": "apiKey", "in": "header", "name": API_KEY_HEADER}

    for path, methods in schema.get("paths", {}).items():
        security = [] if path == HEALTH_PATH else [{"ApiKeyAuth": []}]
        for op in methods.values():
            op.setdefault("security", security)

    app.openapi_schema = schema
    return app.openapi_schema


def create_app(
    registry: Optional[ClassCriteriaRegistry] = None,
    api_key: Optional[str] = None,
) -> FastAPI:
    """
    Build the criteria API.

    Args:
        registry (Optional[ClassCriteriaRegistry]): Class criteria shared by all requests.
            Loaded from CLASS_CRITERIA_PATH when omitted.
        api_key (Optional[str]): Key expected in the `x-api-key` header. Auth is disabled when empty.
    """
    app = FastAPI(title="Student Class Criteria API")
    app.state.registry = registry if registry is not None else load_registry(CLASS_CRITERIA_PATH)
    app.state.api_key = api_key

    if os.getenv("ENABLE_CORS") == "true":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=_split_env("CORS_ALLOW_ORIGINS"),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(
        TrustedHostMiddleware, allowed_hosts=_split_env("ALLOWED_HOSTS") or ["*"]
    )

    @app.middleware("http")
    async def api_key_guard(request: Request, call_next):
        expected = request.app.state.api_key
        if request.method == "OPTIONS" or _is_public(request.url.path):
            return await call_next(request)

        if not expected:
            logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
            return await call_next(request)

        client_key = request.headers.get(API_KEY_HEADER)
        if not client_key or not secrets.compare_digest(str(client_key), str(expected)):
            return JSONResponse(status_code=401, content={"detail": "Unauthorized"})

        return await call_next(request)

    app.openapi = lambda: _criteria_openapi(app)

    # Register routers
    app.include_router(criteria_router, prefix="/api")
    app.include_router(healthcheck_router, prefix="/api")
    return app


app = create_app(api_key=os.getenv("API_KEY"))
