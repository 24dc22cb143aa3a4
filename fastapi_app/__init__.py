import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from avatar import __version__

from .config import service_config
from .middleware import rate_limit_middleware, security_headers_middleware
from .routes import router
from .security import get_cors_config, log_security_status

# Configure logging
logging.basicConfig(
    level=getattr(logging, service_config.get("server.log_level", "INFO").upper()),
    format='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("[api] Starting Daily Pixel Avatar service")

    results = service_config.validate_config()
    for warning in results["warnings"]:
        logger.warning(f"[config] {warning}")
    if not results["valid"]:
        for error in results["errors"]:
            logger.error(f"[config] {error}")
        raise RuntimeError("Service configuration validation failed")

    log_security_status()

    yield

    logger.info("[api] Shutting down Daily Pixel Avatar service")


app = FastAPI(
    title="Daily Pixel Avatar",
    description="Deterministic pixel-art avatars from an input string and a UTC day",
    version=__version__,
    lifespan=lifespan
)

# Registered innermost first: security headers wrap every response, including 429s
app.middleware("http")(rate_limit_middleware)
app.middleware("http")(security_headers_middleware)

cors_config = get_cors_config()
if cors_config["allow_origins"]:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_config["allow_origins"],
        allow_credentials=cors_config["allow_credentials"],
        allow_methods=cors_config["allow_methods"],
        allow_headers=cors_config["allow_headers"],
        expose_headers=cors_config["expose_headers"],
        max_age=cors_config["max_age"]
    )
    logger.info("[api] CORS enabled with configuration")
else:
    logger.info("[api] CORS disabled (default security)")

app.include_router(router)
