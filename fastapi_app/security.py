import logging
from typing import Any, Dict, Tuple

from .config import DEFAULT_HOST, DEFAULT_PORT, service_config

logger = logging.getLogger(__name__)

WILDCARD_HOSTS = ("0.0.0.0", "::")


def get_cors_config() -> Dict[str, Any]:
    """Get CORS configuration; disabled unless security.cors.enabled is set"""
    cors_enabled = service_config.get("security.cors.enabled", False)

    if not cors_enabled:
        logger.info("[security] CORS disabled - no cross-origin requests allowed")
        return {
            "allow_origins": [],
            "allow_credentials": False,
            "allow_methods": [],
            "allow_headers": [],
            "expose_headers": [],
            "max_age": 86400,
        }

    allowed_origins = list(service_config.get("security.cors.allow_origins", []))
    logger.info(f"[security] CORS enabled for origins: {allowed_origins}")

    return {
        "allow_origins": allowed_origins,
        "allow_credentials": service_config.get(
            "security.cors.allow_credentials", False
        ),
        "allow_methods": service_config.get("security.cors.allow_methods", ["GET"]),
        "allow_headers": service_config.get("security.cors.allow_headers", []),
        "expose_headers": service_config.get(
            "security.cors.expose_headers", ["X-Avatar-Hash", "X-Avatar-Time-Key"]
        ),
        "max_age": service_config.get("security.cors.max_age", 86400),
    }


def get_bind_address() -> Tuple[str, int]:
    """Return (host, port) for the listener; all interfaces on 8080 unless configured"""
    host = service_config.get("server.host", DEFAULT_HOST)
    port = service_config.get("server.port", DEFAULT_PORT)
    if host in WILDCARD_HOSTS:
        logger.info(f"[security] Listening on all interfaces, port {port}")
    else:
        logger.info(f"[security] Listening on {host}:{port}")
    return host, port


def get_security_summary() -> Dict[str, Any]:
    """Get a security summary for logging"""
    return {
        "binding_host": service_config.get("server.host", DEFAULT_HOST),
        "binding_port": service_config.get("server.port", DEFAULT_PORT),
        "cors_enabled": service_config.get("security.cors.enabled", False),
        "rate_limiting_enabled": service_config.get(
            "security.rate_limiting.enabled", True
        ),
        "rate_limit_per_minute": service_config.get(
            "security.rate_limiting.api_requests_per_minute", 120
        ),
        "security_headers_enabled": service_config.get(
            "security.security_headers.enabled", True
        ),
    }


def log_security_status():
    """Log current security configuration status"""
    summary = get_security_summary()

    logger.info("[security] Security configuration:")
    logger.info(f"[security]   Binding: {summary['binding_host']}:{summary['binding_port']}")
    logger.info(f"[security]   CORS enabled: {summary['cors_enabled']}")
    if summary["rate_limiting_enabled"]:
        logger.info(f"[security]   Rate limiting: {summary['rate_limit_per_minute']}/min per client")
    else:
        logger.warning("[security]   Rate limiting: disabled")
    logger.info(f"[security]   Security headers: {summary['security_headers_enabled']}")
