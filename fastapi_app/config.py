import logging
import os
from typing import Any, Dict

import yaml

from avatar.core import BASE, DEFAULT_SIZE, SUPPORTED_SIZES

logger = logging.getLogger(__name__)

CONFIG_ENV = "AVATAR_SERVICE_CONFIG"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _default_config_path() -> str:
    if os.getenv(CONFIG_ENV):
        return os.getenv(CONFIG_ENV)
    path = os.path.join(BASE, "conf", "service.yaml")
    if not os.path.exists(path):
        path = os.path.join(BASE, "conf", "service.example.yaml")
    return path


class ServiceConfig:
    """Configuration manager for the avatar HTTP service"""

    def __init__(self, config_path: str = None):
        self.config_path = config_path or _default_config_path()
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from service.yaml, merged over the defaults"""
        config = self._get_default_config()
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f) or {}
                _merge(config, loaded)
                logger.info(f"[config] Loaded service config from {self.config_path}")
            else:
                logger.warning(
                    f"[config] Service config not found at {self.config_path}, using defaults"
                )
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"[config] Failed to load service config: {e}, using defaults")
            config = self._get_default_config()
        return config

    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            "server": {
                "host": DEFAULT_HOST,
                "port": DEFAULT_PORT,
                "log_level": "info",
            },
            "avatar": {
                "default_size": DEFAULT_SIZE,
            },
            "security": {
                "rate_limiting": {
                    "enabled": True,
                    "api_requests_per_minute": 120,
                },
                "cors": {
                    "enabled": False,
                    "allow_origins": [],
                    "allow_credentials": False,
                    "allow_methods": ["GET"],
                    "allow_headers": [],
                    "expose_headers": ["X-Avatar-Hash", "X-Avatar-Time-Key"],
                    "max_age": 86400,
                },
                "security_headers": {
                    "enabled": True,
                    "x_content_type_options": "nosniff",
                    "x_frame_options": "DENY",
                    "content_security_policy": "default-src 'none'",
                },
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key path (e.g., 'server.port')"""
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def reload(self):
        """Reload configuration from file"""
        self.config = self._load_config()
        logger.info("[config] Service config reloaded")

    def validate_config(self) -> Dict[str, Any]:
        """Validate configuration and return validation results"""
        validation_results = {
            "valid": True,
            "errors": [],
            "warnings": [],
        }

        host = self.get("server.host", DEFAULT_HOST)
        if not isinstance(host, str):
            validation_results["errors"].append(f"Invalid server host: {host!r}")
            validation_results["valid"] = False

        port = self.get("server.port", DEFAULT_PORT)
        if isinstance(port, bool) or not isinstance(port, int) or port < 1 or port > 65535:
            validation_results["errors"].append(f"Invalid server port: {port}")
            validation_results["valid"] = False

        default_size = self.get("avatar.default_size", DEFAULT_SIZE)
        if default_size not in SUPPORTED_SIZES:
            validation_results["errors"].append(
                f"avatar.default_size must be one of {SUPPORTED_SIZES}, got {default_size}"
            )
            validation_results["valid"] = False

        if not self.get("security.rate_limiting.enabled", True):
            validation_results["warnings"].append("Rate limiting is disabled")

        return validation_results


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


# Global config instance
service_config = ServiceConfig()
