#!/usr/bin/env python3
"""Run the avatar HTTP service"""

import sys
from pathlib import Path

import uvicorn

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from avatar.core import load_env  # noqa: E402

# .env may point AVATAR_SERVICE_CONFIG elsewhere; load it before the config is read
load_env()

from fastapi_app.config import service_config  # noqa: E402
from fastapi_app.security import get_bind_address  # noqa: E402


def main():
    """Run the FastAPI server"""
    host, port = get_bind_address()
    log_level = service_config.get("server.log_level", "info")

    print("Starting Daily Pixel Avatar")
    print(f"Server: {host}:{port}")
    print(f"Log level: {log_level}")
    print(f"Rate limiting: {'Enabled' if service_config.get('security.rate_limiting.enabled') else 'Disabled'}")
    print(f"CORS: {'Enabled' if service_config.get('security.cors.enabled') else 'Disabled'}")
    print("-" * 50)

    uvicorn.run(
        "fastapi_app:app",
        host=host,
        port=port,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
