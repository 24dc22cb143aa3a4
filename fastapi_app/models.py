from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

from avatar import __version__
from avatar.core import SUPPORTED_SIZES


class HealthResponse(BaseModel):
    """Health check response"""
    ok: bool = True
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = __version__
    sizes: List[int] = Field(default_factory=lambda: list(SUPPORTED_SIZES))


class ErrorResponse(BaseModel):
    """Error body returned for rejected avatar requests"""
    detail: str
