import logging
import logging.handlers
import os
import sys
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

SUPPORTED_SIZES = (64, 128)
DEFAULT_SIZE = 64

# ---------------- Logging ----------------


def get_logger(name="avatar", log_file=None):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    fmt = logging.Formatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
    )
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    if log_file:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


log = get_logger("avatar")

# ---------------- Config Models ----------------


class RenderCfg(BaseModel):
    default_size: int = DEFAULT_SIZE

    @field_validator("default_size")
    @classmethod
    def _supported(cls, v: int) -> int:
        if v not in SUPPORTED_SIZES:
            raise ValueError(f"default_size must be one of {SUPPORTED_SIZES}")
        return v


class LoggingCfg(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None


class GlobalCfg(BaseModel):
    render: RenderCfg = Field(default_factory=RenderCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(path: Optional[str] = None) -> GlobalCfg:
    """Load conf/avatar.yaml (or the example file) into a validated GlobalCfg."""
    if path is None:
        path = os.path.join(BASE, "conf", "avatar.yaml")
        if not os.path.exists(path):
            path = os.path.join(BASE, "conf", "avatar.example.yaml")
    if not os.path.exists(path):
        log.warning(f"Config not found at {path}, using defaults")
        return GlobalCfg()
    raw = load_yaml(path)

    try:
        cfg = GlobalCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


def configure_logging(cfg: GlobalCfg, name: str = "avatar") -> logging.Logger:
    """Apply the configured level (and optional rotating file) to a logger."""
    log_file = cfg.logging.file
    if log_file and not os.path.isabs(log_file):
        log_file = os.path.join(BASE, log_file)
    logger = get_logger(name, log_file)
    logger.setLevel(getattr(logging, cfg.logging.level.upper(), logging.INFO))
    return logger


# ---------------- Env ----------------


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    env = {k: v for k, v in os.environ.items()}
    return env
