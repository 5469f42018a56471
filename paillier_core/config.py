"""
Runtime settings for the Paillier core, read from the environment.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ── Configuration ──────────────────────────────────
DEFAULT_KEY_BITS = 2048
DEFAULT_MR_ROUNDS = 64  # false positive <= 4^-64 = 2^-128
MIN_PRIME_BITS = 256

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    key_bits: int = Field(default=DEFAULT_KEY_BITS, ge=2 * MIN_PRIME_BITS)
    mr_rounds: int = Field(default=DEFAULT_MR_ROUNDS, ge=DEFAULT_MR_ROUNDS)
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("key_bits")
    @classmethod
    def _even_modulus(cls, v: int) -> int:
        if v % 2:
            raise ValueError("key_bits must be even")
        return v


def get_settings() -> Settings:
    """Build settings from PAILLIER_* environment variables."""
    return Settings(
        key_bits=os.getenv("PAILLIER_KEY_BITS", str(DEFAULT_KEY_BITS)),
        mr_rounds=os.getenv("PAILLIER_MR_ROUNDS", str(DEFAULT_MR_ROUNDS)),
        log_level=os.getenv("PAILLIER_LOG_LEVEL", "WARNING").upper(),
    )


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger (applications only)."""
    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger("paillier_core")
    logger.setLevel(level)
    logger.handlers = [h for h in logger.handlers if isinstance(h, logging.NullHandler)]

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    return logger
