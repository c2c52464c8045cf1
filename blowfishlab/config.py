from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Reproducibility
    global_seed: int = Field(default=1337)

    # Evaluation sizes
    roundtrip_vectors: int = Field(default=1000, ge=1)
    avalanche_trials: int = Field(default=200, ge=1)
    sac_trials: int = Field(default=20, ge=1)
    sac_key_size_bits: int = Field(default=64, ge=32, le=448)

    # Logging
    log_level: str = Field(default="INFO")

    # Paths
    project_root: str = Field(default=os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
    runs_dir: str = Field(default="runs")

    @field_validator("sac_key_size_bits")
    @classmethod
    def _whole_bytes(cls, v: int) -> int:
        if v % 8 != 0:
            raise ValueError("sac_key_size_bits must be a multiple of 8")
        return v

    @field_validator("log_level")
    @classmethod
    def _level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("ROUNDTRIP_VECTORS", "1000")),
        avalanche_trials=int(os.getenv("AVALANCHE_TRIALS", "200")),
        sac_trials=int(os.getenv("SAC_TRIALS", "20")),
        sac_key_size_bits=int(os.getenv("SAC_KEY_SIZE_BITS", "64")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        runs_dir=os.getenv("RUNS_DIR", "runs"),
    )
