"""Runtime configuration read from the environment."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from shopcart.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_API_URL = "http://localhost:3333"
DEFAULT_STORAGE_KEY = "@RocketShoes:cart"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    storage_path: Path = _DATA_DIR / "cart.json"
    storage_key: str = DEFAULT_STORAGE_KEY
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``SHOPCART_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ

        raw_timeout = env.get("SHOPCART_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValidationError(
                f"SHOPCART_HTTP_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValidationError(
                f"SHOPCART_HTTP_TIMEOUT must be a finite number greater than zero, got {raw_timeout!r}"
            )

        storage_path = env.get("SHOPCART_STORAGE_PATH")

        return Settings(
            api_url=env.get("SHOPCART_API_URL", DEFAULT_API_URL).rstrip("/"),
            storage_path=Path(storage_path) if storage_path else _DATA_DIR / "cart.json",
            storage_key=env.get("SHOPCART_STORAGE_KEY", DEFAULT_STORAGE_KEY),
            http_timeout=timeout,
            log_level=env.get("SHOPCART_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
