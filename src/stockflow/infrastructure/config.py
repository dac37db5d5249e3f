"""Runtime settings read from the environment (and a local ``.env``)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from stockflow.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_LOOKUP_URL = "https://world.openfoodfacts.org/api/v0/product"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    log_level: str = "WARNING"
    lookup_url: str = DEFAULT_LOOKUP_URL
    lookup_timeout: float = 10.0


def load_settings() -> Settings:
    """Build Settings from STOCKFLOW_* variables.

    Variables already set in the environment win over the ``.env`` file.
    """
    load_dotenv()

    raw_timeout = os.getenv("STOCKFLOW_LOOKUP_TIMEOUT", "10")
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ValidationError(
            f"STOCKFLOW_LOOKUP_TIMEOUT must be a number, got {raw_timeout!r}"
        ) from exc
    if timeout <= 0:
        raise ValidationError("STOCKFLOW_LOOKUP_TIMEOUT must be positive")

    data_dir = os.getenv("STOCKFLOW_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir) if data_dir else _PROJECT_ROOT / "data",
        log_level=os.getenv("STOCKFLOW_LOG_LEVEL", "WARNING").upper(),
        lookup_url=os.getenv("STOCKFLOW_LOOKUP_URL", DEFAULT_LOOKUP_URL).rstrip("/"),
        lookup_timeout=timeout,
    )
