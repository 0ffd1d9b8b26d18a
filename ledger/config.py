"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

# Check if .env file exists and is readable
_env_file = None
try:
    env_path = Path(".env")
    if env_path.exists() and os.access(env_path, os.R_OK):
        _env_file = ".env"
except (OSError, PermissionError):
    pass

_DEFAULT_MANIFEST = Path(__file__).resolve().parent.parent / "data" / "manifest.json"


class Settings(BaseSettings):
    """All configuration for the certainty navigator.

    Values are loaded from environment variables or a .env file.
    """

    # Application
    app_name: str = "legis-ledger"

    # Logging
    json_logs: bool = False
    log_level: str = "INFO"

    # Manifest source. A URL wins over a path when both are set.
    manifest_url: Optional[str] = None
    manifest_path: str = str(_DEFAULT_MANIFEST)
    manifest_timeout: float = 10.0

    # Threshold slider
    default_threshold: float = 0.70

    # Interaction
    highlight_seconds: float = 2.0  # card highlight after a marker click
    tooltip_offset: float = 15.0  # px from the pointer

    # Fixed seed gives a reproducible horizontal jitter (visual regression runs)
    jitter_seed: Optional[int] = None

    model_config = {
        "env_file": _env_file,
        "env_file_encoding": "utf-8",
        "env_file_ignore_empty": True,
    }
