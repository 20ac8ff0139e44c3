from __future__ import annotations

import os
from pathlib import Path
from typing import List

# Names accepted by both logging and uvicorn.
_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class Settings:
    """Centralized configuration for the symptom journal backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("BIDOU_DATA_ROOT") or data_root_default
        ).expanduser()
        # Single JSON document holding the whole meal history.
        self.history_file: Path = Path(
            os.environ.get("BIDOU_HISTORY_FILE") or (self.data_root / "history.json")
        ).expanduser()

        self.host: str = os.environ.get("BIDOU_HOST") or "127.0.0.1"
        port_raw = os.environ.get("BIDOU_PORT") or "8000"
        try:
            self.port: int = int(port_raw)
        except ValueError:
            self.port = 8000
        log_level = (os.environ.get("BIDOU_LOG_LEVEL") or "info").lower()
        self.log_level: str = log_level if log_level in _LOG_LEVELS else "info"

        cors = os.environ.get("BIDOU_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
