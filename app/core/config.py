import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.api_keys_file = Path(os.getenv("API_KEYS_FILE", ".env.api-keys")).resolve()
        self.export_to_process_env = self._get_bool("API_KEYS_EXPORT_ENV", default=False)
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["*"]

    @staticmethod
    def _get_bool(key: str, default: Optional[bool] = None) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise RuntimeError(f"Environment variable {key} must be a boolean")
