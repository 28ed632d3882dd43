"""Application settings read from the environment."""

import os
from typing import List


class Settings:
    """Application settings read from the environment."""

    def __init__(self) -> None:
        self.environment = os.getenv("ENV", "development")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.app_version = os.getenv("APP_VERSION", "1.0.0")

        # Security
        self.cors_origins = self._parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))

        # Interactive docs are always on in development
        self.show_docs = self._parse_bool(os.getenv("SHOW_DOCS", "false"))

    def _parse_cors_origins(self, v: str) -> List[str]:
        if v == "*":
            return ["*"]
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    def _parse_bool(self, v: str) -> bool:
        return v.lower() in ("true", "1", "yes", "on")

    @property
    def is_production(self) -> bool:  # convenience flag
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:  # convenience flag
        return self.environment.lower() == "development"

    @property
    def docs_enabled(self) -> bool:
        return self.is_development or self.show_docs


settings = Settings()
