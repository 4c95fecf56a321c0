"""
Configuration for the product catalog service.

Values come from environment variables.  A ``.env`` file in the working
directory is loaded first (through ``python-dotenv``) so local runs can
keep their settings out of the shell.  Every field has a default, so the
service starts with no configuration at all.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Product Catalog API"
    api_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8085
    log_level: str = "INFO"

    # Pre-shared key for the /api/products routes and /reset.  Empty means
    # authentication is off.
    api_key: str = ""

    seed_products: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Product Catalog API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8085")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            api_key=os.getenv("API_KEY", ""),
            seed_products=_env_bool("SEED_PRODUCTS", "true"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


settings = Settings.from_env()
