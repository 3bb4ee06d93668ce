"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FIELDROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Field Route Service API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted collections.")
    storage_backend: Literal["memory", "file"] = Field(
        default="file",
        description="Key-value backend used for collections (in-process memory or one JSON file per collection).",
    )
    seed_demo_data: bool = Field(
        default=True,
        description="Populate empty collections with demo records on startup.",
    )
    maps_base_url: str = Field(
        default="https://www.google.com/maps/dir/",
        description="Base URL for navigation deep links; waypoints are appended as lat,lng segments.",
    )
    projection_padding_ratio: float = Field(
        default=0.2,
        gt=0.0,
        description="Share of the bounding box range added on each side when projecting stops.",
    )
    projection_fallback_buffer_deg: float = Field(
        default=0.001,
        gt=0.0,
        description="Buffer in degrees used when all stops share one latitude or longitude.",
    )
    depot_latitude: float = Field(default=-23.5505, ge=-90.0, le=90.0)
    depot_longitude: float = Field(default=-46.6333, ge=-180.0, le=180.0)

    # Assistant (Gemini generateContent REST endpoint)
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="API key for the generative language endpoint. The assistant replies with a fallback when unset.",
    )
    gemini_model: str = Field(default="gemini-2.0-flash")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    assistant_timeout_seconds: float = Field(default=30.0, gt=0.0)
    assistant_max_retries: int = Field(default=1, ge=0)
    assistant_backoff_seconds: float = Field(default=1.0, ge=0.0)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
