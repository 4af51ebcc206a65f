"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DSD_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Dhofar Schools Directory API"
    api_prefix: str = "/api"
    schools_file: Path = Field(
        default=PACKAGE_ROOT / "data" / "schools.json",
        description="Bundled school dataset (JSON array).",
    )
    public_base_url: str = Field(
        default="http://localhost:5173/",
        description="Base URL of the web client, used when building share links.",
    )
    share_param: str = Field(default="schoolId", description="Query parameter carrying the selected school id.")
    map_search_base_url: str = Field(default="https://www.google.com/maps/search/?api=1")
    country_label: str = Field(default="سلطنة عمان", description="Appended to outbound map searches.")
    map_preview_limit: int = Field(default=6, ge=0, description="Schools listed under the map view.")
    toast_duration_seconds: float = Field(default=3.0, gt=0.0)
    default_map_center: tuple[float, float] = Field(default=(17.0150, 54.0920))
    default_map_zoom: int = Field(default=9, ge=1)
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="API key for the Gemini generateContent endpoint. The advisor is disabled without it.",
    )
    gemini_model: str = Field(default="gemini-2.5-flash")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    advisor_timeout_seconds: Optional[float] = Field(
        default=None,
        ge=0.0,
        description="Timeout for the advisor call. None waits for the single round trip to finish.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("schools_file", mode="before")
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

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: Any) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
