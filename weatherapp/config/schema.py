"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OWM_BASE_URL
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherapp.db"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_window: int = Field(default=8, ge=1)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    storage: StorageConfig = StorageConfig()
    display: DisplayConfig = DisplayConfig()
