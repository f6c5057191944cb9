from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    rasterizer_engine: str = "pymupdf"
    render_scale: float = 2.0
    jpeg_quality: int = 80

    analysis_provider: str = "openai"
    analysis_api_key: str = ""
    analysis_model_name: str = "gpt-4o-mini"
    analysis_base_url: str | None = None
    analysis_timeout_seconds: int = 60
    analysis_temperature: float = 0.0

    similarity_threshold: float = 0.8
    collation_locale: str = "ko_KR"

    pages_per_person: int = 1
    target_audience_count: int = 0

    report_format: str = "csv"

    @field_validator("pages_per_person")
    @classmethod
    def _clamp_pages_per_person(cls, value: int) -> int:
        return max(1, value)

    @field_validator("target_audience_count")
    @classmethod
    def _clamp_target_audience_count(cls, value: int) -> int:
        return max(0, value)
