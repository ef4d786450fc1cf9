import logging
from pathlib import Path

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore", validate_assignment=True)

    EXTRACTION_SERVICE_VERSION: str = Field(
        "1.0.0",
        min_length=1,
        validation_alias=AliasChoices("EXTRACTION_SERVICE_VERSION", "EXTRACTION_SERVICE_IMAGE_RELEASE_VERSION"),
    )
    EXTRACTION_SERVICE_LOG_LEVEL: int = Field(20, ge=0, le=50)
    EXTRACTION_SERVICE_DEBUG_MODE: bool = Field(False)

    EXTRACTION_SERVICE_HOST: str = Field("0.0.0.0", min_length=1)
    EXTRACTION_SERVICE_PORT: int = Field(
        3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("EXTRACTION_SERVICE_PORT", "PORT"),
    )

    # 50 MiB
    EXTRACTION_SERVICE_MAX_BODY_SIZE: int = Field(50 * 1024 * 1024, gt=0)
    EXTRACTION_SERVICE_MIN_TEXT_LENGTH: int = Field(50, ge=1)
    EXTRACTION_SERVICE_PREVIEW_LENGTH: int = Field(100, ge=0)
    EXTRACTION_SERVICE_MIN_WORD_BUFFER_SIZE: int = Field(100, ge=0)
    EXTRACTION_SERVICE_CORS_ORIGINS: str = Field("*", min_length=1)

    EXTRACTION_WEB_SERVICE_WORKERS: int = Field(1, ge=1)
    EXTRACTION_WEB_SERVICE_TIMEOUT: int = Field(120, gt=0)

    @field_validator("EXTRACTION_SERVICE_CORS_ORIGINS", mode="before")
    @classmethod
    def strip_cors_origins(cls, value: str) -> str:
        return str(value).strip()

    @field_validator("EXTRACTION_WEB_SERVICE_WORKERS")
    @classmethod
    def log_workers(cls, value: int) -> int:
        if value > 1:
            logging.info("EXTRACTION_WEB_SERVICE_WORKERS=%s, requests are handled by separate processes", value)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def LOG_LEVEL(self) -> int:
        # 50 - CRITICAL, 40 - ERROR, 30 - WARNING, 20 - INFO, 10 - DEBUG, 0 - NOTSET
        return self.EXTRACTION_SERVICE_LOG_LEVEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def DEBUG_MODE(self) -> bool:
        return self.EXTRACTION_SERVICE_DEBUG_MODE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ROOT_DIR(self) -> str:
        return str(Path(__file__).resolve().parents[1])

    @computed_field  # type: ignore[prop-decorator]
    @property
    def HOST(self) -> str:
        return self.EXTRACTION_SERVICE_HOST

    @computed_field  # type: ignore[prop-decorator]
    @property
    def PORT(self) -> int:
        return self.EXTRACTION_SERVICE_PORT

    @computed_field  # type: ignore[prop-decorator]
    @property
    def MAX_REQUEST_BODY_SIZE(self) -> int:
        return self.EXTRACTION_SERVICE_MAX_BODY_SIZE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def MIN_TEXT_LENGTH(self) -> int:
        return self.EXTRACTION_SERVICE_MIN_TEXT_LENGTH

    @computed_field  # type: ignore[prop-decorator]
    @property
    def PREVIEW_LENGTH(self) -> int:
        return self.EXTRACTION_SERVICE_PREVIEW_LENGTH

    @computed_field  # type: ignore[prop-decorator]
    @property
    def MIN_WORD_BUFFER_SIZE(self) -> int:
        return self.EXTRACTION_SERVICE_MIN_WORD_BUFFER_SIZE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def CORS_ALLOW_ORIGINS(self) -> list[str]:
        return [origin.strip() for origin in self.EXTRACTION_SERVICE_CORS_ORIGINS.split(",") if origin.strip()]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def WORKERS(self) -> int:
        return self.EXTRACTION_WEB_SERVICE_WORKERS

    @computed_field  # type: ignore[prop-decorator]
    @property
    def WORKER_TIMEOUT(self) -> int:
        return self.EXTRACTION_WEB_SERVICE_TIMEOUT

settings = Settings() # type: ignore[call-arg]
