from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotel_pms.domain.currency import normalize_currency_code

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[1] / "data"
MIN_JWT_SECRET_LENGTH = 16


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "hotel-pms"

    # JWT configuration
    jwt_secret: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(30, gt=0)
    remember_me_expire_days: int = Field(14, gt=0)

    # Operator account bootstrapped into an empty user collection
    admin_username: str | None = None
    admin_password: str | None = None

    # Placeholder data source
    data_dir: Path = DEFAULT_DATA_DIR
    currency_code: str = "SAR"

    # Logging
    log_level: str = "INFO"
    log_slow_request_threshold_ms: int = Field(500, ge=0)

    cors_origins: list[str] = ["*"]

    @model_validator(mode="after")
    def validate_settings(self):
        if len(self.jwt_secret) < MIN_JWT_SECRET_LENGTH:
            raise ValueError(
                f"JWT_SECRET must be at least {MIN_JWT_SECRET_LENGTH} characters long."
            )

        if bool(self.admin_username) != bool(self.admin_password):
            raise ValueError("ADMIN_USERNAME and ADMIN_PASSWORD must be set together.")

        self.currency_code = normalize_currency_code(self.currency_code)
        self.log_level = self.log_level.strip().upper()
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
