"""Application configuration via Pydantic Settings.

NOTE: Environment variable names are mapped explicitly (HOTELS_CSV_PATH,
PRICE_WEIGHT, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from hotel_search.domain import geo_constants as geo


class Settings(BaseSettings):
    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # Seed data loaded into the in-memory store at startup (optional)
    hotels_csv_path: str | None = Field(default=None, validation_alias="HOTELS_CSV_PATH")

    # Ranking
    price_weight: float = Field(default=geo.PRICE_WEIGHT, ge=0, le=1, validation_alias="PRICE_WEIGHT")
    distance_weight: float = Field(
        default=geo.DISTANCE_WEIGHT, ge=0, le=1, validation_alias="DISTANCE_WEIGHT"
    )

    # Paging
    default_page_size: int = Field(default=geo.DEFAULT_PAGE_SIZE, ge=1, validation_alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=geo.MAX_PAGE_SIZE, ge=1, validation_alias="MAX_PAGE_SIZE")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def _check_weights(self) -> "Settings":
        if abs(self.price_weight + self.distance_weight - 1.0) > 1e-9:
            raise ValueError("PRICE_WEIGHT and DISTANCE_WEIGHT must sum to 1")
        if self.default_page_size > self.max_page_size:
            raise ValueError("DEFAULT_PAGE_SIZE cannot exceed MAX_PAGE_SIZE")
        return self


settings = Settings()
