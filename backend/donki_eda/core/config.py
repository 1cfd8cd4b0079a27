from pydantic_settings import BaseSettings
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """EDA engine configuration settings."""

    # Application
    APP_NAME: str = "DONKI EDA - Space Weather Exploratory Analysis Engine"
    APP_VERSION: str = "0.1.0"

    # Type inference
    TYPE_SAMPLE_SIZE: int = 500  # Values per field inspected for type decisions
    DOMINANCE_RATIO: float = 0.9
    BOOLEAN_DOMINANCE_RATIO: float = 0.95
    CONFLICT_RATIO: float = 0.05  # A runner-up above this blocks the dominant type
    DATE_MIN_LENGTH: int = 8  # Shorter strings are never treated as dates

    # Field summaries
    SAMPLE_VALUES_LIMIT: int = 5
    CATEGORICAL_TOP_N: int = 20
    HISTOGRAM_BINS: int = 10

    # Correlation guard for near-unique integer fields
    CORRELATION_CARDINALITY_RATIO: float = 0.6
    CORRELATION_CARDINALITY_CAP: int = 1000

    # Field names excluded from quantitative analysis (case-insensitive regex)
    BLACKLIST_PATTERNS: List[str] = [
        r"id$",
        r"num$",
        r"number$",
        r"index$",
        r"version$",
        r"catalog$",
        r"^activityID$",
        r"^flrID$",
        r"^cmeID$",
        r"^gstID$",
        r"^link$",
        r"^note$",
    ]

    # Summary context
    CONTEXT_MAX_RECORDS: int = 200
    CONTEXT_TOP_FIELDS: int = 5
    CONTEXT_CORRELATION_THRESHOLD: float = 0.7

    class Config:
        env_prefix = "EDA_"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
