"""
Settings for the daily count sources: download URLs, cache location, request
timeout and retry budget.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from config import (
    MHLW_TESTED_URL,
    MHLW_POSITIVE_URL,
    TESTED_FILENAME,
    POSITIVE_FILENAME,
    POSCAST_DATA_DIR,
    POSCAST_SOURCE_TIMEOUT,
    POSCAST_SOURCE_RETRY_ATTEMPTS,
)

class DataSourceSettings(BaseSettings):
    tested_url: str = MHLW_TESTED_URL
    positive_url: str = MHLW_POSITIVE_URL
    tested_filename: str = TESTED_FILENAME
    positive_filename: str = POSITIVE_FILENAME
    data_dir: str = POSCAST_DATA_DIR
    source_timeout: int = POSCAST_SOURCE_TIMEOUT
    source_retry_attempts: int = POSCAST_SOURCE_RETRY_ATTEMPTS
    source_retry_delay: float = 1.0

    @field_validator("tested_url", "positive_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return str(v).strip().rstrip("/")

    @field_validator("source_timeout", "source_retry_attempts", mode="before")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        value = int(v)
        if value < 1:
            raise ValueError(f"must be >= 1, got {value}")
        return value

    model_config = {"env_prefix": "POSCAST_", "extra": "ignore"}
