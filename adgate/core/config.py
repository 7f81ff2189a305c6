"""
Application configuration.

Loads settings from environment variables and an optional .env file.
Every tunable of the gateway lives here.
"""

import hashlib
from typing import Any, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface uvicorn binds to when run with python -m adgate.
        port: Port uvicorn listens on.
        hmac_secret: Shared secret used to verify signed requests.
        hmac_algorithm: hashlib algorithm name for request signatures.
        hmac_header: Request header carrying the signature.
        hmac_identifier: Prefix the signature header must start with.
        hmac_max_interval: Maximum signature age in seconds.
        hmac_min_interval: Tolerated clock skew for future timestamps, seconds.
        directory_client: Import path of the directory client implementation.
        directory_options: Keyword arguments passed to the directory client.
        rate_limit_default: Default rate limit for all endpoints.
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "adgate"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    hmac_secret: SecretStr = SecretStr("")
    hmac_algorithm: str = "sha512"
    hmac_header: str = "authorization"
    hmac_identifier: str = "APP"
    hmac_max_interval: int = Field(default=600, ge=0)
    hmac_min_interval: int = Field(default=0, ge=0)

    directory_client: Optional[str] = None
    directory_options: dict[str, Any] = Field(default_factory=dict)

    rate_limit_default: str = "120/minute"
    max_request_size_bytes: int = 1_048_576  # 1 MB

    @field_validator("hmac_algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        algorithm = value.lower()
        # shake_* digests need an explicit length and cannot sign requests
        if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake"):
            raise ValueError(f"Unsupported hash algorithm: {value}")
        return algorithm

    @field_validator("hmac_header")
    @classmethod
    def _lower_header(cls, value: str) -> str:
        return value.lower()


settings = Settings()
