# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .durations import parse_duration

_DEV_JWT_SECRET = "dev-noteful-jwt-secret-change-me-0123456789"
_INSECURE_SECRETS = {"", "dev", "development", "test", "secret", _DEV_JWT_SECRET}
_HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


@dataclass(slots=True, frozen=True)
class TokenSettings:
    """Signing configuration handed to the token issuer at construction."""

    secret: str
    lifetime: timedelta
    algorithm: str = "HS256"

    def __repr__(self) -> str:
        return f"TokenSettings(secret=***, lifetime={self.lifetime!r}, algorithm={self.algorithm!r})"


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///noteful.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_by_name=True)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    jwt_secret: str = Field(_DEV_JWT_SECRET, alias="JWT_SECRET")
    jwt_expiry: timedelta = Field(timedelta(days=7), alias="JWT_EXPIRY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    password_hash_method: str = Field("scrypt", alias="PASSWORD_HASH_METHOD")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        validate_by_name=True,
    )

    @field_validator("jwt_expiry", mode="before")
    @classmethod
    def _parse_jwt_expiry(cls, value: str | int | float | timedelta) -> timedelta:
        return parse_duration(value)

    @field_validator("jwt_algorithm", mode="after")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        value = value.upper()
        if value not in _HMAC_ALGORITHMS:
            raise ValueError(f"JWT_ALGORITHM must be one of {', '.join(_HMAC_ALGORITHMS)}")
        return value

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.jwt_secret in _INSECURE_SECRETS or len(self.jwt_secret) < 32:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a random value of at least 32 characters.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(48))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if "*" in self.security.allowed_origins:
            print("\n⚠️  PRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def token_settings(self) -> TokenSettings:
        return TokenSettings(
            secret=self.jwt_secret,
            lifetime=self.jwt_expiry,
            algorithm=self.jwt_algorithm,
        )


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "TokenSettings", "load_config"]
