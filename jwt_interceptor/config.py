# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

"""Interceptor configuration: environment settings and the per-instance snapshot."""

import re
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jwt_interceptor.models import Matcher
from jwt_interceptor.tokens import is_token_expired

STANDARD_PORTS = frozenset({"80", "443"})

DEFAULT_HEADER_NAME = "Authorization"
DEFAULT_AUTH_SCHEME = "Bearer "

TokenResult = str | None | Awaitable[str | None]
TokenGetter = Callable[[httpx.Request], TokenResult]
AuthScheme = str | Callable[[httpx.Request], str]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="JWT_INTERCEPTOR_",
        case_sensitive=False,
        extra="allow",
    )

    # Origin the application runs on; same-host requests are always in scope
    origin: str = "http://localhost"

    header_name: str = DEFAULT_HEADER_NAME
    auth_scheme: str | None = None  # None keeps the "Bearer " default

    # JSON lists, e.g. JWT_INTERCEPTOR_WHITELISTED_DOMAINS='["api.example.com:8443"]'
    whitelisted_domains: list[str] = []
    whitelisted_domain_patterns: list[str] = []
    blacklisted_routes: list[str] = []
    blacklisted_route_patterns: list[str] = []

    throw_no_token_error: bool = False
    skip_when_expired: bool = False
    expiry_offset_seconds: int = 0

    # Skip TLS certificate verification (for self-signed certificates)
    tls_insecure_skip_verify: bool = False

    # Logging
    log_level: str = "INFO"


settings = Settings()


class InterceptorConfig(BaseModel):
    """Immutable configuration held by a JwtInterceptor for its lifetime."""

    model_config = ConfigDict(frozen=True)

    token_getter: TokenGetter
    origin: str
    header_name: str | None = DEFAULT_HEADER_NAME
    auth_scheme: AuthScheme | None = DEFAULT_AUTH_SCHEME
    whitelisted_domains: tuple[Matcher, ...] = ()
    blacklisted_routes: tuple[Matcher, ...] = ()
    throw_no_token_error: bool | None = False
    skip_when_expired: bool | None = False
    expiry_offset_seconds: int = 0
    expiry_checker: Callable[[str], bool] | None = None

    @field_validator("origin")
    @classmethod
    def _validate_origin(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid origin: {e}") from e
        if not url.scheme or not url.host:
            raise ValueError(f"origin must be an absolute URL, got {value!r}")
        return value

    @field_validator("header_name")
    @classmethod
    def _default_header_name(cls, value: str | None) -> str:
        return value or DEFAULT_HEADER_NAME

    @field_validator("auth_scheme")
    @classmethod
    def _default_auth_scheme(cls, value: AuthScheme | None) -> AuthScheme:
        # Explicit "" means no prefix; only an unset scheme falls back to the default
        if value == "":
            return ""
        if value:
            return value
        return DEFAULT_AUTH_SCHEME

    @field_validator("throw_no_token_error", "skip_when_expired")
    @classmethod
    def _default_flag(cls, value: bool | None) -> bool:
        return bool(value)

    @property
    def origin_url(self) -> httpx.URL:
        return httpx.URL(self.origin)

    def is_expired(self, token: str) -> bool:
        if self.expiry_checker is not None:
            return self.expiry_checker(token)
        return is_token_expired(token, self.expiry_offset_seconds)

    @classmethod
    def from_settings(
        cls,
        token_getter: TokenGetter,
        source: Settings | None = None,
        **overrides: Any,
    ) -> "InterceptorConfig":
        source = source or settings
        values: dict[str, Any] = {
            "token_getter": token_getter,
            "origin": source.origin,
            "header_name": source.header_name,
            "auth_scheme": source.auth_scheme,
            "whitelisted_domains": [
                *source.whitelisted_domains,
                *(re.compile(p) for p in source.whitelisted_domain_patterns),
            ],
            "blacklisted_routes": [
                *source.blacklisted_routes,
                *(re.compile(p) for p in source.blacklisted_route_patterns),
            ],
            "throw_no_token_error": source.throw_no_token_error,
            "skip_when_expired": source.skip_when_expired,
            "expiry_offset_seconds": source.expiry_offset_seconds,
        }
        values.update(overrides)
        return cls(**values)
