# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

from jwt_interceptor.client import create_async_client, create_client
from jwt_interceptor.config import STANDARD_PORTS, InterceptorConfig, Settings, settings
from jwt_interceptor.errors import (
    AsyncTokenGetterError,
    InterceptorError,
    MissingCredentialError,
    TokenDecodeError,
)
from jwt_interceptor.interceptor import JwtInterceptor
from jwt_interceptor.logging_config import setup_logging
from jwt_interceptor.models import ExactMatch, PatternMatch
from jwt_interceptor.resolver import resolve_token, resolve_token_sync
from jwt_interceptor.scope import ScopeClassifier
from jwt_interceptor.tokens import (
    decode_token,
    get_auth_scheme,
    get_token_expiration_date,
    is_token_expired,
)

__all__ = [
    # Interceptor
    "JwtInterceptor",
    "ScopeClassifier",
    "resolve_token",
    "resolve_token_sync",
    # Config
    "InterceptorConfig",
    "Settings",
    "settings",
    "STANDARD_PORTS",
    "ExactMatch",
    "PatternMatch",
    # Clients
    "create_async_client",
    "create_client",
    # Logging
    "setup_logging",
    # Tokens
    "decode_token",
    "get_auth_scheme",
    "get_token_expiration_date",
    "is_token_expired",
    # Errors
    "InterceptorError",
    "MissingCredentialError",
    "AsyncTokenGetterError",
    "TokenDecodeError",
]
