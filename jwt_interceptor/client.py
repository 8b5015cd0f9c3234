# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

from typing import Any

import httpx

from jwt_interceptor.config import InterceptorConfig, settings
from jwt_interceptor.interceptor import JwtInterceptor


def create_async_client(config: InterceptorConfig, **kwargs: Any) -> httpx.AsyncClient:
    kwargs.setdefault("verify", not settings.tls_insecure_skip_verify)
    return httpx.AsyncClient(auth=JwtInterceptor(config), **kwargs)


def create_client(config: InterceptorConfig, **kwargs: Any) -> httpx.Client:
    kwargs.setdefault("verify", not settings.tls_insecure_skip_verify)
    return httpx.Client(auth=JwtInterceptor(config), **kwargs)
