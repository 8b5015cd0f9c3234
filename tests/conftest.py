# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

import httpx
import pytest

from jwt_interceptor import InterceptorConfig, JwtInterceptor

ORIGIN = "https://app.example.com"


@pytest.fixture
def make_config():
    def _make(token="abc", **kwargs):
        kwargs.setdefault("origin", ORIGIN)
        kwargs.setdefault("token_getter", lambda request: token)
        return InterceptorConfig(**kwargs)

    return _make


@pytest.fixture
def make_interceptor(make_config):
    def _make(token="abc", **kwargs):
        return JwtInterceptor(make_config(token, **kwargs))

    return _make


@pytest.fixture
def make_request():
    def _make(url, **kwargs):
        return httpx.Request("GET", url, **kwargs)

    return _make
