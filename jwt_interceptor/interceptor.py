# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

"""httpx.Auth that attaches a bearer credential to in-scope requests."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx

from jwt_interceptor.config import InterceptorConfig
from jwt_interceptor.errors import MissingCredentialError
from jwt_interceptor.resolver import resolve_token, resolve_token_sync
from jwt_interceptor.scope import ScopeClassifier
from jwt_interceptor.tokens import get_auth_scheme

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JwtInterceptor(httpx.Auth):
    """Injects ``config.header_name`` into requests that pass the scope checks.

    The original request is never mutated; every forwarded request on the
    injection path is a fresh copy.
    """

    def __init__(self, config: InterceptorConfig) -> None:
        self.config = config
        self.scope = ScopeClassifier(config)

    def build_request(self, token: str | None, request: httpx.Request) -> httpx.Request:
        auth_scheme = get_auth_scheme(self.config.auth_scheme, request)

        if not token and self.config.throw_no_token_error:
            raise MissingCredentialError()

        token_is_expired = False
        if self.config.skip_when_expired:
            token_is_expired = self.config.is_expired(token) if token else True

        headers = request.headers.copy()
        if token and token_is_expired:
            logger.debug("Token expired, forwarding without %s", self.config.header_name)
        elif token:
            headers[self.config.header_name] = f"{auth_scheme}{token}"
            logger.debug("Attached %s header", self.config.header_name)
        else:
            logger.debug("No token available, forwarding without %s", self.config.header_name)

        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=dict(request.extensions),
        )

    def sync_auth_flow(self, request: httpx.Request):
        if self.scope.should_bypass(request):
            yield request
            return

        token = resolve_token_sync(self.config.token_getter, request)
        yield self.build_request(token, request)

    async def async_auth_flow(self, request: httpx.Request):
        if self.scope.should_bypass(request):
            yield request
            return

        token = await resolve_token(self.config.token_getter, request)
        yield self.build_request(token, request)

    def intercept(self, request: httpx.Request, handler: Callable[[httpx.Request], T]) -> T:
        if self.scope.should_bypass(request):
            return handler(request)

        token = resolve_token_sync(self.config.token_getter, request)
        return handler(self.build_request(token, request))

    async def aintercept(
        self,
        request: httpx.Request,
        handler: Callable[[httpx.Request], Awaitable[T]],
    ) -> T:
        if self.scope.should_bypass(request):
            return await handler(request)

        token = await resolve_token(self.config.token_getter, request)
        return await handler(self.build_request(token, request))
