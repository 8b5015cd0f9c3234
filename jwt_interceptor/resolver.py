# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

import inspect

import httpx

from jwt_interceptor.config import TokenGetter
from jwt_interceptor.errors import AsyncTokenGetterError


async def resolve_token(token_getter: TokenGetter, request: httpx.Request) -> str | None:
    """Resolve a token that may be returned directly or as an awaitable.

    Failures raised by the token source propagate unchanged.
    """
    result = token_getter(request)
    if inspect.isawaitable(result):
        return await result
    return result


def resolve_token_sync(token_getter: TokenGetter, request: httpx.Request) -> str | None:
    result = token_getter(request)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise AsyncTokenGetterError(
            "token_getter returned an awaitable; use an async client or aintercept()"
        )
    return result
