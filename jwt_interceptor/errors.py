# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0


class InterceptorError(Exception):
    pass


class MissingCredentialError(InterceptorError):
    def __init__(self, message: str = "Could not get token from token_getter function."):
        super().__init__(message)


class AsyncTokenGetterError(InterceptorError):
    """token_getter returned an awaitable inside a synchronous auth flow."""


class TokenDecodeError(InterceptorError):
    pass
