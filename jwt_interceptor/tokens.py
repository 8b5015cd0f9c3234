# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

"""Unverified JWT claim helpers used for expiry checks."""

import logging
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import httpx
import jwt

from jwt_interceptor.errors import TokenDecodeError

logger = logging.getLogger(__name__)


def decode_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            options={
                "verify_signature": False,
                "verify_exp": False,
                "verify_nbf": False,
                "verify_iat": False,
                "verify_aud": False,
                "verify_iss": False,
            },
        )
    except jwt.DecodeError as e:
        raise TokenDecodeError(f"Invalid token: {e}") from e


def _expiration_from_claims(claims: dict[str, Any]) -> datetime | None:
    exp = claims.get("exp")
    if exp is None:
        return None
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise TokenDecodeError(f"Invalid exp claim: {exp!r}")
    try:
        return datetime.fromtimestamp(exp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise TokenDecodeError(f"Invalid exp claim: {exp!r}") from e


def get_token_expiration_date(token: str) -> datetime | None:
    return _expiration_from_claims(decode_token(token))


def is_token_expired(token: str, offset_seconds: int = 0) -> bool:
    """Report whether the token's ``exp`` claim has passed.

    Tokens without an ``exp`` claim never expire, and an ``exp`` that is not a
    valid timestamp counts as expired. ``offset_seconds`` treats a token as
    expired that many seconds early.
    """
    claims = decode_token(token)
    try:
        expiration = _expiration_from_claims(claims)
    except TokenDecodeError:
        logger.debug("Token has an invalid exp claim, treating as expired")
        return True
    if expiration is None:
        return False

    expired = expiration.timestamp() <= time.time() + offset_seconds
    if expired:
        logger.debug("Token expired at %s", expiration.isoformat())
    return expired


def get_auth_scheme(
    auth_scheme: str | Callable[[httpx.Request], str],
    request: httpx.Request,
) -> str:
    if callable(auth_scheme):
        return auth_scheme(request)
    return auth_scheme
