# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

import re

import pytest
from pydantic import ValidationError

from jwt_interceptor import ExactMatch, InterceptorConfig, PatternMatch, Settings
from tests.conftest import ORIGIN


def test_defaults(make_config):
    config = make_config()
    assert config.header_name == "Authorization"
    assert config.auth_scheme == "Bearer "
    assert config.whitelisted_domains == ()
    assert config.blacklisted_routes == ()
    assert config.throw_no_token_error is False
    assert config.skip_when_expired is False


@pytest.mark.parametrize(
    "value, expected",
    [(None, "Bearer "), ("", ""), ("Token ", "Token ")],
)
def test_auth_scheme_unset_empty_and_explicit(make_config, value, expected):
    assert make_config(auth_scheme=value).auth_scheme == expected


@pytest.mark.parametrize("value", [None, ""])
def test_falsy_header_name_falls_back(make_config, value):
    assert make_config(header_name=value).header_name == "Authorization"


def test_unset_flags_are_false(make_config):
    config = make_config(throw_no_token_error=None, skip_when_expired=None)
    assert config.throw_no_token_error is False
    assert config.skip_when_expired is False


def test_matchers_are_tagged(make_config):
    pattern = re.compile(r"\.internal$")
    config = make_config(whitelisted_domains=["api.example.com", pattern])

    exact, regex = config.whitelisted_domains
    assert isinstance(exact, ExactMatch) and exact.kind == "exact"
    assert isinstance(regex, PatternMatch) and regex.kind == "pattern"
    assert regex.pattern is pattern


def test_invalid_origin_rejected():
    with pytest.raises(ValidationError):
        InterceptorConfig(token_getter=lambda request: "abc", origin="not-a-url")


def test_config_is_frozen(make_config):
    config = make_config()
    with pytest.raises(ValidationError):
        config.header_name = "X-Other"


def test_expiry_checker_overrides_default(make_config):
    config = make_config(expiry_checker=lambda token: token == "old")
    assert config.is_expired("old")
    assert not config.is_expired("new")


def test_from_settings_compiles_patterns():
    source = Settings(
        origin=ORIGIN,
        whitelisted_domains=["api.example.com:8443"],
        whitelisted_domain_patterns=[r"\.internal$"],
        blacklisted_route_patterns=[r"/public/"],
        skip_when_expired=True,
    )

    config = InterceptorConfig.from_settings(lambda request: "abc", source)

    assert config.origin == ORIGIN
    assert config.skip_when_expired is True
    assert [m.kind for m in config.whitelisted_domains] == ["exact", "pattern"]
    assert config.blacklisted_routes[0].matches("https://app.example.com/public/a")


def test_from_settings_overrides_win():
    source = Settings(origin=ORIGIN, header_name="X-Token")
    config = InterceptorConfig.from_settings(lambda request: "abc", source, header_name="X-Other")
    assert config.header_name == "X-Other"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("JWT_INTERCEPTOR_ORIGIN", "https://portal.example.com")
    monkeypatch.setenv("JWT_INTERCEPTOR_WHITELISTED_DOMAINS", '["api.example.com:8443"]')
    monkeypatch.setenv("JWT_INTERCEPTOR_THROW_NO_TOKEN_ERROR", "true")

    source = Settings()

    assert source.origin == "https://portal.example.com"
    assert source.whitelisted_domains == ["api.example.com:8443"]
    assert source.throw_no_token_error is True
    assert source.auth_scheme is None


def test_from_settings_accepts_source_keyword():
    source = Settings(origin=ORIGIN, whitelisted_domains=["api.example.com:8443"])
    config = InterceptorConfig.from_settings(token_getter=lambda request: "abc", source=source)
    assert config.origin == ORIGIN
    assert config.whitelisted_domains[0].matches("api.example.com:8443")
