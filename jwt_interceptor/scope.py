# Copyright 2025 The OpenChoreo Authors
# SPDX-License-Identifier: Apache-2.0

import logging

import httpx

from jwt_interceptor.config import STANDARD_PORTS, InterceptorConfig

logger = logging.getLogger(__name__)


def _hostname(url: httpx.URL) -> str:
    # ASCII (punycode) form, with IPv6 literals kept in brackets
    hostname = url.raw_host.decode("ascii")
    return f"[{hostname}]" if ":" in hostname else hostname


def _host(url: httpx.URL) -> str:
    # httpx drops default ports, so this is hostname plus any explicit non-default port
    hostname = _hostname(url)
    return f"{hostname}:{url.port}" if url.port is not None else hostname


def _pathname(url: httpx.URL) -> bytes:
    return url.raw_path.split(b"?", 1)[0]


class ScopeClassifier:
    """Decides which requests are eligible for credential injection."""

    def __init__(self, config: InterceptorConfig) -> None:
        self.config = config
        self._origin = config.origin_url

    def _resolve(self, url: httpx.URL | str) -> httpx.URL:
        return self._origin.join(url)

    def is_whitelisted_domain(self, request: httpx.Request) -> bool:
        request_url = self._resolve(request.url)

        # Same host as the application origin is always in scope
        if _host(request_url) == _host(self._origin):
            return True

        host_name = _hostname(request_url)
        if request_url.port is not None and str(request_url.port) not in STANDARD_PORTS:
            host_name = f"{host_name}:{request_url.port}"

        return any(domain.matches(host_name) for domain in self.config.whitelisted_domains)

    def is_blacklisted_route(self, request: httpx.Request) -> bool:
        request_url = self._resolve(request.url)
        raw_url = str(request.url)

        for route in self.config.blacklisted_routes:
            if route.kind == "exact":
                # Query and fragment are ignored for exact routes
                parsed_route = self._resolve(route.value)
                same_host = _hostname(parsed_route) == _hostname(request_url)
                if same_host and _pathname(parsed_route) == _pathname(request_url):
                    return True
            elif route.matches(raw_url):
                return True

        return False

    def should_bypass(self, request: httpx.Request) -> bool:
        if not self.is_whitelisted_domain(request):
            logger.debug("Request host not whitelisted, bypassing: %s", request.url.host)
            return True
        if self.is_blacklisted_route(request):
            logger.debug("Request route blacklisted, bypassing: %s", request.url.path)
            return True
        return False
