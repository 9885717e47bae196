"""Tests for the registry reachability check."""

from __future__ import annotations

import socket

import pytest

from create_react_wptheme import connectivity
from tests.create_react_wptheme.helpers import FakeRunner, failed

NPM_PROXY = ("npm", "config", "get", "https-proxy")


class FakeResolver:
    def __init__(self, reachable: set[str]) -> None:
        self.reachable = reachable
        self.lookups: list[str] = []

    def __call__(self, hostname: str) -> bool:
        self.lookups.append(hostname)
        return hostname in self.reachable


def test_default_manager_is_always_online() -> None:
    resolver = FakeResolver(set())

    def no_proxy() -> str | None:
        raise AssertionError("proxy lookup should not run")

    assert connectivity.is_online(False, resolver=resolver, proxy_lookup=no_proxy)
    assert resolver.lookups == []


def test_alternate_manager_online_when_registry_resolves() -> None:
    resolver = FakeResolver({"registry.yarnpkg.com"})

    assert connectivity.is_online(True, resolver=resolver, proxy_lookup=lambda: None)
    assert resolver.lookups == ["registry.yarnpkg.com"]


def test_alternate_manager_offline_without_proxy() -> None:
    resolver = FakeResolver(set())

    assert not connectivity.is_online(True, resolver=resolver, proxy_lookup=lambda: None)
    assert resolver.lookups == ["registry.yarnpkg.com"]


def test_proxy_host_resolution_counts_as_online() -> None:
    resolver = FakeResolver({"proxy.corp.example"})

    online = connectivity.is_online(
        True,
        resolver=resolver,
        proxy_lookup=lambda: "http://proxy.corp.example:3128",
    )

    assert online is True
    assert resolver.lookups == ["registry.yarnpkg.com", "proxy.corp.example"]


def test_unresolvable_proxy_is_offline() -> None:
    resolver = FakeResolver(set())

    online = connectivity.is_online(
        True, resolver=resolver, proxy_lookup=lambda: "http://proxy.corp.example:3128"
    )

    assert online is False


def test_failing_proxy_lookup_is_offline() -> None:
    def broken() -> str | None:
        raise OSError("npm went away")

    assert not connectivity.is_online(
        True, resolver=FakeResolver(set()), proxy_lookup=broken
    )


def test_resolve_host_swallows_resolution_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_getaddrinfo(host: str, port: object) -> list[object]:
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(socket, "getaddrinfo", fake_getaddrinfo)

    assert connectivity.resolve_host("registry.yarnpkg.com") is False


def test_resolve_host_treats_bad_hostnames_as_unreachable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def fake_getaddrinfo(host: str, port: object) -> list[object]:
        raise UnicodeError("label too long")

    monkeypatch.setattr(socket, "getaddrinfo", fake_getaddrinfo)

    assert connectivity.resolve_host("x" * 300) is False


def test_resolve_host_propagates_unrelated_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_getaddrinfo(host: str, port: object) -> list[object]:
        raise RuntimeError("boom")

    monkeypatch.setattr(socket, "getaddrinfo", fake_getaddrinfo)

    with pytest.raises(RuntimeError):
        connectivity.resolve_host("registry.yarnpkg.com")


def test_resolve_host_success(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(socket, "getaddrinfo", lambda host, port: [("addr",)])

    assert connectivity.resolve_host("registry.yarnpkg.com") is True


def test_proxy_prefers_environment_variable() -> None:
    runner = FakeRunner({NPM_PROXY: "http://npm-proxy:8080\n"})

    proxy = connectivity.configured_proxy(
        {"https_proxy": "http://env-proxy:3128"}, runner=runner
    )

    assert proxy == "http://env-proxy:3128"
    assert runner.requests == []


def test_proxy_falls_back_to_npm_config() -> None:
    runner = FakeRunner({NPM_PROXY: "http://npm-proxy:8080\n"})

    assert connectivity.configured_proxy({}, runner=runner) == "http://npm-proxy:8080"
    assert runner.argvs() == [NPM_PROXY]


@pytest.mark.parametrize("response", ["null\n", "", None, failed(NPM_PROXY)])
def test_proxy_unset_values(response: object) -> None:
    runner = FakeRunner({NPM_PROXY: response})

    assert connectivity.configured_proxy({}, runner=runner) is None
