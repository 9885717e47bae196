"""Registry reachability check run before delegating to the generator."""

from __future__ import annotations

import os
import socket
from typing import Callable, Mapping
from urllib.parse import urlparse

from . import log
from .exec import CommandRequest, CommandRunner, run_with_runner

YARN_REGISTRY_HOST = "registry.yarnpkg.com"

HostResolver = Callable[[str], bool]
ProxyLookup = Callable[[], str | None]


def resolve_host(hostname: str) -> bool:
    """Return True when ``hostname`` resolves via the system resolver."""
    try:
        socket.getaddrinfo(hostname, None)
    except (OSError, UnicodeError) as exc:
        log.debug(f"could not resolve {hostname}: {exc}")
        return False
    return True


def configured_proxy(
    environ: Mapping[str, str] | None = None,
    *,
    executable: str = "npm",
    runner: CommandRunner | None = None,
) -> str | None:
    """Return the HTTPS proxy from ``https_proxy`` or the npm config.

    npm reports an unset key as ``null``.
    """
    env = os.environ if environ is None else environ
    proxy = env.get("https_proxy")
    if proxy:
        return proxy
    result = run_with_runner(
        CommandRequest(argv=(executable, "config", "get", "https-proxy")),
        runner=runner,
    )
    if result is None or not result.ok:
        return None
    value = result.stdout.strip()
    if not value or value == "null":
        return None
    return value


def proxy_hostname(proxy: str) -> str | None:
    """Extract the hostname from a proxy URL.

    Example:
        >>> proxy_hostname("http://proxy.corp.example:3128")
        'proxy.corp.example'
        >>> proxy_hostname("proxy.corp.example:3128")
        'proxy.corp.example'
    """
    parsed = urlparse(proxy if "//" in proxy else f"//{proxy}")
    return parsed.hostname


def is_online(
    using_alternate: bool,
    *,
    registry_host: str = YARN_REGISTRY_HOST,
    resolver: HostResolver | None = None,
    proxy_lookup: ProxyLookup | None = None,
) -> bool:
    """Decide whether the selected package manager can reach its registry.

    npm does its own connectivity handling, so only yarn is checked. When the
    registry does not resolve, a configured proxy that resolves still counts as
    online since proxied setups often cannot resolve external hosts.
    """
    if not using_alternate:
        return True
    resolve = resolver or resolve_host
    if resolve(registry_host):
        return True
    lookup = proxy_lookup or configured_proxy
    try:
        proxy = lookup()
    except OSError as exc:
        log.debug(f"proxy lookup failed: {exc}")
        proxy = None
    if not proxy:
        return False
    hostname = proxy_hostname(proxy)
    if not hostname:
        return False
    log.debug(f"registry unreachable; checking proxy host {hostname}")
    return resolve(hostname)
