"""npm package-name rules and the reserved-name check.

Example:
    >>> validate_package_name("my-theme").valid_for_new_packages
    True
    >>> validate_package_name("My-Theme").warnings
    ['name can no longer contain capital letters']
"""

from __future__ import annotations

import re
from urllib.parse import quote

from pydantic import BaseModel, Field

from .config import RESERVED_NAMES
from .services.errors import InvalidNameError, ReservedNameError

MAX_NAME_LENGTH = 214
BLACKLISTED_NAMES = ("node_modules", "favicon.ico")
# Mirrors module.builtinModules of current Node releases.
CORE_MODULE_NAMES = (
    "_http_agent",
    "_http_client",
    "_http_common",
    "_http_incoming",
    "_http_outgoing",
    "_http_server",
    "_stream_duplex",
    "_stream_passthrough",
    "_stream_readable",
    "_stream_transform",
    "_stream_wrap",
    "_stream_writable",
    "_tls_common",
    "_tls_wrap",
    "assert",
    "assert/strict",
    "async_hooks",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "diagnostics_channel",
    "dns",
    "dns/promises",
    "domain",
    "events",
    "fs",
    "fs/promises",
    "http",
    "http2",
    "https",
    "inspector",
    "inspector/promises",
    "module",
    "net",
    "os",
    "path",
    "path/posix",
    "path/win32",
    "perf_hooks",
    "process",
    "punycode",
    "querystring",
    "readline",
    "readline/promises",
    "repl",
    "stream",
    "stream/consumers",
    "stream/promises",
    "stream/web",
    "string_decoder",
    "sys",
    "timers",
    "timers/promises",
    "tls",
    "trace_events",
    "tty",
    "url",
    "util",
    "util/types",
    "v8",
    "vm",
    "wasi",
    "worker_threads",
    "zlib",
)

_SCOPED_NAME_RE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARS_RE = re.compile(r"[~'!()*]")
# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URL_SAFE = "-_.!~*'()"


class NameValidation(BaseModel):
    """Outcome of validating a package name.

    Warnings describe names npm used to accept; any warning still makes the
    name invalid for new packages.
    """

    valid_for_new_packages: bool
    valid_for_old_packages: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def _url_friendly(value: str) -> bool:
    return quote(value, safe=_URL_SAFE) == value


def validate_package_name(name: str | None) -> NameValidation:
    """Check ``name`` against npm's package naming rules."""
    errors: list[str] = []
    warnings: list[str] = []

    if name is None:
        errors.append("name cannot be null")
        return _result(errors, warnings)
    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    lowered = name.lower()
    for blacklisted in BLACKLISTED_NAMES:
        if lowered == blacklisted:
            errors.append(f"{blacklisted} is a blacklisted name")
    for module in CORE_MODULE_NAMES:
        if lowered == module:
            warnings.append(f"{module} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )
    if lowered != name:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARS_RE.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not _url_friendly(name):
        match = _SCOPED_NAME_RE.match(name)
        if match and match.group(1) is not None:
            scope, package = match.group(1), match.group(2)
            if _url_friendly(scope) and _url_friendly(package):
                return _result(errors, warnings)
        errors.append("name can only contain URL-friendly characters")

    return _result(errors, warnings)


def _result(errors: list[str], warnings: list[str]) -> NameValidation:
    return NameValidation(
        valid_for_new_packages=not errors and not warnings,
        valid_for_old_packages=not errors,
        errors=errors,
        warnings=warnings,
    )


def check_app_name(name: str, reserved: tuple[str, ...] = RESERVED_NAMES) -> None:
    """Raise when ``name`` cannot be used for a new theme.

    Raises:
        InvalidNameError: ``name`` is not valid for new npm packages.
        ReservedNameError: ``name`` matches a dependency of the generated theme.
    """
    result = validate_package_name(name)
    if not result.valid_for_new_packages:
        raise InvalidNameError(
            name, errors=tuple(result.errors), warnings=tuple(result.warnings)
        )
    ordered = tuple(sorted(reserved))
    if name in ordered:
        raise ReservedNameError(name, reserved=ordered)
