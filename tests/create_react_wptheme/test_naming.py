"""Tests for npm package-name validation."""

from __future__ import annotations

import pytest

from create_react_wptheme import naming
from create_react_wptheme.config import RESERVED_NAMES
from create_react_wptheme.services.errors import InvalidNameError, ReservedNameError


@pytest.mark.parametrize(
    "name",
    ["my-theme", "theme2", "some.package", "@devloco/my-theme", "a" * 214],
)
def test_valid_names(name: str) -> None:
    result = naming.validate_package_name(name)

    assert result.valid_for_new_packages is True
    assert result.valid_for_old_packages is True
    assert result.errors == []
    assert result.warnings == []


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("", "name length must be greater than zero"),
        (".theme", "name cannot start with a period"),
        ("_theme", "name cannot start with an underscore"),
        (" theme", "name cannot contain leading or trailing spaces"),
        ("node_modules", "node_modules is a blacklisted name"),
        ("favicon.ico", "favicon.ico is a blacklisted name"),
        ("my theme", "name can only contain URL-friendly characters"),
        ("thème", "name can only contain URL-friendly characters"),
    ],
)
def test_structural_errors(name: str, message: str) -> None:
    result = naming.validate_package_name(name)

    assert result.valid_for_new_packages is False
    assert result.valid_for_old_packages is False
    assert message in result.errors


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("MyTheme", "name can no longer contain capital letters"),
        ("theme!", "name can no longer contain special characters (\"~'!()*\")"),
        ("http", "http is a core module name"),
        ("diagnostics_channel", "diagnostics_channel is a core module name"),
        ("wasi", "wasi is a core module name"),
        ("a" * 215, "name can no longer contain more than 214 characters"),
    ],
)
def test_legacy_warnings_block_new_packages(name: str, message: str) -> None:
    result = naming.validate_package_name(name)

    assert result.valid_for_new_packages is False
    assert result.valid_for_old_packages is True
    assert result.warnings == [message]


@pytest.mark.parametrize("name", ["fs/promises", "stream/web", "util/types"])
def test_core_subpath_modules_are_rejected(name: str) -> None:
    result = naming.validate_package_name(name)

    assert f"{name} is a core module name" in result.warnings
    assert result.valid_for_new_packages is False


def test_null_name() -> None:
    result = naming.validate_package_name(None)

    assert result.errors == ["name cannot be null"]
    assert result.valid_for_new_packages is False


def test_scoped_name_with_bad_scope_is_rejected() -> None:
    result = naming.validate_package_name("@my scope/theme")

    assert "name can only contain URL-friendly characters" in result.errors


def test_check_app_name_reports_every_violation() -> None:
    with pytest.raises(InvalidNameError) as exc_info:
        naming.check_app_name("_My Theme")

    error = exc_info.value
    assert error.code == "validation_failed"
    assert error.name == "_My Theme"
    assert "name cannot start with an underscore" in error.errors
    assert "name can only contain URL-friendly characters" in error.errors
    assert "name can no longer contain capital letters" in error.warnings
    assert error.violations == error.errors + error.warnings


@pytest.mark.parametrize("name", RESERVED_NAMES)
def test_check_app_name_rejects_reserved_names(name: str) -> None:
    with pytest.raises(ReservedNameError) as exc_info:
        naming.check_app_name(name)

    assert exc_info.value.reserved == tuple(sorted(RESERVED_NAMES))
    assert exc_info.value.recovery_hint == "Please choose a different project name."


def test_check_app_name_accepts_custom_reserved_list() -> None:
    naming.check_app_name("react", reserved=("my-theme",))
    with pytest.raises(ReservedNameError):
        naming.check_app_name("my-theme", reserved=("my-theme",))


def test_check_app_name_passes_for_regular_names() -> None:
    assert naming.check_app_name("my-theme") is None
