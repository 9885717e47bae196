from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_react_wptheme import info
from tests.create_react_wptheme.helpers import FakeRunner, failed

GLOBAL_LS = ("npm", "ls", "--global", "--depth=0", "--json", "create-react-app")


def test_binary_versions() -> None:
    runner = FakeRunner(
        {("node", "--version"): "v18.19.0\n", ("yarnpkg", "--version"): failed(("yarnpkg",))}
    )

    assert info.binary_version("node", runner=runner) == "18.19.0"
    assert info.binary_version("yarnpkg", runner=runner) == info.NOT_FOUND
    assert info.binary_version("npm", runner=runner) == info.NOT_FOUND


def test_local_package_version(tmp_path: Path) -> None:
    manifest = tmp_path / "node_modules" / "react" / "package.json"
    manifest.parent.mkdir(parents=True)
    manifest.write_text(json.dumps({"name": "react", "version": "16.8.6"}), encoding="utf-8")

    assert info.local_package_version("react", tmp_path) == "16.8.6"
    assert info.local_package_version("react-dom", tmp_path) == info.NOT_FOUND


def test_global_package_version() -> None:
    payload = {"dependencies": {"create-react-app": {"version": "3.0.1"}}}
    runner = FakeRunner({GLOBAL_LS: json.dumps(payload)})

    assert info.global_package_version("create-react-app", runner=runner) == "3.0.1"
    assert info.global_package_version("create-react-app", runner=FakeRunner()) == (
        info.NOT_FOUND
    )


def test_print_info_lists_sections(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    runner = FakeRunner({("node", "--version"): "v18.19.0"})

    info.print_info(tmp_path, runner=runner)

    out = capsys.readouterr().out
    assert "Environment Info:" in out
    for section in ("System:", "Binaries:", "npmPackages:", "npmGlobalPackages:"):
        assert section in out
    assert "18.19.0" in out
    assert "create-react-app" in out
