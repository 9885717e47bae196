# ruff: noqa: E402

import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import create_react_wptheme.log as log

DOCTEST_MODULES = {
    ROOT / "src" / "create_react_wptheme" / "__init__.py",
    ROOT / "src" / "create_react_wptheme" / "cli.py",
    ROOT / "src" / "create_react_wptheme" / "config.py",
    ROOT / "src" / "create_react_wptheme" / "connectivity.py",
    ROOT / "src" / "create_react_wptheme" / "environment.py",
    ROOT / "src" / "create_react_wptheme" / "exec.py",
    ROOT / "src" / "create_react_wptheme" / "naming.py",
    ROOT / "src" / "create_react_wptheme" / "scripts_source.py",
}


@pytest.fixture(autouse=True)
def _plain_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(log, "_configured_level", None)
    monkeypatch.setattr(log, "_no_color_override", None)
    monkeypatch.setenv("NO_COLOR", "1")
    for name in (
        "WPTHEME_LOG_LEVEL",
        "WPTHEME_NO_COLOR",
        "WPTHEME_SCRIPTS_SOURCE",
        "WPTHEME_SCRIPTS_PATH",
        "https_proxy",
    ):
        monkeypatch.delenv(name, raising=False)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
