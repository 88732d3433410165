from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

NBSP = "\u00a0"


def write_locale(root: Path, relative: str, data: dict) -> Path:
    """Write ``data`` as pretty-printed JSON under ``root``."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    """Locale tree with one unfixed preposition per language."""
    root = tmp_path / "locales"
    write_locale(root, "en/common.json", {"welcome": "Welcome to our site"})
    write_locale(root, "ru/common.json", {"welcome": "Добро пожаловать на сайт"})
    write_locale(root, "uk/common.json", {"welcome": "Ласкаво просимо до сайту"})
    return root


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep stray config files and environment defaults out of the tests."""
    monkeypatch.delenv("I18N_NBSP_LOCALES", raising=False)
    monkeypatch.delenv("I18N_NBSP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
