from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = str(REPO_ROOT / "src")


@pytest.mark.parametrize("name", ["init_db", "seed_db"])
def test_scripts_put_src_on_path(monkeypatch, name):
    monkeypatch.setattr(sys, "path", [p for p in sys.path if p != SRC_DIR])

    spec = importlib.util.spec_from_file_location(f"scripts_{name}", REPO_ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert SRC_DIR in sys.path
    assert callable(module.main)
