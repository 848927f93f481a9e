import json
import shutil
from pathlib import Path

import pytest

GOLDEN_DIR = Path(__file__).resolve().parent.parent / "golden"


@pytest.fixture
def golden_copy(tmp_path):
    """A writable copy of the shipped golden cases."""
    target = tmp_path / "golden"
    shutil.copytree(GOLDEN_DIR, target)
    return target


@pytest.fixture
def make_case(tmp_path):
    def _make_case(name, inputs, expected=None):
        case_dir = tmp_path / "cases" / name
        case_dir.mkdir(parents=True)
        (case_dir / "inputs.json").write_text(json.dumps(inputs))
        if expected is not None:
            (case_dir / "expected").write_text(expected)
        return case_dir

    return _make_case


@pytest.fixture(autouse=True)
def clean_golden_env(monkeypatch):
    monkeypatch.delenv("GOLDEN_DIR", raising=False)
    monkeypatch.delenv("GOLDEN_ENTRY_FUNC", raising=False)
