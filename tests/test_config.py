from __future__ import annotations

from pathlib import Path

import pytest

from household_tree.config import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.batch_max_workers >= 1
    assert s.virtual_marker == "पितृपुरुष"
    assert s.output_dir == Path("./tree_output")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOUSEHOLD_TREE_BATCH_MAX_WORKERS", "8")
    monkeypatch.setenv("HOUSEHOLD_TREE_LOG_LEVEL", "DEBUG")
    s = Settings()
    assert s.batch_max_workers == 8
    assert s.log_level == "DEBUG"


def test_resolve_workers() -> None:
    s = Settings(batch_max_workers=3)
    assert s.resolve_workers() == 3
    assert s.resolve_workers(6) == 6
    with pytest.raises(ValueError):
        s.resolve_workers(0)
