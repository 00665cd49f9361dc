from __future__ import annotations

from pathlib import Path

import pytest

from vin import app
from vin.config import MODE_CONFIGS, EditorConfig, EditorMode


def test_from_env_reads_overrides() -> None:
    config = EditorConfig.from_env({"VIN_TAB_STOP": "8", "VIN_PENDING_TIMEOUT_MS": "250"})

    assert config.tab_stop == 8
    assert config.pending_timeout_ms == 250


def test_from_env_ignores_garbage() -> None:
    config = EditorConfig.from_env({"VIN_TAB_STOP": "wide"})

    assert config.tab_stop == 4
    assert config.pending_timeout_ms == 1000


def test_non_positive_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(tab_stop=0)
    with pytest.raises(ValueError):
        EditorConfig.from_env({"VIN_PENDING_TIMEOUT_MS": "-5"})


def test_mode_labels() -> None:
    assert [MODE_CONFIGS[mode].label for mode in EditorMode] == ["NORMAL", "INSERT", "COMMAND"]


def test_cli_tab_stop_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIN_TAB_STOP", "2")

    config = app.build_config(app._parse_args(["--tab-stop", "6", "file.c"]))

    assert config.tab_stop == 6


def test_main_rejects_invalid_tab_stop(capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["--tab-stop", "0"]) == 2
    assert "tab_stop must be positive" in capsys.readouterr().err


def test_main_reports_unreadable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.txt"

    assert app.main([str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err
