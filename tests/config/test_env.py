# tests/config/test_env.py

import os
import pytest
from pathlib import Path

from tracking_webhook.config.env import (
    EnvError,
    load_project_dotenv,
    load_env,
    get_app_env,
    env as env_get,
)
from tracking_webhook.models.env_cfg import DEFAULT_SHEET_CSV_URL, DEFAULT_FETCH_TIMEOUT

KEYS = ("SHEET_CSV_URL", "SHEET_FETCH_TIMEOUT")


def _write_env_file(dirpath, text=""):
    f = dirpath / ".env"
    f.write_text(text)
    return f


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    for k in KEYS:
        # setenv first so monkeypatch restores whatever load_dotenv writes
        monkeypatch.setenv(k, "")
        monkeypatch.delenv(k)
    # keep the real project .env (if any) out of discovery
    monkeypatch.chdir(tmp_path)


def test_load_env_reads_file_and_sets_process_env_when_missing(tmp_path):
    f = _write_env_file(
        tmp_path,
        "SHEET_CSV_URL=https://example.test/a.csv\nSHEET_FETCH_TIMEOUT=5\n",
    )

    loaded = load_env(f, override=False, strict=True,
                      required_keys=("SHEET_CSV_URL",))
    assert loaded["SHEET_CSV_URL"] == "https://example.test/a.csv"
    assert os.environ["SHEET_CSV_URL"] == "https://example.test/a.csv"
    assert os.environ["SHEET_FETCH_TIMEOUT"] == "5"


def test_process_env_wins_over_dotenv_with_get_app_env(tmp_path, monkeypatch):
    f = _write_env_file(
        tmp_path,
        "SHEET_CSV_URL=https://example.test/file.csv\nSHEET_FETCH_TIMEOUT=5\n",
    )
    monkeypatch.setenv("SHEET_CSV_URL", "https://example.test/env.csv")

    cfg = get_app_env(f)

    assert cfg.SHEET_CSV_URL == "https://example.test/env.csv"  # env wins
    assert cfg.SHEET_FETCH_TIMEOUT == 5                        # came from file


def test_load_env_override_true_file_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("SHEET_CSV_URL", "https://example.test/env.csv")
    f = _write_env_file(tmp_path, "SHEET_CSV_URL=https://example.test/file.csv\n")

    load_env(f, override=True)

    assert os.environ["SHEET_CSV_URL"] == "https://example.test/file.csv"


def test_get_app_env_defaults_when_nothing_set(tmp_path):
    cfg = get_app_env(tmp_path / "missing.env")
    assert cfg.SHEET_CSV_URL == DEFAULT_SHEET_CSV_URL
    assert cfg.SHEET_FETCH_TIMEOUT == DEFAULT_FETCH_TIMEOUT


def test_get_app_env_strict_raises_when_url_missing(tmp_path):
    with pytest.raises(RuntimeError) as e:
        get_app_env(dotenv_path=tmp_path / ".env", strict=True)
    assert "SHEET_CSV_URL" in str(e.value)


def test_bad_timeout_raises_env_error(monkeypatch, tmp_path):
    monkeypatch.setenv("SHEET_FETCH_TIMEOUT", "soon")
    with pytest.raises(EnvError):
        get_app_env(tmp_path / "missing.env")


def test_env_required_flag_raises():
    with pytest.raises(KeyError):
        env_get("SOME_MISSING_VAR_FOR_TRACKING_WEBHOOK", required=True)


def test_env_default_and_cast(monkeypatch):
    assert env_get("OPTIONAL_VAR_FOR_TRACKING_WEBHOOK",
                   default="fallback") == "fallback"
    monkeypatch.setenv("SHEET_FETCH_TIMEOUT", "12")
    assert env_get("SHEET_FETCH_TIMEOUT", cast=int) == 12


def test_project_dotenv_discovered_from_start(tmp_path: Path):
    project = tmp_path / "project"
    nested = project / "a" / "b"
    nested.mkdir(parents=True)
    _write_env_file(project, "SHEET_CSV_URL=https://example.test/found.csv\n")

    found = load_project_dotenv(start=nested)

    assert found == (project / ".env").resolve()
    assert os.environ["SHEET_CSV_URL"] == "https://example.test/found.csv"
