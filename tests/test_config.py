import os

import pytest

from benchmark_solvers.config import (
    BRUTE_FORCE_MAX_N,
    HELD_KARP_MAX_N,
    Settings,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TSP_BRUTE_FORCE_MAX_N", "TSP_HELD_KARP_MAX_N", "TSP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    settings = load_settings(tmp_path / "missing.env")
    assert settings == Settings(BRUTE_FORCE_MAX_N, HELD_KARP_MAX_N, "INFO")


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TSP_BRUTE_FORCE_MAX_N", "8")
    monkeypatch.setenv("TSP_LOG_LEVEL", "debug")
    settings = load_settings(tmp_path / "missing.env")
    assert settings.brute_force_max_n == 8
    assert settings.held_karp_max_n == HELD_KARP_MAX_N
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("TSP_HELD_KARP_MAX_N=16\n", encoding="utf-8")
    try:
        settings = load_settings(env_file)
    finally:
        os.environ.pop("TSP_HELD_KARP_MAX_N", None)
    assert settings.held_karp_max_n == 16


def test_invalid_integer(monkeypatch, tmp_path):
    monkeypatch.setenv("TSP_HELD_KARP_MAX_N", "vingt")
    with pytest.raises(ValueError, match="TSP_HELD_KARP_MAX_N"):
        load_settings(tmp_path / "missing.env")
