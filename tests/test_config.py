"""Tests for loading engine settings from YAML and the environment."""

from __future__ import annotations

from pathlib import Path

import pytest  # type: ignore

from hireflow.config import EngineConfig, load_config
from hireflow.errors import ConfigError


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "hireflow.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_defaults_without_file_or_env() -> None:
    config = load_config(None, environ={})
    assert config == EngineConfig()
    assert config.delay_for("score") == 1.5
    assert config.delay_for("rank") == 0.8


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, "engine:\n  score_delay: 0.25\n  log_level: debug\n")
    config = load_config(path, environ={})
    assert config.score_delay == 0.25
    assert config.match_delay == 1.2
    assert config.log_level == "DEBUG"


def test_empty_yaml_file(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, ""), environ={}) == EngineConfig()


def test_environment_overrides(tmp_path: Path) -> None:
    path = _write(tmp_path, "engine:\n  simulate_latency: true\n")
    config = load_config(
        path,
        environ={"HIREFLOW_LATENCY_SCALE": "0.5", "HIREFLOW_LOG_LEVEL": "warning"},
    )
    assert config.score_delay == 0.75
    assert config.questions_delay == 0.5
    assert config.log_level == "WARNING"

    off = load_config(path, environ={"HIREFLOW_SIMULATE_LATENCY": "false"})
    assert off.simulate_latency is False
    assert off.delay_for("score") == 0.0


def test_process_environment_is_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HIREFLOW_SIMULATE_LATENCY", "no")
    assert load_config().simulate_latency is False


@pytest.mark.parametrize(
    "text",
    [
        "engine:\n  unknown_key: 1\n",
        "engine:\n  score_delay: -1\n",
        "engine:\n  score_delay: soon\n",
        "engine:\n  simulate_latency: maybe\n",
        "engine:\n  log_level: chatty\n",
        "engine: [1, 2]\n",
        "- just\n- a list\n",
        "engine: {score_delay: 1\n",
    ],
)
def test_invalid_yaml_settings(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text), environ={})


def test_missing_file_and_bad_env(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.yaml"), environ={})
    with pytest.raises(ConfigError):
        load_config(None, environ={"HIREFLOW_LATENCY_SCALE": "-2"})


def test_delay_for_unknown_operation() -> None:
    with pytest.raises(KeyError):
        EngineConfig().delay_for("summarise")
