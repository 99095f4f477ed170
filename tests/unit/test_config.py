"""Tests for specifications.config module."""

import pytest
from pydantic import ValidationError

from specifications.config import DEFAULT_CONFIG, SpecificationsConfig, find_pyproject, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration environment variables out of each test."""
    monkeypatch.delenv("SPECIFICATIONS_FAILURE_MODE", raising=False)
    monkeypatch.delenv("SPECIFICATIONS_ALLOW_PRIVATE_HOOKS", raising=False)


def write_pyproject(directory, body):
    path = directory / "pyproject.toml"
    path.write_text(body)
    return path


def test_defaults():
    assert DEFAULT_CONFIG.failure_mode == "aggregate"
    assert DEFAULT_CONFIG.allow_private_hooks is True


def test_defaults_without_table(tmp_path):
    write_pyproject(tmp_path, '[project]\nname = "sample"\n')

    assert load_config(tmp_path) == DEFAULT_CONFIG


def test_reads_tool_table(tmp_path):
    write_pyproject(
        tmp_path,
        '[tool.specifications]\nfailure_mode = "first"\nallow_private_hooks = false\n',
    )

    config = load_config(tmp_path)

    assert config.failure_mode == "first"
    assert config.allow_private_hooks is False


def test_accepts_dashed_keys(tmp_path):
    write_pyproject(tmp_path, '[tool.specifications]\nfailure-mode = "first"\n')

    assert load_config(str(tmp_path)).failure_mode == "first"


def test_finds_pyproject_in_parent(tmp_path):
    path = write_pyproject(tmp_path, '[tool.specifications]\nfailure_mode = "first"\n')
    nested = tmp_path / "specs" / "contexts"
    nested.mkdir(parents=True)

    assert find_pyproject(nested) == path
    assert load_config(nested).failure_mode == "first"


def test_environment_overrides_file(tmp_path, monkeypatch):
    write_pyproject(tmp_path, '[tool.specifications]\nfailure_mode = "first"\n')
    monkeypatch.setenv("SPECIFICATIONS_FAILURE_MODE", "aggregate")
    monkeypatch.setenv("SPECIFICATIONS_ALLOW_PRIVATE_HOOKS", "false")

    config = load_config(tmp_path)

    assert config.failure_mode == "aggregate"
    assert config.allow_private_hooks is False


def test_rejects_unknown_failure_mode(tmp_path):
    write_pyproject(tmp_path, '[tool.specifications]\nfailure_mode = "all"\n')

    with pytest.raises(ValidationError):
        load_config(tmp_path)


def test_rejects_unknown_keys(tmp_path):
    write_pyproject(tmp_path, '[tool.specifications]\nretries = 3\n')

    with pytest.raises(ValidationError):
        load_config(tmp_path)


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        SpecificationsConfig().failure_mode = "first"
