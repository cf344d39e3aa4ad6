import json

import pytest
from click.testing import CliRunner


def assert_json_partial_object(output, keys, expected):
    """Assert that the given keys of a JSON document match ``expected``."""
    actual = json.loads(output)
    missing = [key for key in keys if key not in actual]
    assert not missing, f"missing keys {missing} in {actual}"
    assert {key: actual[key] for key in keys} == {key: expected[key] for key in keys}


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def json_partial():
    """Provides the partial-object JSON assertion helper."""
    return assert_json_partial_object


@pytest.fixture
def temp_project(tmp_path, monkeypatch):
    """Create a temporary project directory and change to it."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture(autouse=True)
def clear_option_envvars(monkeypatch):
    """Keep host environment variables out of option defaults."""
    monkeypatch.delenv("MISE_DEVCONTAINER_NAME", raising=False)
    monkeypatch.delenv("MISE_DEVCONTAINER_IMAGE", raising=False)


@pytest.fixture
def default_devcontainer():
    """Expected output of a default invocation."""
    return {
        "name": "mise",
        "image": "mcr.microsoft.com/devcontainers/base:ubuntu",
        "features": {"ghcr.io/devcontainers-extra/features/mise:1": {}},
        "customizations": {"vscode": {"extensions": ["hverlin.mise-vscode"]}},
        "mounts": [],
        "container_env": {},
    }
