"""Black-box checks of ``generate devcontainer`` run in a subprocess."""

import json
import os
import subprocess
import sys

import pytest


@pytest.fixture
def run_cli(tmp_path):
    env = {k: v for k, v in os.environ.items()
           if k not in ('MISE_DEVCONTAINER_NAME', 'MISE_DEVCONTAINER_IMAGE')}

    def run(*args):
        result = subprocess.run(
            [sys.executable, '-m', 'mise_devcontainer', *args],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            check=True
        )
        return result

    return run


def test_default(run_cli, json_partial):
    json_partial(run_cli('generate', 'devcontainer').stdout,
                 ['name', 'image', 'features', 'mounts', 'container_env'], {
        'name': 'mise',
        'image': 'mcr.microsoft.com/devcontainers/base:ubuntu',
        'features': {'ghcr.io/devcontainers-extra/features/mise:1': {}},
        'mounts': [],
        'container_env': {},
    })


def test_name_and_image(run_cli, json_partial):
    json_partial(run_cli('generate', 'devcontainer', '--name', 'test', '--image', 'testimage:latest').stdout,
                 ['name', 'image', 'features', 'mounts', 'container_env'], {
        'name': 'test',
        'image': 'testimage:latest',
        'features': {'ghcr.io/devcontainers-extra/features/mise:1': {}},
        'mounts': [],
        'container_env': {},
    })


def test_mount_mise_data(run_cli, json_partial):
    json_partial(run_cli('generate', 'devcontainer', '--mount-mise-data').stdout,
                 ['name', 'image', 'features', 'mounts', 'container_env'], {
        'name': 'mise',
        'image': 'mcr.microsoft.com/devcontainers/base:ubuntu',
        'features': {'ghcr.io/devcontainers-extra/features/mise:1': {}},
        'mounts': [{'source': 'mise-data-volume', 'target': '/mnt/mise-data', 'type': 'volume'}],
        'container_env': {'MISE_DATA_VOLUME': '/mnt/mise-data'},
    })


def test_verbose_logs_stay_off_stdout(run_cli):
    result = run_cli('-vv', 'generate', 'devcontainer')

    assert json.loads(result.stdout)['name'] == 'mise'
    assert 'Generated devcontainer' in result.stderr


def test_write_prints_nothing_on_stdout(run_cli, tmp_path):
    result = run_cli('generate', 'devcontainer', '--write')

    assert result.stdout == ''
    assert 'Wrote' in result.stderr
    assert (tmp_path / '.devcontainer' / 'devcontainer.json').exists()
