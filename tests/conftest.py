import subprocess
from unittest.mock import MagicMock, patch

import pytest

from auth_source_kwallet.config import Config
from auth_source_kwallet.registry import BackendRegistry
from auth_source_kwallet.search import KWalletSource


@pytest.fixture
def mock_config():
    return Config()


@pytest.fixture
def mock_which():
    with patch(
        "auth_source_kwallet.invoker.shutil.which",
        side_effect=lambda name: f"/usr/bin/{name}",
    ) as mock:
        yield mock


@pytest.fixture
def mock_run(mock_which):
    """Patch subprocess.run; set ``stdout``/``returncode`` through ``reply``."""
    with patch("auth_source_kwallet.invoker.subprocess.run") as mock:
        mock.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="")
        yield mock


@pytest.fixture
def reply(mock_run):
    def _reply(stdout="", returncode=0):
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=returncode, stdout=stdout
        )

    return _reply


@pytest.fixture
def warnings():
    return []


@pytest.fixture
def source(mock_config, warnings):
    return KWalletSource(_config=mock_config, warn=warnings.append)


@pytest.fixture
def registry():
    return BackendRegistry()


@pytest.fixture
def get_argv():
    def _get(mock_run):
        return [c.args[0] for c in mock_run.call_args_list]

    return _get


@pytest.fixture
def handler():
    return MagicMock(return_value=[])
