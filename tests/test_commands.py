from unittest.mock import patch

import cappa
import pytest
import tomli_w

from auth_source_kwallet.commands.config import ConfigCMD
from auth_source_kwallet.commands.search import ListEntries, Search
from auth_source_kwallet.config import Config


@pytest.fixture(autouse=True)
def patch_config_read(mock_config):
    with patch("auth_source_kwallet.config.Config.read", return_value=mock_config):
        yield


def test_search_prints_password(reply, capsys):
    reply("hunter2\n")
    Search(label="github")()
    out = capsys.readouterr().out
    assert "github" in out
    assert "hunter2" in out


def test_search_prints_map_fields(reply, capsys):
    reply('{"login": "alice", "password": "s3cr3t"}')
    Search(user="alice", host="example.com")()
    out = capsys.readouterr().out
    assert "map:login" in out
    assert "s3cr3t" in out


def test_search_not_found_exits(reply):
    reply("Failed to read entry alice@example.com")
    with pytest.raises(cappa.Exit) as exc_info:
        Search(user="alice", host="example.com")()
    assert exc_info.value.code == 1


def test_search_requires_a_key():
    with pytest.raises(cappa.Exit):
        Search(user="alice")()


def test_list_prints_names(reply, mock_run, get_argv, capsys):
    reply("site1\nsite2\n")
    ListEntries(folder="Work")()
    assert capsys.readouterr().out.split() == ["site1", "site2"]
    assert get_argv(mock_run)[0][3] == "Work"


def test_config_init_writes_sample(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    ConfigCMD().init()
    assert (tmp_path / "kwallet.toml").read_text() == tomli_w.dumps(Config().to_dict())


def test_config_init_refuses_overwrite(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "kwallet.toml").write_text('wallet = "kdewallet"\n')
    with pytest.raises(cappa.Exit):
        ConfigCMD().init()


def test_config_show(capsys):
    ConfigCMD().show()
    out = capsys.readouterr().out
    assert "kwallet-query" in out
    assert "key_separator" in out


def test_list_failure_exits(reply):
    reply("Wallet Passwords not found")
    with pytest.raises(cappa.Exit) as exc_info:
        ListEntries()()
    assert exc_info.value.code == 1
