"""Tests for the YAML configuration file and runtime settings."""

from __future__ import annotations

import pytest
import yaml

from masstdb.config import AppConfig, get_settings, load_config, load_default_config, save_config
from masstdb.exceptions import ConfigurationError
from masstdb.models import BackupType


def test_missing_file_returns_defaults(tmp_path) -> None:
    config = load_config(tmp_path / 'absent.yaml')
    assert config == AppConfig()
    assert config.default_database.host == 'localhost'
    assert config.storage.local_path == './backups'
    assert config.backup.compress is True
    assert config.backup.default_type is BackupType.FULL


def test_load_partial_file(tmp_path) -> None:
    path = tmp_path / 'masstdb.yaml'
    path.write_text(
        'default_database:\n'
        '  type: mysql\n'
        '  host: db.internal\n'
        '  port: 3307\n'
        'backup:\n'
        '  compress: false\n'
    )

    config = load_config(path)

    assert config.default_database.type == 'mysql'
    assert config.default_database.port == 3307
    assert config.backup.compress is False
    assert config.storage.local_path == './backups'


def test_empty_file_returns_defaults(tmp_path) -> None:
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert load_config(path) == AppConfig()


@pytest.mark.parametrize(
    'content',
    ['default_database: [unclosed', '- just\n- a list\n', 'backup:\n  default_type: weekly\n'],
)
def test_invalid_file_raises(tmp_path, content: str) -> None:
    path = tmp_path / 'bad.yaml'
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_save_and_reload(tmp_path) -> None:
    config = AppConfig.model_validate({
        'default_database': {'type': 'postgres', 'username': 'admin', 'password': 'secret'},
        'storage': {'local_path': '/srv/backups', 'cloud': {'provider': 's3', 'bucket': 'dumps'}},
        'backup': {'default_type': 'full'},
    })
    path = tmp_path / 'out.yaml'

    save_config(config, path)

    assert load_config(path) == config
    raw = yaml.safe_load(path.read_text())
    assert raw['storage']['cloud']['bucket'] == 'dumps'
    assert raw['backup']['default_type'] == 'full'


def test_default_lookup_prefers_current_directory(tmp_path, monkeypatch) -> None:
    home = tmp_path / 'home'
    work = tmp_path / 'work'
    home.mkdir()
    work.mkdir()
    (home / '.masstdb.yaml').write_text('storage:\n  local_path: /home-backups\n')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.chdir(work)

    assert load_default_config().storage.local_path == '/home-backups'

    (work / '.masstdb.yaml').write_text('storage:\n  local_path: /work-backups\n')
    assert load_default_config().storage.local_path == '/work-backups'


def test_settings_from_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('MASSTDB_CONNECTION_TEST_TIMEOUT', '5')
    monkeypatch.setenv('MASSTDB_TOOLS_BIN_PATH', '/opt/tools/bin')
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.connection_test_timeout == 5
    assert settings.tools_bin_path == '/opt/tools/bin'
    assert settings.log_level == 'INFO'
