import pytest

from ecdict_api.config import Settings

ENV_NAMES = ['ECDICT_DB_PATH', 'ECDICT_HOST', 'ECDICT_PORT', 'ECDICT_POOL_SIZE', 'ECDICT_LOG_LEVEL', 'ECDICT_CORS_ORIGINS']

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)

def test_defaults_match_fixed_deployment():
    settings = Settings.from_env()
    assert settings.db_path == './stardict.db'
    assert (settings.host, settings.port) == ('0.0.0.0', 8000)
    assert settings.pool_size == 16
    assert settings.cors_origins == ('*',)

def test_reads_environment(monkeypatch):
    monkeypatch.setenv('ECDICT_DB_PATH', '/data/ecdict.db')
    monkeypatch.setenv('ECDICT_PORT', '9000')
    monkeypatch.setenv('ECDICT_POOL_SIZE', '4')
    monkeypatch.setenv('ECDICT_LOG_LEVEL', 'debug')
    monkeypatch.setenv('ECDICT_CORS_ORIGINS', 'http://a.test, http://b.test')
    settings = Settings.from_env()
    assert settings.db_path == '/data/ecdict.db'
    assert settings.port == 9000
    assert settings.pool_size == 4
    assert settings.log_level == 'DEBUG'
    assert settings.cors_origins == ('http://a.test', 'http://b.test')

@pytest.mark.parametrize('name, value', [
    ('ECDICT_PORT', 'eighty'),
    ('ECDICT_POOL_SIZE', 'many'),
    ('ECDICT_POOL_SIZE', '0'),
])
def test_rejects_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Settings.from_env()
