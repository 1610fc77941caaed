import pytest

from config.schema import AppConfig, LoggingConfig, OpenAIConfig
from config_manager import ConfigManager
from providers.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for var in ('OPENAI_API_BASE', 'OPENAI_API_KEY', 'OPENAI_API_MODEL'):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_openai_config_normalizes_empty_values():
    cfg = OpenAIConfig(base_url='', api_key='', model='  ')
    assert cfg.base_url is None
    assert cfg.api_key is None
    assert cfg.model is None


def test_openai_config_rejects_non_positive_timeout():
    with pytest.raises(ValueError):
        OpenAIConfig(timeout=0)


def test_openai_config_from_env():
    cfg = OpenAIConfig.from_env({
        'OPENAI_API_BASE': 'http://localhost:8080',
        'OPENAI_API_KEY': 'sk-test',
        'OPENAI_API_MODEL': 'gpt-4',
        'UNRELATED': 'x',
    })
    assert cfg == OpenAIConfig(base_url='http://localhost:8080', api_key='sk-test', model='gpt-4')


def test_logging_config_validation():
    assert LoggingConfig(level='debug').level == 'DEBUG'
    with pytest.raises(ValueError):
        LoggingConfig(level='LOUD')
    with pytest.raises(ValueError):
        LoggingConfig(format='xml')


def test_load_default_config_from_environment(clean_env):
    clean_env.setenv('OPENAI_API_BASE', 'http://localhost:11434')
    clean_env.setenv('OPENAI_API_KEY', 'sk-env')

    cfg = ConfigManager().load_config()

    assert isinstance(cfg, AppConfig)
    assert cfg.openai.base_url == 'http://localhost:11434'
    assert cfg.openai.api_key == 'sk-env'
    assert cfg.openai.model is None
    assert cfg.logging.level == 'INFO'


def test_load_config_unset_environment(clean_env):
    cfg = ConfigManager().load_config()
    assert cfg.openai == OpenAIConfig()


def test_load_config_with_overrides(clean_env):
    cfg = ConfigManager().load_config('default', ['openai.model=gpt-4', 'openai.timeout=30', 'logging.level=debug'])
    assert cfg.openai.model == 'gpt-4'
    assert cfg.openai.timeout == 30.0
    assert cfg.logging.level == 'DEBUG'


def test_load_config_invalid_value(clean_env):
    with pytest.raises(ConfigurationError):
        ConfigManager().load_config('default', ['logging.level=LOUD'])


def test_load_missing_config(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigManager(config_dir=tmp_path).load_config('missing')


def test_config_summary_hides_key():
    cfg = AppConfig(openai=OpenAIConfig(api_key='sk-secret'))
    summary = ConfigManager().get_config_summary(cfg)
    assert summary['openai_key_set'] is True
    assert 'sk-secret' not in str(summary)


def test_create_override_list():
    overrides = ConfigManager.create_override_list({
        'openai': {'model': 'gpt-4', 'timeout': None},
        'logging.level': 'DEBUG',
    })
    assert overrides == ['openai.model=gpt-4', 'openai.timeout=null', 'logging.level=DEBUG']
