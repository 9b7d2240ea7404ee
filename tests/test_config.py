import pytest

from perplexity import Client
from perplexity.config.schema import ClientOptions, LoggingConfig, PerplexityConfig
from perplexity.config_manager import ConfigManager, ConfigurationError, get_api_key, load_config


def test_defaults():
    config = load_config()
    assert isinstance(config, PerplexityConfig)
    assert config.client.request_timeout == 30
    assert config.logging.level == "INFO"
    assert config.model == "llama-3.1-sonar-small-128k-online"


def test_load_yaml_with_overrides(tmp_path):
    path = tmp_path / "perplexity.yaml"
    path.write_text(
        "model: llama-3.1-70b-instruct\n"
        "client:\n"
        "  request_timeout: 10\n"
        "logging:\n"
        "  level: debug\n"
    )
    config = ConfigManager().load_config(path, ["client.request_timeout=5"])

    assert config.model == "llama-3.1-70b-instruct"
    assert config.client.request_timeout == 5
    assert config.logging.level == "DEBUG"


def test_load_mapping():
    config = load_config({"client": {"request_timeout": 2.5}})
    assert isinstance(config.client, ClientOptions)
    assert config.client.request_timeout == 2.5


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("source", [
    {"client": {"request_timeout": 0}},
    {"client": {"request_timeout": "soon"}},
    {"logging": {"format": "xml"}},
    {"model": ""},
])
def test_invalid_values(source):
    with pytest.raises(ConfigurationError):
        load_config(source)


def test_option_validation():
    with pytest.raises(ValueError):
        ClientOptions(request_timeout=-1)
    with pytest.raises(ValueError):
        LoggingConfig(level="LOUD")


def test_api_key_from_env(monkeypatch):
    monkeypatch.setenv("PERPLEXITY_API_KEY", "pplx-123")
    assert get_api_key() == "pplx-123"


def test_api_key_missing(monkeypatch):
    monkeypatch.delenv("PERPLEXITY_API_KEY", raising=False)
    with pytest.raises(ConfigurationError):
        get_api_key()


def test_client_from_config():
    config = load_config({"model": "llama-3.1-8b-instruct", "client": {"request_timeout": 7}})
    client = Client.from_config("key", config)
    assert client.model == "llama-3.1-8b-instruct"
    assert client.options.request_timeout == 7
    assert "key" not in repr(client)


def test_config_summary():
    manager = ConfigManager()
    summary = manager.get_config_summary(manager.load_config())
    assert summary["request_timeout"] == 30
    assert summary["logging_file"] == "console-only"


def test_client_ignores_environment(monkeypatch):
    import requests
    captured = {}

    class Resp:
        status_code = 200

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def iter_content(self, chunk_size=1):
            yield b'{}'

    def fake_post(url, data=None, headers=None, timeout=None, stream=False):
        captured['headers'] = headers
        return Resp()

    monkeypatch.setenv("PERPLEXITY_API_KEY", "from-env")
    monkeypatch.setattr(requests, 'post', fake_post)
    from perplexity import ChatCompletionRequest, Message
    Client("explicit", "m").chat_completions(ChatCompletionRequest(messages=[Message(role="user", content="hi")]))

    assert captured['headers']['authorization'] == "Bearer explicit"
