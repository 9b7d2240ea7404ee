import json

import requests
from loguru import logger

from perplexity import ChatCompletionRequest, Client, Message
from perplexity.config.schema import LoggingConfig
from perplexity.logging_manager import LoggingManager, get_logger, setup_logging


class DummyResp:
    status_code = 200
    content = json.dumps({"choices": []}).encode()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def iter_content(self, chunk_size=1):
        yield self.content


def test_file_logging_captures_client_records(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "client.log"
    manager = LoggingManager()
    manager.setup_logging(LoggingConfig(level="DEBUG", file=str(log_file), colorize=False))
    try:
        monkeypatch.setattr(requests, 'post', lambda url, data=None, headers=None, timeout=None, stream=False: DummyResp())
        Client('super-secret', 'model-x').chat_completions(
            ChatCompletionRequest(messages=[Message(role="user", content="hi")]))
        logger.complete()

        text = log_file.read_text()
        assert "Sending chat completion request" in text
        assert "Chat completion response received" in text
        assert "super-secret" not in text
        assert len(manager.handler_ids) == 2
    finally:
        logger.remove()


def test_json_file_logging(tmp_path):
    log_file = tmp_path / "client.jsonl"
    setup_logging(LoggingConfig(level="INFO", format="json", file=str(log_file)))
    try:
        get_logger().info("hello")
        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["record"]["message"] == "hello"
    finally:
        logger.remove()


def test_console_formats():
    manager = LoggingManager()
    assert manager._get_console_format("simple") == "<level>{level}</level> - {message}"
    assert "{line}" in manager._get_console_format("detailed")
