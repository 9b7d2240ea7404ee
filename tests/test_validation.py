import pytest
from jsonschema import ValidationError

from perplexity.validation import validate_chat_payload


def test_validate_valid_payload():
    payload = {"model": "llama-3.1-8b-instruct", "messages": [{"role": "user", "content": "hi"}], "top_k": 3}
    assert validate_chat_payload(payload) is True


def test_validate_missing_model():
    payload = {"messages": [{"role": "user", "content": "hi"}]}
    with pytest.raises(ValidationError):
        validate_chat_payload(payload)


def test_validate_empty_model():
    with pytest.raises(ValidationError):
        validate_chat_payload({"model": "", "messages": []})


def test_validate_unknown_role():
    payload = {"model": "m", "messages": [{"role": "tool", "content": "hi"}]}
    with pytest.raises(ValidationError):
        validate_chat_payload(payload)


def test_validate_non_positive_max_tokens():
    with pytest.raises(ValidationError, match="Invalid chat completion payload"):
        validate_chat_payload({"model": "m", "messages": [], "max_tokens": -1})
