"""Schema validation for outgoing chat completion payloads.

Provides the JSON Schema of the request body and a helper to validate a
serialized payload before it is sent.
"""
from jsonschema import validate, ValidationError


CHAT_COMPLETION_SCHEMA = {
    "type": "object",
    "required": ["model", "messages"],
    "properties": {
        "model": {"type": "string", "minLength": 1},
        "messages": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["role", "content"],
                "properties": {
                    "role": {"type": "string", "enum": ["system", "user", "assistant"]},
                    "content": {"type": "string"}
                },
                "additionalProperties": False
            }
        },
        "max_tokens": {"type": "integer", "minimum": 1},
        "temperature": {"type": "number"},
        "top_p": {"type": "number"},
        "top_k": {"type": "integer"},
        "frequency_penalty": {"type": "number"},
        "presence_penalty": {"type": "number"}
    },
    "additionalProperties": False
}


def validate_chat_payload(payload: dict) -> bool:
    """Validate a payload against the chat completion request schema.

    Raises:
        jsonschema.ValidationError: on invalid payloads with a helpful message.

    Returns:
        True when valid.
    """
    try:
        validate(instance=payload, schema=CHAT_COMPLETION_SCHEMA)
    except ValidationError as exc:
        raise ValidationError(f"Invalid chat completion payload: {exc.message}") from exc

    return True
