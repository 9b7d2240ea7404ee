"""Perplexity chat completions HTTP client.

Builds the request payload, POSTs it with the bearer token and decodes the
JSON answer into ``ChatCompletionResponse``. One call is one HTTP exchange;
nothing is retried.
"""
import json
import time
from typing import Optional

import pydantic
import requests
from jsonschema import ValidationError as SchemaValidationError
from loguru import logger

from perplexity.config.schema import ClientOptions, PerplexityConfig
from perplexity.constants import API_URL
from perplexity.errors import (
    APIError,
    DecodingError,
    SerializationError,
    TransportError,
    ValidationError,
)
from perplexity.schema import ChatCompletionRequest, ChatCompletionResponse, ValidationErrorBody
from perplexity.validation import validate_chat_payload

READ_CHUNK_SIZE = 1024


class Client:
    """Client for the Perplexity chat completions API.

    Holds the API key, the model used when a request names none, and the
    request timeout. Instances are not modified after construction and may be
    shared between threads.

    Example:
        client = Client(api_key, MODEL_LLAMA_31_SONAR_SMALL_128K_ONLINE)
        request = ChatCompletionRequest(messages=[Message(role="user", content="hi")])
        answer = client.chat_completions(request).get_complete_single_message()
    """

    def __init__(self, api_key: str, model: str, options: Optional[ClientOptions] = None):
        self.api_key = api_key
        self.model = model
        self.options = options or ClientOptions()

    @classmethod
    def from_config(cls, api_key: str, config: PerplexityConfig) -> "Client":
        return cls(api_key, config.model, config.client)

    def __repr__(self) -> str:
        return f"Client(model={self.model!r}, request_timeout={self.options.request_timeout})"

    def _headers(self) -> dict:
        return {
            "accept": "application/json",
            "content-type": "application/json",
            "authorization": f"Bearer {self.api_key}",
        }

    def _effective_timeout(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return self.options.request_timeout
        return min(timeout, self.options.request_timeout)

    def build_payload(self, request: ChatCompletionRequest) -> str:
        """Serialize ``request`` to the JSON body sent on the wire.

        The client's default model is filled in on a copy when the request
        has none; ``request`` itself is left untouched.

        Raises:
            SerializationError: if the payload cannot be encoded or is invalid
        """
        if not request.model:
            request = request.model_copy(update={"model": self.model})

        try:
            payload = request.to_payload()
            validate_chat_payload(payload)
            return json.dumps(payload, allow_nan=False)
        except (SchemaValidationError, pydantic.ValidationError, TypeError, ValueError) as exc:
            raise SerializationError(f"failed to marshal request: {exc}") from exc

    def chat_completions(self, request: ChatCompletionRequest,
                         timeout: Optional[float] = None) -> ChatCompletionResponse:
        """Send a chat completion request.

        Args:
            request (ChatCompletionRequest): Conversation and sampling parameters
            timeout (float, optional): Caller deadline in seconds; the tighter of
                                       this and ``options.request_timeout`` applies

        Returns:
            ChatCompletionResponse: Decoded 200 response

        Raises:
            SerializationError: request could not be encoded
            TransportError: no response was received
            ValidationError: 422 with a structured detail body
            APIError: any other non-200 status
            DecodingError: 200 body does not match the response shape
        """
        data = self.build_payload(request)
        effective_timeout = self._effective_timeout(timeout)
        if effective_timeout <= 0:
            raise TransportError("request failed: deadline exceeded")
        deadline = time.monotonic() + effective_timeout

        logger.debug("Sending chat completion request",
                     model=request.model or self.model,
                     messages=len(request.messages),
                     timeout=effective_timeout)

        try:
            resp = requests.post(API_URL, data=data, headers=self._headers(),
                                 timeout=effective_timeout, stream=True)
        except requests.RequestException as exc:
            raise TransportError(f"request failed: {exc}") from exc

        with resp:
            logger.debug("Chat completion response received", status_code=resp.status_code)
            content = self._read_body(resp, deadline)
            if resp.status_code != 200:
                raise self._error_from_response(resp.status_code, content)
            return self._decode_response(content)

    @staticmethod
    def _read_body(resp: requests.Response, deadline: float) -> bytes:
        """Read the whole body, failing once the overall deadline has passed.

        The requests timeout bounds each socket read; the deadline bounds the
        exchange as a whole.
        """
        if time.monotonic() > deadline:
            raise TransportError("request failed: deadline exceeded")
        chunks = []
        try:
            for chunk in resp.iter_content(chunk_size=READ_CHUNK_SIZE):
                chunks.append(chunk)
                if time.monotonic() > deadline:
                    raise TransportError("request failed: deadline exceeded while reading response")
        except requests.RequestException as exc:
            raise TransportError(f"request failed: {exc}") from exc
        return b"".join(chunks)

    @staticmethod
    def _error_from_response(status_code: int, content: bytes) -> Exception:
        if status_code == 422:
            try:
                body = ValidationErrorBody.model_validate_json(content)
            except pydantic.ValidationError:
                text = content.decode("utf-8", errors="replace")
                return APIError(f"request failed with status {status_code}: {text}", status_code, content)
            return ValidationError(body.detail)

        text = content.decode("utf-8", errors="replace")
        return APIError(f"error: {text}", status_code, content)

    @staticmethod
    def _decode_response(content: bytes) -> ChatCompletionResponse:
        try:
            return ChatCompletionResponse.model_validate_json(content)
        except pydantic.ValidationError as exc:
            raise DecodingError(f"failed to decode response: {exc}") from exc
