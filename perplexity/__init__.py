"""Client for the Perplexity chat completions API."""
from perplexity.client import Client
from perplexity.config.schema import ClientOptions
from perplexity.constants import *  # noqa: F401,F403
from perplexity.errors import (
    APIError,
    DecodingError,
    IncompleteChoiceError,
    NotSingleChoiceError,
    PerplexityError,
    ResponseError,
    SerializationError,
    TransportError,
    ValidationError,
)
from perplexity.schema import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    Choice,
    Message,
    Usage,
    ValidationErrorBody,
    ValidationErrorItem,
)
