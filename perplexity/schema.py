"""pydantic models for the chat completion wire format."""
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from perplexity.constants import FINISH_REASON_STOP
from perplexity.errors import IncompleteChoiceError, NotSingleChoiceError


# Numeric request fields dropped from the payload when left at zero
OPTIONAL_NUMERIC_FIELDS = (
    "max_tokens",
    "temperature",
    "top_p",
    "top_k",
    "frequency_penalty",
    "presence_penalty",
)


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Conversation plus sampling parameters.

    An empty ``model`` means "use the client's default model".
    """

    model: str = ""
    messages: List[Message] = Field(default_factory=list)
    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    top_k: int = 0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready dict, omitting zero-valued optional numbers."""
        payload = self.model_dump(mode="json")
        for name in OPTIONAL_NUMERIC_FIELDS:
            if payload.get(name) == 0:
                payload.pop(name, None)
        return payload


# Response side mirrors lenient decoding: absent or null fields take zero
# values, unknown fields are ignored, numbers are never parsed from strings.

class WireModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _null_as_zero(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ResponseMessage(WireModel):
    role: str = ""
    content: str = ""


class Choice(WireModel):
    message: ResponseMessage = Field(default_factory=ResponseMessage)
    finish_reason: str = ""
    index: StrictInt = 0


class Usage(WireModel):
    prompt_tokens: StrictInt = 0
    completion_tokens: StrictInt = 0
    total_tokens: StrictInt = 0


class ChatCompletionResponse(WireModel):
    id: str = ""
    object: str = ""
    created: StrictInt = 0
    model: str = ""
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    def is_single(self) -> bool:
        return len(self.choices) == 1

    def is_complete(self) -> bool:
        # Any choice finishing with "stop" counts, not only the first one.
        return any(choice.finish_reason == FINISH_REASON_STOP for choice in self.choices)

    def get_complete_single_message(self) -> str:
        """Return the content of the only choice.

        Raises:
            NotSingleChoiceError: when the response does not hold exactly one choice
            IncompleteChoiceError: when no choice finished with "stop"
        """
        if not self.is_single():
            raise NotSingleChoiceError(len(self.choices))
        if not self.is_complete():
            raise IncompleteChoiceError()
        return self.choices[0].message.content


class ValidationErrorItem(WireModel):
    loc: List[Union[int, str]] = Field(default_factory=list)
    msg: str = ""
    type: str = ""


class ValidationErrorBody(WireModel):
    detail: List[ValidationErrorItem] = Field(default_factory=list)
