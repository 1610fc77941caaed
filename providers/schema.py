from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Literal, Optional, Union


Role = Literal["system", "user", "assistant", "function"]


class Schema(BaseModel):
    """JSON-Schema-like descriptor for function parameters.

    Unset fields are left out of the serialized form, so a schema read back
    from a request document compares equal to the one that built it.
    """
    model_config = ConfigDict(frozen=True)

    type: str
    description: Optional[str] = None
    properties: Optional[Dict[str, "Schema"]] = None
    required: Optional[List[str]] = None
    enum: Optional[List[str]] = None
    items: Optional["Schema"] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class FunctionDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: Schema


class FunctionCall(BaseModel):
    """A function invocation requested by the model.

    ``arguments`` is the raw JSON string exactly as the service sent it.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    arguments: str = ""


class Message(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    role: Role
    content: Optional[str] = None
    # Set on "function" messages carrying a function result
    name: Optional[str] = None
    function_call: Optional[FunctionCall] = None


MessageLike = Union[Message, Dict[str, Any]]
FunctionLike = Union[FunctionDefinition, Dict[str, Any]]


class ChatCompletionRequest(BaseModel):
    model: str
    messages: List[Message]
    functions: Optional[List[FunctionDefinition]] = None

    @field_validator("functions", mode="after")
    @classmethod
    def drop_empty_functions(cls, functions):
        # An empty list is never sent; the field is left out instead.
        return functions or None

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class ErrorDetail(BaseModel):
    message: Optional[str] = None


class Choice(BaseModel):
    message: Message

    @field_validator("message", mode="before")
    @classmethod
    def known_message_fields(cls, message):
        # Replies carry fields this client does not model (refusal, tool_calls, ...)
        if isinstance(message, dict):
            return {k: v for k, v in message.items() if k in Message.model_fields}
        return message


class ChatCompletionResponse(BaseModel):
    choices: List[Choice] = Field(default_factory=list)
    error: Optional[ErrorDetail] = None

    @field_validator("choices", mode="before")
    @classmethod
    def null_choices(cls, choices):
        return [] if choices is None else choices

    @field_validator("error", mode="before")
    @classmethod
    def plain_error(cls, error):
        # Some compatible servers send the error as a bare string
        if isinstance(error, str):
            return {"message": error}
        return error

    @property
    def error_message(self) -> str:
        if self.error is None:
            return ""
        return self.error.message or ""

    @classmethod
    def from_json(cls, body: Union[str, bytes]) -> "ChatCompletionResponse":
        return cls.model_validate_json(body)
