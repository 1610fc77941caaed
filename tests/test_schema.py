import json

import pytest
from pydantic import ValidationError

from providers.openai_client import build_messages
from providers.schema import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    FunctionDefinition,
    Message,
    Schema,
)


def order_schema():
    return Schema(
        type="object",
        description="An order to place",
        properties={
            "size": Schema(type="string", description="Cup size", enum=["small", "medium", "large"]),
            "toppings": Schema(type="array", items=Schema(type="string", enum=["milk", "sugar"])),
            "address": Schema(
                type="object",
                properties={"street": Schema(type="string"), "zip": Schema(type="string")},
                required=["street"],
            ),
        },
        required=["size", "address"],
    )


def test_schema_round_trip_through_request():
    schema = order_schema()
    request = ChatCompletionRequest(
        model="gpt-3.5-turbo-0613",
        messages=[Message(role="user", content="coffee please")],
        functions=[FunctionDefinition(name="place_order", description="Place an order", parameters=schema)],
    )

    parsed = ChatCompletionRequest.model_validate_json(request.to_json())

    assert parsed.functions[0].parameters == schema
    assert parsed.functions[0].parameters.properties["toppings"].items.enum == ["milk", "sugar"]
    assert parsed.functions[0].parameters.properties["address"].required == ["street"]


def test_schema_serialization_omits_unset_fields():
    data = Schema(type="array", items=Schema(type="integer")).to_dict()
    assert data == {"type": "array", "items": {"type": "integer"}}


def test_empty_functions_left_out():
    request = ChatCompletionRequest(model="m", messages=[Message(role="user", content="hi")], functions=[])
    assert request.functions is None
    assert "functions" not in json.loads(request.to_json())


def test_message_is_immutable():
    msg = Message(role="user", content="hi")
    with pytest.raises(ValidationError):
        msg.content = "changed"


def test_message_rejects_unknown_role():
    with pytest.raises(ValidationError):
        Message(role="robot", content="beep")


def test_build_messages_keeps_history_between_prompts():
    history = [Message(role="user", content="a"), Message(role="assistant", content="b")]
    messages = build_messages("sys", "c", history)

    assert [m.role for m in messages] == ["system", "user", "assistant", "user"]
    assert messages[1] is history[0]
    assert messages[2] is history[1]
    assert messages[-1].content == "c"


def test_response_ignores_unknown_fields():
    body = json.dumps({
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": "hi"}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
    })
    response = ChatCompletionResponse.from_json(body)

    assert response.choices[0].message == Message(role="assistant", content="hi")
    assert response.error_message == ""


def test_response_null_choices_and_plain_error():
    response = ChatCompletionResponse.from_json('{"choices": null, "error": "bad gateway"}')
    assert response.choices == []
    assert response.error_message == "bad gateway"


def test_response_error_without_message():
    response = ChatCompletionResponse.from_json(b'{"error": {"type": "server_error", "message": null}}')
    assert response.error_message == ""


def test_response_rejects_malformed_json():
    with pytest.raises(ValidationError):
        ChatCompletionResponse.from_json(b"not json")
