"""Schema validation helpers for function calling.

The completion client sends function definitions and returns function calls
without inspecting either. These helpers are for callers that want to check a
parameter schema before advertising it, or to decode and validate the raw
arguments of a call they received.
"""
import json
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator, ValidationError, validate

from providers.schema import FunctionCall, FunctionDefinition, Schema


def check_parameter_schema(schema: Schema) -> bool:
    """Check that ``schema`` is a valid JSON Schema document.

    Raises:
        jsonschema.SchemaError: when the schema is not valid JSON Schema.

    Returns:
        True when valid.
    """
    Draft7Validator.check_schema(schema.to_dict())
    return True


def parse_function_arguments(call: FunctionCall,
                             definition: Optional[FunctionDefinition] = None) -> Dict[str, Any]:
    """Decode the raw arguments of ``call``.

    An empty argument string decodes to ``{}``. When ``definition`` is given
    the arguments are validated against its parameter schema.

    Raises:
        ValueError: on malformed JSON, a non-object payload, or a definition
            for a different function.
        jsonschema.ValidationError: when the arguments do not match the schema.
    """
    if definition is not None and definition.name != call.name:
        raise ValueError(f"function call {call.name!r} does not match definition {definition.name!r}")

    raw = call.arguments.strip()
    try:
        args = json.loads(raw) if raw else {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid arguments for {call.name}: {exc}") from exc
    if not isinstance(args, dict):
        raise ValueError(f"Invalid arguments for {call.name}: expected a JSON object")

    if definition is not None:
        try:
            validate(instance=args, schema=definition.parameters.to_dict())
        except ValidationError as exc:
            # Re-raise with a clear message for upstream handling
            raise ValidationError(f"Invalid arguments for {call.name}: {exc.message}") from exc

    return args
