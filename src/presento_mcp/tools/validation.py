"""Argument validation against a tool's declared fields.

No coercion between kinds and no clamping: anything that does not fit
the schema is rejected with ``InvalidParams``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from presento_mcp.core.errors import ProtocolError

if TYPE_CHECKING:
    from presento_mcp.tools.base import FieldSpec, ToolDefinition


def _check_value(spec: FieldSpec, value: Any) -> None:
    """Raise ``InvalidParams`` if *value* does not satisfy *spec*."""
    if spec.kind == "integer":
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"Argument '{spec.name}' must be an integer"
            raise ProtocolError.invalid_params(msg)
        if spec.minimum is not None and value < spec.minimum:
            msg = f"Argument '{spec.name}' must be >= {spec.minimum}"
            raise ProtocolError.invalid_params(msg)
        if spec.maximum is not None and value > spec.maximum:
            msg = f"Argument '{spec.name}' must be <= {spec.maximum}"
            raise ProtocolError.invalid_params(msg)
        return

    if not isinstance(value, str):
        msg = f"Argument '{spec.name}' must be a string"
        raise ProtocolError.invalid_params(msg)

    if spec.kind == "enum":
        if value not in spec.choices:
            msg = f"Argument '{spec.name}' must be one of: {', '.join(spec.choices)}"
            raise ProtocolError.invalid_params(msg)
        return

    if spec.min_length is not None and len(value) < spec.min_length:
        if spec.min_length == 1:
            msg = f"Argument '{spec.name}' must not be empty"
        else:
            msg = f"Argument '{spec.name}' must be at least {spec.min_length} characters"
        raise ProtocolError.invalid_params(msg)


def validate(definition: ToolDefinition, args: Mapping[str, Any] | None) -> dict[str, Any]:
    """Check *args* against *definition* and fill in defaults.

    ``None`` values count as absent.  Keys not declared by the tool are
    dropped from the result.

    Returns:
        A new dict holding exactly the declared fields that are present
        after defaulting.

    Raises:
        ProtocolError: ``InvalidParams`` on a missing required field or a
            value of the wrong kind or out of bounds.
    """
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        msg = "Arguments must be an object"
        raise ProtocolError.invalid_params(msg)

    validated: dict[str, Any] = {}
    for spec in definition.fields:
        value = args.get(spec.name)
        if value is None:
            if spec.has_default:
                validated[spec.name] = spec.default
                continue
            if spec.required:
                msg = f"Missing required argument: {spec.name}"
                raise ProtocolError.invalid_params(msg)
            continue
        _check_value(spec, value)
        validated[spec.name] = value
    return validated
