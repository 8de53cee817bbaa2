"""Output formatting for the policy/quote query tool."""

from __future__ import annotations

import base64
import json
from decimal import Decimal
from typing import Any, Dict, Optional

from boto3.dynamodb.types import Binary
from rich.console import Console

from .errors import PresentationError
from .utils import debug_print

JSON_INDENT = 2


def _decimal_to_number(value: Decimal):
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def to_json_compatible(value: Any) -> Any:
    """Normalize deserialized DynamoDB values for JSON encoding.

    Examples:
        Decimal("3") -> 3
        Decimal("1.5") -> 1.5
        {"b", "a"} -> ["a", "b"]
        Binary(b"hi") -> "aGk="
    """
    if isinstance(value, dict):
        return {key: to_json_compatible(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted(to_json_compatible(item) for item in value)
    if isinstance(value, Decimal):
        return _decimal_to_number(value)
    if isinstance(value, Binary):
        value = value.value
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def format_json_output(record: Optional[Dict[str, Any]]) -> str:
    """Format a record as indented, uncolored JSON"""
    try:
        return json.dumps(to_json_compatible(record or {}), indent=JSON_INDENT)
    except (TypeError, ValueError) as e:
        raise PresentationError(f"Failed to marshal JSON: {e}")


def print_record(record: Optional[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """Print a record as syntax-highlighted JSON on stdout.

    Highlighting follows the console: colors on a terminal, plain text when
    piped or when NO_COLOR is set.
    """
    console = console or Console()
    output = format_json_output(record)
    debug_print(f"Rendering record with {len(record or {})} top-level fields")
    console.print_json(output, indent=JSON_INDENT)
