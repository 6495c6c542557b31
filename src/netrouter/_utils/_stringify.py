"""Canonical value-to-string conversion.

Query parameters and multipart text fields go through the same rule so an
endpoint renders a value identically wherever it is placed.
"""

import json
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel


def _to_jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Mapping):
        return {stringify_value(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_jsonable(item) for item in value]
    return stringify_value(value)


def stringify_value(value: Any) -> str:
    """Convert any value to its canonical textual form.

    The conversion is total: every input produces a string.

    Args:
        value: The value to convert.

    Returns:
        str: ``"true"``/``"false"`` for booleans, ``"null"`` for ``None``,
        ISO-8601 for dates and times, compact JSON for models, mappings and
        sequences, and ``str(value)`` for everything else.

    Examples:
        >>> stringify_value(True)
        'true'
        >>> stringify_value([1, "a", None])
        '[1,"a",null]'
    """
    if isinstance(value, str):
        return value
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, Enum):
        return stringify_value(value.value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, BaseModel):
        return value.model_dump_json()
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return json.dumps(
            _to_jsonable(value), separators=(",", ":"), ensure_ascii=False
        )
    return str(value)
