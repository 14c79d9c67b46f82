"""Params serialization — turns arbitrary values into JSON-compatible data.

The standard encoder handles plain containers and rejects ``nan`` and the
infinities (``allow_nan=False``).  Anything it does not know, such as models,
dataclasses, datetimes, UUIDs or enums, is handed to pydantic-core.  The
result is then dumped once more inside a request envelope, so anything
accepted here is guaranteed to serialize again in ``Request.prepare()``.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from jsonrpc_frame.errors import SerializationError
from jsonrpc_frame.models import JsonRpcRequest


def to_json_value(value: Any) -> Any:
    """Return *value* as plain JSON data (dict, list, str, int, float, bool, None).

    Raises
    ------
    SerializationError
        If *value* has a type with no JSON form, contains a non-finite float
        or a lone surrogate, or is nested too deeply to encode.
    """
    try:
        text = json.dumps(value, allow_nan=False, ensure_ascii=False, default=to_jsonable_python)
        converted = json.loads(text)
        JsonRpcRequest(id=0, method="", params=converted).to_json()
    except (PydanticSerializationError, RecursionError, TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc
    return converted
