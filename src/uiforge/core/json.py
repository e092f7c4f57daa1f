"""Compact JSON encoding for prop values.

orjson covers the common case. msgspec picks up values orjson rejects
(sets, frozensets), and the stdlib encoder is last for integers beyond
64 bits and anything else, stringified.
"""

from typing import Any
import json

import msgspec
import orjson


_ORJSON_OPTIONS = orjson.OPT_NON_STR_KEYS
_msgspec_encoder = msgspec.json.Encoder()


def safe_json_dumps(obj: Any) -> str:
    """
    Encode ``obj`` as compact JSON text.

    No whitespace between tokens and non-ASCII characters kept as-is,
    whichever backend does the encoding.
    """
    try:
        return orjson.dumps(obj, option=_ORJSON_OPTIONS).decode("utf-8")
    except TypeError:
        pass

    try:
        return _msgspec_encoder.encode(obj).decode("utf-8")
    except (TypeError, ValueError, OverflowError):
        pass

    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False, default=str)
