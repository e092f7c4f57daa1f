"""ID Generation.

ULID-based request ids for log correlation. Version ids are plain
monotonic integers owned by the version store.
"""

from typing import NewType
from ulid import ULID

RequestID = NewType("RequestID", str)
"""Generation request identifier"""


class Prefix:
    """ID prefix constants."""

    REQUEST = "req"


def new_request_id() -> RequestID:
    """Generate new request ID."""
    return RequestID(f"{Prefix.REQUEST}_{ULID()}")


def is_request_id(id_str: str) -> bool:
    """Check if ID is a well-formed request ID."""
    prefix, _, ulid_part = id_str.partition("_")
    if prefix != Prefix.REQUEST or len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part)
        return True
    except ValueError:
        return False
