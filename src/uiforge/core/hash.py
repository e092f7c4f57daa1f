"""Content hashing for stable, reproducible ids."""

import xxhash


def hash_string(text: str, truncate: int | None = None) -> str:
    """
    xxhash64 hex digest of ``text``.

    Examples:
        >>> len(hash_string("test"))
        16
        >>> len(hash_string("test", truncate=8))
        8
    """
    digest = xxhash.xxh64(text.encode("utf-8")).hexdigest()
    return digest[:truncate] if truncate else digest


def content_id(prefix: str, text: str, length: int = 8) -> str:
    """Short id derived from text, e.g. ``modal-1a2b3c4d``."""
    return f"{prefix}-{hash_string(text, truncate=length)}"


__all__ = [
    "hash_string",
    "content_id",
]
