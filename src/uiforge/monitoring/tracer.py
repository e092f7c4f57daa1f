"""
Operation Tracing
Timed spans for pipeline stages, reported through structured logs
"""

import time
from contextlib import contextmanager
from typing import Any, Iterator

from ..core.logging_config import get_logger

logger = get_logger(__name__)

SLOW_OPERATION_SECONDS = 1.0


@contextmanager
def trace_operation(operation: str, **fields: Any) -> Iterator[dict[str, Any]]:
    """
    Time a block and log how it ended.

    The yielded dict starts as ``fields``; keys added inside the block
    (a plan type, a node count) are included in the closing log line.

    Args:
        operation: Name of the operation
        **fields: Context logged at start and end
    """
    span = dict(fields)
    start = time.perf_counter()
    logger.debug("operation_start", operation=operation, **span)

    try:
        yield span
    except Exception as e:
        logger.error(
            "operation_error",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=round((time.perf_counter() - start) * 1000, 3),
            **span,
        )
        raise

    duration = time.perf_counter() - start
    log = logger.warning if duration > SLOW_OPERATION_SECONDS else logger.debug
    log(
        "operation_slow" if duration > SLOW_OPERATION_SECONDS else "operation_end",
        operation=operation,
        duration_ms=round(duration * 1000, 3),
        **span,
    )
