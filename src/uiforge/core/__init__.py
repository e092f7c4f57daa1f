"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .registry import ComponentKind, ALLOWED_COMPONENTS, resolve_kind
from .validate import (
    ValidationError,
    InvalidComponent,
    InvalidTreeStructure,
    ValidationResult,
    GenerateRequest,
    TreeValidator,
    sanitize_input,
    validate_tree,
    check_tree,
)
from .logging_config import configure_logging, get_logger, bound_context
from .json import safe_json_dumps
from .hash import hash_string, content_id


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Registry
    "ComponentKind",
    "ALLOWED_COMPONENTS",
    "resolve_kind",
    # Validation
    "ValidationError",
    "InvalidComponent",
    "InvalidTreeStructure",
    "ValidationResult",
    "GenerateRequest",
    "TreeValidator",
    "sanitize_input",
    "validate_tree",
    "check_tree",
    # Logging
    "configure_logging",
    "get_logger",
    "bound_context",
    # JSON
    "safe_json_dumps",
    # DI
    "create_container",
    # Hashing
    "hash_string",
    "content_id",
]
