"""Input normalization and tree validation."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, ConfigDict, Field

from .registry import ALLOWED_COMPONENTS, is_registered


# Validation limits
MAX_INPUT_LENGTH = 1000

_CODE_BLOCK = re.compile(r"```[\s\S]*?```")
_SCRIPT_TAG = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)


class ValidationError(Exception):
    """Validation failed."""

    pass


class InvalidComponent(ValidationError):
    """Component kind is not in the registry."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        self.allowed = ALLOWED_COMPONENTS
        super().__init__(f"Invalid component: {kind}. Allowed: {', '.join(ALLOWED_COMPONENTS)}")


class InvalidTreeStructure(ValidationError):
    """Tree node is missing or declares no kind."""

    def __init__(self, message: str = "Invalid tree: missing component kind") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="ignore", frozen=True  # Immutable by default
    )


class GenerateRequest(RequestValidator):
    """Validated generation request body."""

    # Only absent, empty or non-string text is refused; blank text still plans
    user_text: str = Field(alias="userText", min_length=1)


def sanitize_input(text: Any, max_length: int = MAX_INPUT_LENGTH) -> str:
    """
    Strip code fences and script blocks, then bound the length.

    Not a full sanitizer: it only removes constructs that would otherwise be
    echoed into generated code or explanations.

    Args:
        text: Raw request text (any type)
        max_length: Maximum length of the result

    Returns:
        Cleaned string, empty for None or non-string input
    """
    if not text or not isinstance(text, str):
        return ""
    cleaned = _CODE_BLOCK.sub("", text)
    cleaned = _SCRIPT_TAG.sub("", cleaned)
    return cleaned[:max_length]


def _node_parts(node: Any) -> tuple[Any, list[Any]]:
    """Return (kind, children) for a UINode-like object or a raw mapping."""
    if isinstance(node, Mapping):
        kind = node.get("kind", node.get("component"))
        children = node.get("children") or []
    else:
        kind = getattr(node, "kind", None)
        children = getattr(node, "children", None) or []
    return kind, list(children)


class TreeValidator:
    """Validates UI trees against the component registry."""

    @staticmethod
    def validate(tree: Any) -> None:
        """
        Walk the tree pre-order and check every node.

        Args:
            tree: UINode or raw mapping

        Raises:
            InvalidTreeStructure: If a node is missing or has no kind
            InvalidComponent: If a kind is not registered
        """
        if tree is None:
            raise InvalidTreeStructure()

        kind, children = _node_parts(tree)
        if not kind:
            raise InvalidTreeStructure()
        if not is_registered(kind):
            raise InvalidComponent(kind)

        for child in children:
            TreeValidator.validate(child)


def validate_tree(tree: Any) -> None:
    """Validate a tree, raising on the first violation."""
    TreeValidator.validate(tree)


def check_tree(tree: Any) -> Result[None, ValidationResult]:
    """
    Validate a tree (Result pattern version).

    Args:
        tree: UINode or raw mapping

    Returns:
        Result indicating success or validation error
    """
    try:
        TreeValidator.validate(tree)
        return Success(None)
    except InvalidComponent as e:
        return Failure(ValidationResult(str(e), field="kind", value=e.kind))
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
