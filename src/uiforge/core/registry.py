"""Component registry - the closed set of node kinds a tree may contain."""

from enum import Enum
from typing import Any


class ComponentKind(str, Enum):
    """Allowed UI component kinds."""

    BUTTON = "Button"
    CARD = "Card"
    INPUT = "Input"
    TABLE = "Table"
    MODAL = "Modal"
    SIDEBAR = "Sidebar"
    NAVBAR = "Navbar"
    CHART = "Chart"


ALLOWED_COMPONENTS: tuple[str, ...] = tuple(kind.value for kind in ComponentKind)


def is_registered(name: Any) -> bool:
    """Check whether a raw name is a registered kind."""
    return isinstance(name, str) and name in ALLOWED_COMPONENTS


def resolve_kind(name: Any) -> ComponentKind:
    """
    Turn a raw component name into a registered kind.

    Args:
        name: Component name as it appears in a request or payload

    Returns:
        Matching ComponentKind

    Raises:
        InvalidComponent: If the name is not registered
    """
    if isinstance(name, ComponentKind):
        return name
    if not is_registered(name):
        from .validate import InvalidComponent

        raise InvalidComponent(name)
    return ComponentKind(name)
