"""Code Serializer - renders a UI tree as JSX-like markup.

Output is deterministic for a given tree but is not meant to be parsed
back into one.
"""

import math
from collections.abc import Mapping
from typing import Any

from ..core.json import safe_json_dumps

EMPTY_TREE = "// No UI generated yet"
INDENT = "  "


def _format_number(value: int | float) -> str:
    """
    Spell a number the way JavaScript's ``String(n)`` would.

    Examples:
        >>> [_format_number(v) for v in (2.0, 2.5, 1e-7, 1e21, float("inf"))]
        ['2', '2.5', '1e-7', '1e+21', 'Infinity']
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest round-tripping digits
    mantissa, _, exponent = repr(abs(value)).partition("e")
    whole, _, fraction = mantissa.partition(".")
    raw = whole + fraction
    digits = raw.strip("0")
    # value == 0.<digits> * 10**point
    point = len(whole) + int(exponent or 0) - (len(raw) - len(raw.lstrip("0")))
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    exp = point - 1
    head = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{head}e{'+' if exp > 0 else '-'}{abs(exp)}"


def render_attribute(key: str, value: Any) -> str | None:
    """
    Render one prop as a markup attribute.

    Returns:
        Attribute text, or None when the prop is omitted
    """
    if value is None:
        return None
    if isinstance(value, str):
        escaped = value.replace('"', '\\"')
        return f'{key}="{escaped}"'
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return key if value else None
    if isinstance(value, (int, float)):
        return f"{key}={{{_format_number(value)}}}"
    return f"{key}={{{safe_json_dumps(value)}}}"


def render_attributes(props: Mapping[str, Any]) -> str:
    """Render all props except ``children``, in insertion order."""
    rendered = (
        render_attribute(key, value)
        for key, value in props.items()
        if key != "children"
    )
    return " ".join(attr for attr in rendered if attr)


def _parts(node: Any) -> tuple[str, Mapping[str, Any], list[Any]]:
    if isinstance(node, Mapping):
        kind = node.get("kind", node.get("component"))
        props = node.get("props") or {}
        children = node.get("children") or []
    else:
        kind, props, children = node.kind, node.props or {}, node.children or []
    return str(getattr(kind, "value", kind)), props, list(children)


def serialize(tree: Any, indent: int = 0) -> str:
    """
    Render a tree (UINode or raw mapping) as markup.

    Args:
        tree: Root node, or None
        indent: Nesting level of the root (two spaces per level)

    Returns:
        Markup text
    """
    if tree is None:
        return EMPTY_TREE

    spaces = INDENT * indent
    kind, props, children = _parts(tree)
    attrs = render_attributes(props)
    open_tag = f"<{kind} {attrs}" if attrs else f"<{kind}"

    if children:
        body = "\n".join(serialize(child, indent + 1) for child in children)
        return f"{spaces}{open_tag}>\n{body}\n{spaces}</{kind}>"

    text = props.get("children")
    if isinstance(text, str) and text:
        return f"{spaces}{open_tag}>{text}</{kind}>"

    return f"{spaces}{open_tag} />"
