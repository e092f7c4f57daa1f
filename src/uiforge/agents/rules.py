"""Keyword rule tables for intent inference.

Every rule is an independent (triggers -> contribution) entry so the
vocabulary can be audited and tested one rule at a time.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ..core.hash import content_id
from ..core.registry import ComponentKind
from .models import ComponentRequest, Layout, LayoutType


PATCH_KEYWORDS = ("add", "modify", "change", "update", "remove", "make", "more", "less")
ADD_KEYWORDS = ("add",)
REMOVE_KEYWORDS = ("remove", "delete")
SIMPLIFY_KEYWORDS = ("minimal", "simpler")

DEFAULT_BUTTON_TEXT = "Click Me"
DEFAULT_CARD_TITLE = "UI Component"
DEFAULT_MODAL_TITLE = "Modal Title"
INPUT_PLACEHOLDER = "Enter text..."
SUBTITLE_LIMIT = 100

_BUTTON_QUOTED = re.compile(r"button.*?[\"']([^\"']+)[\"']", re.IGNORECASE)
_BUTTON_WORD = re.compile(r"button\w*\W+(\w+)", re.IGNORECASE)
_TITLE_QUOTED = re.compile(r"title.*?[\"']([^\"']+)[\"']", re.IGNORECASE)
_CALLED_QUOTED = re.compile(r"called.*?[\"']([^\"']+)[\"']", re.IGNORECASE)
_MODAL_QUOTED = re.compile(r"(?:modal|dialog|popup|settings).*?[\"']([^\"']+)[\"']", re.IGNORECASE)

USER_TABLE = {
    "headers": ["Name", "Email", "Role"],
    "rows": [
        ["John Doe", "john@example.com", "Admin"],
        ["Jane Smith", "jane@example.com", "User"],
        ["Bob Johnson", "bob@example.com", "User"],
    ],
}
PRODUCT_TABLE = {
    "headers": ["Product", "Price", "Stock"],
    "rows": [
        ["Widget A", "$10.00", "50"],
        ["Widget B", "$15.00", "30"],
        ["Widget C", "$20.00", "20"],
    ],
}
GENERIC_TABLE = {
    "headers": ["Name", "Value", "Status"],
    "rows": [
        ["Item 1", "Value 1", "Active"],
        ["Item 2", "Value 2", "Pending"],
        ["Item 3", "Value 3", "Completed"],
    ],
}


def _contains_any(lower: str, keywords: Iterable[str]) -> bool:
    return any(keyword in lower for keyword in keywords)


# ============================================================================
# Extractors
# ============================================================================


def extract_button_text(text: str) -> str | None:
    """Quoted string after "button", else the word after it."""
    match = _BUTTON_QUOTED.search(text) or _BUTTON_WORD.search(text)
    return match.group(1) if match else None


def extract_title(text: str) -> str | None:
    """Quoted string after "title" or "called"."""
    match = _TITLE_QUOTED.search(text) or _CALLED_QUOTED.search(text)
    return match.group(1) if match else None


def extract_subtitle(text: str) -> str:
    if len(text) > SUBTITLE_LIMIT:
        return text[:SUBTITLE_LIMIT] + "..."
    return text


def extract_modal_title(text: str) -> str | None:
    """Quoted string after a modal keyword or a title phrase, else "Settings" when mentioned."""
    match = _MODAL_QUOTED.search(text)
    if match:
        return match.group(1)
    title = extract_title(text)
    if title:
        return title
    if "settings" in text.lower():
        return "Settings"
    return None


def extract_table_data(lower: str) -> dict[str, list]:
    """Pick the sample table matching the domain mentioned in the text."""
    if "user" in lower:
        template = USER_TABLE
    elif "product" in lower:
        template = PRODUCT_TABLE
    else:
        template = GENERIC_TABLE
    return {
        "headers": list(template["headers"]),
        "rows": [list(row) for row in template["rows"]],
    }


# ============================================================================
# Modal identity
# ============================================================================


class ModalIds:
    """Allocates content-derived modal ids that are unique within a tree."""

    def __init__(self, seed: str, taken: Iterable[str] = ()) -> None:
        self.seed = seed
        self.taken = set(taken)

    def allocate(self) -> str:
        base = content_id("modal", self.seed)
        candidate = base
        suffix = 2
        while candidate in self.taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        self.taken.add(candidate)
        return candidate


# ============================================================================
# Rule tables
# ============================================================================


@dataclass
class RuleContext:
    """Inputs shared by all component rules for one request."""

    text: str
    lower: str
    modal_ids: ModalIds
    fired: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class ComponentRule:
    """One trigger set and the component requests it contributes."""

    name: str
    triggers: tuple[str, ...]
    contribute: Callable[[RuleContext], list[ComponentRequest]]

    def matches(self, lower: str) -> bool:
        return _contains_any(lower, self.triggers)


def _button(ctx: RuleContext) -> list[ComponentRequest]:
    text = extract_button_text(ctx.text) or DEFAULT_BUTTON_TEXT
    return [ComponentRequest(kind=ComponentKind.BUTTON.value, props={"children": text})]


def _card(ctx: RuleContext) -> list[ComponentRequest]:
    props = {
        "title": extract_title(ctx.text) or DEFAULT_CARD_TITLE,
        "subtitle": extract_subtitle(ctx.text),
    }
    return [ComponentRequest(kind=ComponentKind.CARD.value, props=props)]


def _input(ctx: RuleContext) -> list[ComponentRequest]:
    return [ComponentRequest(kind=ComponentKind.INPUT.value, props={"placeholder": INPUT_PLACEHOLDER})]


def _table(ctx: RuleContext) -> list[ComponentRequest]:
    return [ComponentRequest(kind=ComponentKind.TABLE.value, props=extract_table_data(ctx.lower))]


def _modal(ctx: RuleContext) -> list[ComponentRequest]:
    title = extract_modal_title(ctx.text)
    modal_id = ctx.modal_ids.allocate()
    requests = [
        ComponentRequest(
            kind=ComponentKind.MODAL.value,
            props={"id": modal_id, "title": title or DEFAULT_MODAL_TITLE, "isOpen": False},
        )
    ]
    # A modal needs something to open it
    if "button" not in ctx.fired:
        requests.append(
            ComponentRequest(
                kind=ComponentKind.BUTTON.value,
                props={"children": f"Open {title or 'Modal'}", "opensModal": modal_id},
            )
        )
    return requests


def _sidebar(ctx: RuleContext) -> list[ComponentRequest]:
    return [ComponentRequest(kind=ComponentKind.SIDEBAR.value, props={})]


def _navbar(ctx: RuleContext) -> list[ComponentRequest]:
    return [ComponentRequest(kind=ComponentKind.NAVBAR.value, props={"title": "App", "links": []})]


def _chart(ctx: RuleContext) -> list[ComponentRequest]:
    props = {"type": "bar", "data": [10, 20, 30], "labels": ["A", "B", "C"]}
    return [ComponentRequest(kind=ComponentKind.CHART.value, props=props)]


COMPONENT_RULES: tuple[ComponentRule, ...] = (
    ComponentRule("button", ("button", "click"), _button),
    ComponentRule("card", ("card", "container"), _card),
    ComponentRule("input", ("input", "field", "form"), _input),
    ComponentRule("table", ("table", "data", "list"), _table),
    ComponentRule("modal", ("modal", "dialog", "popup", "settings"), _modal),
    ComponentRule("sidebar", ("sidebar", "side panel"), _sidebar),
    ComponentRule("navbar", ("navbar", "navigation", "nav"), _navbar),
    ComponentRule("chart", ("chart", "graph", "visualization"), _chart),
)

LAYOUT_RULES: tuple[tuple[tuple[str, ...], Layout], ...] = (
    (("dashboard",), Layout(type=LayoutType.DASHBOARD, has_navbar=True, has_sidebar=True)),
    (("modal", "dialog"), Layout(type=LayoutType.MODAL, has_modal=True)),
    (("form",), Layout(type=LayoutType.FORM, has_card=True)),
    (("table", "list"), Layout(type=LayoutType.TABLE, has_table=True)),
)
DEFAULT_LAYOUT = Layout(type=LayoutType.DEFAULT, has_card=True)


def infer_layout(text: str) -> Layout:
    """Return the first structural layout whose phrases appear in the text."""
    lower = text.lower()
    for phrases, layout in LAYOUT_RULES:
        if _contains_any(lower, phrases):
            return layout
    return DEFAULT_LAYOUT


def infer_components(text: str, modal_ids: ModalIds | None = None) -> list[ComponentRequest]:
    """
    Run every component rule against the text and collect their requests.

    Args:
        text: Normalized request text
        modal_ids: Id allocator for modals (seeded from the text when omitted)

    Returns:
        Component requests in rule order; a single Card when nothing fired
    """
    ctx = RuleContext(text=text, lower=text.lower(), modal_ids=modal_ids or ModalIds(text))
    components: list[ComponentRequest] = []
    for rule in COMPONENT_RULES:
        if rule.matches(ctx.lower):
            components.extend(rule.contribute(ctx))
            ctx.fired.add(rule.name)

    if not components:
        return [ComponentRequest(kind=ComponentKind.CARD.value, props={"title": "UI", "subtitle": text})]
    return components
