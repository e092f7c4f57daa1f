"""Planner - classifies a request as a fresh build or an edit."""

from collections.abc import Iterator

from ..core import get_logger
from ..core.validate import MAX_INPUT_LENGTH, sanitize_input
from .models import Action, AddAction, NewPlan, PatchPlan, RemoveAction, SimplifyAction, UINode
from .rules import (
    ADD_KEYWORDS,
    PATCH_KEYWORDS,
    REMOVE_KEYWORDS,
    SIMPLIFY_KEYWORDS,
    ModalIds,
    infer_components,
    infer_layout,
)


logger = get_logger(__name__)


def _walk(tree: UINode) -> Iterator[UINode]:
    yield tree
    for child in tree.children:
        yield from _walk(child)


def existing_ids(tree: UINode | None) -> set[str]:
    """Collect every string ``id`` prop in the tree."""
    if tree is None:
        return set()
    return {
        node.props["id"]
        for node in _walk(tree)
        if isinstance(node.props.get("id"), str)
    }


def is_modification(lower: str, previous_tree: UINode | None) -> bool:
    """A request edits the tree only when one exists and an edit keyword appears."""
    return previous_tree is not None and any(keyword in lower for keyword in PATCH_KEYWORDS)


class Planner:
    """Turns normalized request text into a NewPlan or PatchPlan."""

    def __init__(self, max_input_length: int = MAX_INPUT_LENGTH) -> None:
        self.max_input_length = max_input_length

    def classify(self, text: str, previous_tree: UINode | None = None) -> NewPlan | PatchPlan:
        """
        Classify a request and extract its plan.

        Args:
            text: Request text (normalized again here)
            previous_tree: Latest tree, or None when nothing exists yet

        Returns:
            PatchPlan when editing an existing tree, NewPlan otherwise
        """
        intent = sanitize_input(text, self.max_input_length)
        lower = intent.lower()
        modal_ids = ModalIds(intent, existing_ids(previous_tree))

        if is_modification(lower, previous_tree):
            actions = self._infer_actions(intent, previous_tree, modal_ids)
            logger.info("planned", type="patch", actions=[a.type for a in actions])
            return PatchPlan(intent=intent, current_tree=previous_tree, actions=actions)

        plan = NewPlan(
            intent=intent,
            layout=infer_layout(intent),
            components=infer_components(intent, modal_ids),
        )
        logger.info(
            "planned",
            type="new",
            layout=plan.layout.type.value,
            components=[c.kind for c in plan.components],
        )
        return plan

    def _infer_actions(self, intent: str, previous_tree: UINode, modal_ids: ModalIds) -> list[Action]:
        """Derive add, remove and simplify actions, always in that order."""
        lower = intent.lower()
        actions: list[Action] = []

        if any(keyword in lower for keyword in ADD_KEYWORDS):
            actions.extend(AddAction(component=c) for c in infer_components(intent, modal_ids))

        if any(keyword in lower for keyword in REMOVE_KEYWORDS) and previous_tree.children:
            actions.append(RemoveAction())

        if any(keyword in lower for keyword in SIMPLIFY_KEYWORDS):
            actions.append(SimplifyAction())

        return actions


def classify(text: str, previous_tree: UINode | None = None) -> NewPlan | PatchPlan:
    """Classify with default limits."""
    return Planner().classify(text, previous_tree)
