"""Generator - builds a new tree from a plan or patches a copy of the previous one."""

import copy
from collections.abc import Mapping
from typing import Any

from ..core import get_logger
from ..core.registry import ComponentKind, resolve_kind
from .models import (
    AddAction,
    ComponentRequest,
    NewPlan,
    PatchPlan,
    RemoveAction,
    SimplifyAction,
    UINode,
    load_plan,
)


logger = get_logger(__name__)

SIMPLIFY_KEEP = 2


class GenerationError(Exception):
    """Plan could not be turned into a tree."""

    pass


class InvalidPlanType(GenerationError):
    """Plan is neither a new nor a patch plan."""

    def __init__(self, message: str = "Invalid plan type") -> None:
        super().__init__(message)


class NoTreeToPatch(GenerationError):
    """Patch requested without a previous tree."""

    def __init__(self, message: str = "Cannot patch: no existing tree") -> None:
        super().__init__(message)


def _node_from_request(request: ComponentRequest) -> UINode:
    return UINode(kind=resolve_kind(request.kind), props=copy.deepcopy(request.props), children=[])


class Generator:
    """Converts plans into UI trees."""

    def build(self, plan: Any, previous_tree: UINode | None = None) -> UINode:
        """
        Build or patch a tree.

        Args:
            plan: NewPlan, PatchPlan or a raw plan mapping
            previous_tree: Tree to patch (required for patch plans)

        Returns:
            A new tree; the previous tree is never modified

        Raises:
            InvalidPlanType: If the plan type is unrecognized
            NoTreeToPatch: If a patch plan has no previous tree
            InvalidComponent: If a requested kind is not registered
        """
        if isinstance(plan, Mapping):
            plan = load_plan(plan)

        try:
            if isinstance(plan, NewPlan):
                return self._build_new(plan)
            if isinstance(plan, PatchPlan):
                return self._build_patch(plan, previous_tree)
            raise InvalidPlanType(f"Invalid plan type: {type(plan).__name__}")
        except Exception as e:
            logger.error("build_failed", error=str(e), error_type=type(e).__name__)
            raise

    def _build_new(self, plan: NewPlan) -> UINode:
        root = UINode(kind=ComponentKind.CARD, props={"title": "UI", "subtitle": plan.intent})

        if plan.layout.has_navbar:
            root.children.append(UINode(kind=ComponentKind.NAVBAR, props={"title": "App", "links": []}))
        if plan.layout.has_sidebar:
            root.children.append(UINode(kind=ComponentKind.SIDEBAR, props={}))

        for request in plan.components:
            root.children.append(_node_from_request(request))

        logger.info("built", children=len(root.children))
        return root

    def _build_patch(self, plan: PatchPlan, previous_tree: UINode | None) -> UINode:
        if previous_tree is None:
            raise NoTreeToPatch()

        tree = previous_tree.model_copy(deep=True)

        # Actions only touch the root's direct children
        for action in plan.actions:
            if isinstance(action, AddAction):
                tree.children.append(_node_from_request(action.component))
            elif isinstance(action, RemoveAction):
                if tree.children:
                    tree.children.pop()
            elif isinstance(action, SimplifyAction):
                del tree.children[SIMPLIFY_KEEP:]

        logger.info("patched", actions=len(plan.actions), children=len(tree.children))
        return tree


def build(plan: Any, previous_tree: UINode | None = None) -> UINode:
    """Build with a default generator."""
    return Generator().build(plan, previous_tree)
