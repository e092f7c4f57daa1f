"""Explainer - plain-English summary of what a plan asked for.

Reads the plan only. The resulting tree is accepted but not inspected, so a
removal that found nothing to remove is still reported as a removal.
"""

from typing import Any

from .models import AddAction, NewPlan, PatchPlan, RemoveAction, SimplifyAction


def _describe_action(action: Any) -> str:
    if isinstance(action, AddAction):
        return f"added {action.component.kind}"
    if isinstance(action, RemoveAction):
        return "removed last component"
    if isinstance(action, SimplifyAction):
        return "simplified the layout"
    return str(getattr(action, "type", action))


def explain(plan: Any, tree: Any, user_text: str) -> str:
    """Describe the plan's intent for the given request text."""
    if isinstance(plan, NewPlan):
        names = ", ".join(c.kind for c in plan.components)
        return (
            f'Created a new UI with {names} based on your request: "{user_text}". '
            f"The layout uses a {plan.layout.type.value} structure."
        )

    if isinstance(plan, PatchPlan):
        described = ", ".join(_describe_action(a) for a in plan.actions) or "no changes"
        return f'Modified the existing UI: {described}. Your request: "{user_text}"'

    return "UI generated successfully."
