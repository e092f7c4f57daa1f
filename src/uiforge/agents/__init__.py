"""Intent inference, tree generation and explanation."""

from .models import (
    UINode,
    Layout,
    LayoutType,
    ComponentRequest,
    AddAction,
    RemoveAction,
    SimplifyAction,
    NewPlan,
    PatchPlan,
    load_plan,
)
from .planner import Planner, classify
from .generator import Generator, GenerationError, InvalidPlanType, NoTreeToPatch, build
from .explainer import explain

__all__ = [
    "UINode",
    "Layout",
    "LayoutType",
    "ComponentRequest",
    "AddAction",
    "RemoveAction",
    "SimplifyAction",
    "NewPlan",
    "PatchPlan",
    "load_plan",
    "Planner",
    "classify",
    "Generator",
    "GenerationError",
    "InvalidPlanType",
    "NoTreeToPatch",
    "build",
    "explain",
]
