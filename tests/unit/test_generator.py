"""Tests for tree building and patching."""

import pytest
from hypothesis import HealthCheck, given, settings

from uiforge.core import ComponentKind, InvalidComponent, validate_tree
from uiforge.agents.generator import GenerationError, InvalidPlanType, NoTreeToPatch
from uiforge.agents.models import (
    AddAction,
    ComponentRequest,
    Layout,
    LayoutType,
    NewPlan,
    PatchPlan,
    RemoveAction,
    SimplifyAction,
    UINode,
)
from tests.strategies import trees_strategy


def child_kinds(tree):
    return [c.kind.value for c in tree.children]


# ============================================================================
# New trees
# ============================================================================

@pytest.mark.unit
def test_build_new_default(generator):
    """Root card carries the intent; components follow in order."""
    plan = NewPlan(
        intent="a button and a chart",
        layout=Layout(type=LayoutType.DEFAULT, has_card=True),
        components=[
            ComponentRequest(kind="Button", props={"children": "Go"}),
            ComponentRequest(kind="Chart", props={"type": "bar"}),
        ],
    )
    tree = generator.build(plan)

    assert tree.kind is ComponentKind.CARD
    assert tree.props == {"title": "UI", "subtitle": "a button and a chart"}
    assert child_kinds(tree) == ["Button", "Chart"]
    assert tree.children[0].props == {"children": "Go"}
    assert tree.children[0].children == []


@pytest.mark.unit
def test_build_dashboard_scenario(planner, generator):
    """Dashboard chrome comes first, then the inferred components."""
    plan = planner.classify("Create a dashboard with a navbar and sidebar", None)
    tree = generator.build(plan)

    assert child_kinds(tree)[:2] == ["Navbar", "Sidebar"]
    assert child_kinds(tree) == ["Navbar", "Sidebar", "Sidebar", "Navbar"]
    assert tree.children[0].props == {"title": "App", "links": []}
    assert tree.children[1].props == {}


@pytest.mark.unit
def test_build_new_rejects_unknown_kind(generator):
    """One bad component aborts the whole build."""
    plan = NewPlan(
        intent="x",
        components=[
            ComponentRequest(kind="Button"),
            ComponentRequest(kind="Carousel"),
        ],
    )
    with pytest.raises(InvalidComponent, match="Carousel"):
        generator.build(plan)


@pytest.mark.unit
def test_build_from_mapping(generator):
    """Raw plan mappings are loaded first."""
    tree = generator.build({
        "type": "new",
        "intent": "hi",
        "components": [{"kind": "Input", "props": {"placeholder": "Name"}}],
    })
    assert child_kinds(tree) == ["Input"]


@pytest.mark.unit
@pytest.mark.parametrize("plan", [
    "new",
    None,
    42,
    {"type": "delete"},
    {"intent": "no type"},
    {"type": "new"},
])
def test_invalid_plan_type(generator, plan):
    """Anything but a well-formed new/patch plan is rejected."""
    with pytest.raises(InvalidPlanType):
        generator.build(plan)


@pytest.mark.unit
def test_generation_errors_share_base():
    """Generator errors derive from GenerationError."""
    assert issubclass(InvalidPlanType, GenerationError)
    assert issubclass(NoTreeToPatch, GenerationError)


# ============================================================================
# Patching
# ============================================================================

@pytest.mark.unit
def test_patch_requires_tree(generator):
    """Patching nothing is an error."""
    plan = PatchPlan(intent="add a button", actions=[])
    with pytest.raises(NoTreeToPatch, match="Cannot patch: no existing tree"):
        generator.build(plan, None)


@pytest.mark.unit
def test_patch_add(generator, sample_tree):
    """Add appends a childless node to the root."""
    plan = PatchPlan(
        intent="add a chart",
        actions=[AddAction(component=ComponentRequest(kind="Chart", props={"type": "line"}))],
    )
    tree = generator.build(plan, sample_tree)

    assert child_kinds(tree) == ["Navbar", "Table", "Button", "Chart"]
    assert tree.children[-1].props == {"type": "line"}
    assert tree.children[-1].children == []


@pytest.mark.unit
def test_patch_add_invalid_kind(generator, sample_tree):
    """Invalid add aborts and leaves the previous tree alone."""
    before = sample_tree.model_copy(deep=True)
    plan = PatchPlan(
        intent="add",
        actions=[
            AddAction(component=ComponentRequest(kind="Chart")),
            AddAction(component=ComponentRequest(kind="Accordion")),
        ],
    )
    with pytest.raises(InvalidComponent):
        generator.build(plan, sample_tree)
    assert sample_tree == before


@pytest.mark.unit
def test_patch_remove_scenario(planner, generator, sample_tree):
    """Removing the last item keeps the rest in order."""
    plan = planner.classify("remove the last item", sample_tree)
    tree = generator.build(plan, sample_tree)

    assert child_kinds(tree) == ["Navbar", "Table"]
    assert tree.children == sample_tree.children[:2]


@pytest.mark.unit
def test_patch_remove_on_empty_is_noop(generator, empty_tree):
    """Remove with no children does nothing and does not raise."""
    plan = PatchPlan(intent="remove", actions=[RemoveAction()])
    tree = generator.build(plan, empty_tree)

    assert tree == empty_tree
    assert tree is not empty_tree


@pytest.mark.unit
def test_patch_simplify_keeps_first_two(generator, wide_tree):
    """Simplify truncates to the first two children."""
    plan = PatchPlan(intent="simpler", actions=[SimplifyAction()])
    tree = generator.build(plan, wide_tree)

    assert child_kinds(tree) == ["Navbar", "Sidebar"]
    assert [c.props["id"] for c in tree.children] == ["n0", "n1"]
    assert len(wide_tree.children) == 5


@pytest.mark.unit
def test_patch_simplify_small_tree_is_noop(generator, sample_tree):
    """Two or fewer children are left as they are."""
    two = sample_tree.model_copy(deep=True)
    del two.children[2:]
    plan = PatchPlan(intent="simpler", actions=[SimplifyAction()])

    assert generator.build(plan, two) == two


@pytest.mark.unit
def test_patch_actions_apply_in_order(generator, sample_tree):
    """Add, remove, simplify in sequence."""
    plan = PatchPlan(
        intent="x",
        actions=[
            AddAction(component=ComponentRequest(kind="Chart")),
            RemoveAction(),
            SimplifyAction(),
        ],
    )
    tree = generator.build(plan, sample_tree)
    assert child_kinds(tree) == ["Navbar", "Table"]


@pytest.mark.unit
def test_patch_only_touches_root_children(generator):
    """Nested descendants are never edited."""
    nested = UINode(
        kind=ComponentKind.CARD,
        children=[
            UINode(kind=ComponentKind.SIDEBAR, children=[
                UINode(kind=ComponentKind.BUTTON),
                UINode(kind=ComponentKind.BUTTON),
                UINode(kind=ComponentKind.BUTTON),
            ]),
        ],
    )
    plan = PatchPlan(intent="x", actions=[SimplifyAction(), RemoveAction()])
    tree = generator.build(plan, nested)
    assert tree.children == []
    assert len(nested.children[0].children) == 3


@pytest.mark.unit
def test_patch_result_is_independent(planner, generator, sample_tree):
    """Editing the result never leaks into the previous tree."""
    before = sample_tree.model_copy(deep=True)
    plan = planner.classify("add a table of users", sample_tree)
    tree = generator.build(plan, sample_tree)

    tree.children[1].props["rows"].append(["b", "2"])
    tree.children[0].props["title"] = "Changed"
    tree.children.clear()

    assert sample_tree == before
    assert len(sample_tree.children) == 3


@pytest.mark.unit
def test_property_tests_tolerate_slow_generation():
    """Tree strategies are allowed a slow first draw and no deadline."""
    assert HealthCheck.too_slow in settings.default.suppress_health_check
    assert settings.default.deadline is None


@given(trees_strategy)
def test_empty_patch_is_identity(tree):
    """Property test: a patch with no actions returns an equal copy."""
    from uiforge.agents.generator import Generator

    result = Generator().build(PatchPlan(intent="update", actions=[]), tree)
    assert result == tree
    assert result is not tree


@given(trees_strategy)
def test_patch_never_mutates_input(tree):
    """Property test: previous tree is unchanged after any patch."""
    from uiforge.agents.generator import Generator

    before = tree.model_copy(deep=True)
    plan = PatchPlan(
        intent="x",
        actions=[AddAction(component=ComponentRequest(kind="Modal")), RemoveAction(), SimplifyAction()],
    )
    result = Generator().build(plan, tree)

    assert tree == before
    assert len(result.children) <= 2
    validate_tree(result)
