"""UI tree and plan data models."""

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..core.registry import ComponentKind
from ..core.validate import validate_tree


class UINode(BaseModel):
    """One node of a UI tree."""

    model_config = ConfigDict(populate_by_name=True)

    kind: ComponentKind = Field(..., validation_alias=AliasChoices("kind", "component"))
    props: dict[str, Any] = Field(default_factory=dict)
    children: list["UINode"] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "UINode":
        """Validate a raw tree mapping against the registry and load it."""
        validate_tree(data)
        return cls.model_validate(data)


UINode.model_rebuild()


class LayoutType(str, Enum):
    """Inferred page structure."""

    DASHBOARD = "dashboard"
    MODAL = "modal"
    FORM = "form"
    TABLE = "table"
    DEFAULT = "default"


class Layout(BaseModel):
    """Layout descriptor with structural flags."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    type: LayoutType = LayoutType.DEFAULT
    has_navbar: bool = False
    has_sidebar: bool = False
    has_modal: bool = False
    has_card: bool = False
    has_table: bool = False


class ComponentRequest(BaseModel):
    """Component the planner asks for; kind is unchecked until build."""

    kind: str
    props: dict[str, Any] = Field(default_factory=dict)


class AddAction(BaseModel):
    type: Literal["add"] = "add"
    component: ComponentRequest
    target: Literal["root"] = "root"


class RemoveAction(BaseModel):
    type: Literal["remove"] = "remove"
    target: Literal["last"] = "last"


class SimplifyAction(BaseModel):
    type: Literal["simplify"] = "simplify"


Action = Annotated[Union[AddAction, RemoveAction, SimplifyAction], Field(discriminator="type")]


class NewPlan(BaseModel):
    """Build a fresh tree."""

    type: Literal["new"] = "new"
    intent: str
    layout: Layout = Field(default_factory=Layout)
    components: list[ComponentRequest] = Field(default_factory=list)


class PatchPlan(BaseModel):
    """Edit an existing tree."""

    type: Literal["patch"] = "patch"
    intent: str
    current_tree: UINode | None = None
    actions: list[Action] = Field(default_factory=list)


Plan = Annotated[Union[NewPlan, PatchPlan], Field(discriminator="type")]

_plan_adapter: TypeAdapter[NewPlan | PatchPlan] = TypeAdapter(Plan)


def load_plan(data: Mapping[str, Any]) -> NewPlan | PatchPlan:
    """
    Load a plan from a raw mapping.

    Raises:
        InvalidPlanType: If the mapping is not a well-formed new/patch plan
    """
    from .generator import InvalidPlanType

    plan_type = data.get("type")
    if plan_type not in ("new", "patch"):
        raise InvalidPlanType(f"Invalid plan type: {plan_type!r}")
    try:
        return _plan_adapter.validate_python(data)
    except PydanticValidationError as e:
        raise InvalidPlanType(f"Malformed {plan_type} plan: {e.error_count()} error(s)") from e
