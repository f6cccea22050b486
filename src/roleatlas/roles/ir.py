"""
Role catalog types for roleatlas.

Defines the schema for organizational role catalogs:
- Role categories and their display records
- Maturity stages (pre-AI, AI agents, AI agentic)
- Per-node journeys and per-stage overviews
- Role definitions with references into an external pipeline graph

Node ids (owned_steps, reviewed_gates, related_agents, related_inputs and
the keys of node_journeys) are opaque foreign keys. Nothing here checks that
they resolve to a node.

Mapping fields are exposed as read-only mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


class RoleCategory(StrEnum):
    STRATEGY = "strategy"
    CREATIVE = "creative"
    GOVERNANCE = "governance"
    OPERATIONS = "operations"
    GROWTH = "growth"


class MaturityStage(StrEnum):
    """AI adoption stages, in conceptual order."""

    PRE_AI = "pre_ai"
    AI_AGENTS = "ai_agents"
    AI_AGENTIC = "ai_agentic"


class CategoryInfo(BaseModel):
    label: str
    subtitle: str
    icon_name: str
    model_config = ConfigDict(frozen=True, extra="forbid")


class JourneyStage(BaseModel):
    summary: str
    detail: str
    pain_points: tuple[str, ...] | None = None
    benchmarks: tuple[str, ...] | None = None
    outcomes: tuple[str, ...] | None = None
    role_evolution: str | None = None
    anti_patterns: tuple[str, ...] | None = None
    model_config = ConfigDict(frozen=True, extra="forbid")


class NodeJourney(BaseModel):
    """How the work at one node changes across the three maturity stages."""

    pre_ai: JourneyStage
    ai_agents: JourneyStage
    ai_agentic: JourneyStage
    model_config = ConfigDict(frozen=True, extra="forbid")

    def stage(self, stage: MaturityStage) -> JourneyStage:
        return getattr(self, stage.value)

    def stages(self) -> list[tuple[MaturityStage, JourneyStage]]:
        return [(s, self.stage(s)) for s in MaturityStage]


class StageOverview(BaseModel):
    narrative: str
    time_allocation: str
    critical_metrics: tuple[str, ...] = ()
    strategic_opportunity: str
    model_config = ConfigDict(frozen=True, extra="forbid")


class StageOverviews(BaseModel):
    pre_ai: StageOverview
    ai_agents: StageOverview
    ai_agentic: StageOverview
    model_config = ConfigDict(frozen=True, extra="forbid")

    def stage(self, stage: MaturityStage) -> StageOverview:
        return getattr(self, stage.value)

    def stages(self) -> list[tuple[MaturityStage, StageOverview]]:
        return [(s, self.stage(s)) for s in MaturityStage]


class RoleNarrative(BaseModel):
    key_insight: str
    node_journeys: Mapping[str, NodeJourney] = Field(default_factory=dict, validate_default=True)
    stage_overviews: StageOverviews | None = None
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("node_journeys", mode="after")
    @classmethod
    def _freeze_journeys(cls, value: Mapping[str, NodeJourney]) -> Mapping[str, NodeJourney]:
        return MappingProxyType(dict(value))

    @field_serializer("node_journeys")
    def _dump_journeys(self, value: Mapping[str, NodeJourney]) -> dict[str, NodeJourney]:
        return dict(value)


class RoleDefinition(BaseModel):
    id: str = Field(min_length=1)
    title: str
    description: str
    tagline: str
    icon_name: str
    category: RoleCategory
    accent_color: str = Field(pattern=r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
    # Steps and gates the role owns or reviews
    owned_steps: tuple[str, ...] = ()
    reviewed_gates: tuple[str, ...] = ()
    # Agents and inputs the role depends on
    related_agents: tuple[str, ...] = ()
    related_inputs: tuple[str, ...] = ()
    narrative: RoleNarrative
    pain_points: tuple[str, ...] | None = None
    model_config = ConfigDict(frozen=True, extra="forbid")


class RoleStats(BaseModel):
    steps: int
    gates: int
    total: int
    coverage_pct: int
    model_config = ConfigDict(frozen=True)


class RoleCatalog(BaseModel):
    version: int = 1
    name: str
    label: str
    categories: Mapping[RoleCategory, CategoryInfo]
    roles: tuple[RoleDefinition, ...] = ()
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("categories", mode="after")
    @classmethod
    def _freeze_categories(
        cls, value: Mapping[RoleCategory, CategoryInfo]
    ) -> Mapping[RoleCategory, CategoryInfo]:
        return MappingProxyType(dict(value))

    @field_serializer("categories")
    def _dump_categories(
        self, value: Mapping[RoleCategory, CategoryInfo]
    ) -> dict[RoleCategory, CategoryInfo]:
        return dict(value)

    @model_validator(mode="after")
    def _check_categories_complete(self) -> RoleCatalog:
        missing = [c.value for c in RoleCategory if c not in self.categories]
        if missing:
            raise ValueError(f"categories missing: {', '.join(missing)}")
        return self
