"""
Pipeline graph types.

Nodes are steps, gates, agents or inputs; links describe how work flows
between them. Rendering fields carried by exported graphs (positions,
colors, particle settings) are ignored.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class NodeType(StrEnum):
    STEP = "step"
    GATE = "gate"
    AGENT = "agent"
    INPUT = "input"


class LinkType(StrEnum):
    FLOWS_TO = "flows-to"
    REVIEWS = "reviews"
    ESCALATES_TO = "escalates-to"
    USES = "uses"
    PERFORMS = "performs"
    RETURNS_TO = "returns-to"
    LINEAR_FLOW = "linear-flow"


class GraphNode(BaseModel):
    id: str
    type: NodeType
    label: str
    description: str = ""
    group: str | None = None
    meta: dict[str, Any] | None = None
    model_config = ConfigDict(frozen=True, extra="ignore")


class GraphLink(BaseModel):
    source: str
    target: str
    type: LinkType
    label: str | None = None
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("source", "target", mode="before")
    @classmethod
    def _endpoint_id(cls, value: Any) -> Any:
        # Force-layout exports replace endpoint ids with the node objects
        if isinstance(value, dict) and "id" in value:
            return value["id"]
        return value


class GraphData(BaseModel):
    nodes: tuple[GraphNode, ...] = ()
    links: tuple[GraphLink, ...] = ()
    model_config = ConfigDict(frozen=True, extra="ignore")

    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}

    def __len__(self) -> int:
        return len(self.nodes)
