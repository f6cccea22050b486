"""Shared pytest fixtures for roleatlas tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from roleatlas.graph.ir import GraphData, GraphLink, GraphNode, LinkType, NodeType
from roleatlas.roles.ir import (
    JourneyStage,
    NodeJourney,
    RoleCategory,
    RoleDefinition,
    RoleNarrative,
)


def make_journey(prefix: str = "stage") -> NodeJourney:
    return NodeJourney(
        pre_ai=JourneyStage(summary=f"{prefix} before", detail=f"{prefix} manual work"),
        ai_agents=JourneyStage(summary=f"{prefix} assisted", detail=f"{prefix} agents help"),
        ai_agentic=JourneyStage(summary=f"{prefix} agentic", detail=f"{prefix} agents act"),
    )


@pytest.fixture
def make_role() -> Callable[..., RoleDefinition]:
    """Return a factory for RoleDefinitions with sensible defaults."""

    def _make(role_id: str = "test-role", **overrides: Any) -> RoleDefinition:
        data: dict[str, Any] = {
            "id": role_id,
            "title": role_id.replace("-", " ").title(),
            "description": "A role used in tests.",
            "tagline": "Tester. Checker. Verifier.",
            "icon_name": "Compass",
            "category": RoleCategory.STRATEGY,
            "accent_color": "#C9A04E",
            "narrative": RoleNarrative(key_insight="Tests make the catalog trustworthy."),
        }
        data.update(overrides)
        return RoleDefinition(**data)

    return _make


@pytest.fixture
def sample_role(make_role: Callable[..., RoleDefinition]) -> RoleDefinition:
    """Role with owned ["a","b"], gates ["c"], no agents, inputs ["d","e"]."""
    return make_role(
        "sample-role",
        owned_steps=["a", "b"],
        reviewed_gates=["c"],
        related_agents=[],
        related_inputs=["d", "e"],
        narrative=RoleNarrative(
            key_insight="Sample insight.",
            node_journeys={"a": make_journey("a")},
        ),
    )


@pytest.fixture
def sample_graph() -> GraphData:
    """Small pipeline: a -> b -> x -> c, gate c reviews b, agent g performs a, d used by a."""
    nodes = [
        GraphNode(id="a", type=NodeType.STEP, label="A"),
        GraphNode(id="b", type=NodeType.STEP, label="B"),
        GraphNode(id="x", type=NodeType.STEP, label="X"),
        GraphNode(id="c", type=NodeType.GATE, label="C"),
        GraphNode(id="d", type=NodeType.INPUT, label="D"),
        GraphNode(id="g", type=NodeType.AGENT, label="G"),
        GraphNode(id="z", type=NodeType.STEP, label="Z"),
    ]
    links = [
        GraphLink(source="a", target="b", type=LinkType.FLOWS_TO),
        GraphLink(source="b", target="x", type=LinkType.FLOWS_TO),
        GraphLink(source="x", target="c", type=LinkType.FLOWS_TO),
        GraphLink(source="c", target="b", type=LinkType.REVIEWS),
        GraphLink(source="g", target="a", type=LinkType.PERFORMS),
        GraphLink(source="a", target="d", type=LinkType.USES),
        GraphLink(source="x", target="z", type=LinkType.FLOWS_TO),
    ]
    return GraphData(nodes=nodes, links=links)
