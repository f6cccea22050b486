"""
Role subgraph computation.

Pure functions that take a role and a pipeline graph and return the part of
the graph the role touches, the other roles it works with, and the order in
which its nodes are walked through.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field

from roleatlas.graph.ir import GraphData, GraphLink, LinkType

from .catalog import ROLE_DEFINITIONS, get_role_node_ids
from .ir import RoleDefinition

# Every pipeline step and gate of the content production graph, in the
# order work moves through it. Walkthroughs follow this order.
FULL_WORKFLOW_ORDER: tuple[str, ...] = (
    # Plan
    "campaign-planning",
    "journey-mapping",
    "receive-request",
    "content-scoring",
    "social-listening",
    "competitive-response",
    "research-insights",
    "influencer-brief",
    "write-brief",
    "brief-approval",
    # Create
    "draft-content",
    "visual-asset-creation",
    "seo-optimization",
    "ab-variant-creation",
    "paid-creative-production",
    "sales-enablement",
    "quality-check",
    # Review
    "brand-compliance",
    "brand-review",
    "ugc-moderation",
    "legal-review",
    "legal-compliance-gate",
    "final-edit",
    "accessibility-check",
    "stakeholder-signoff",
    # Publish
    "localize-content",
    "localization-quality-gate",
    "segment-mapping",
    "personalization-qa",
    "consent-check",
    "dynamic-assembly",
    "channel-orchestration",
    "content-repurposing",
    "schedule-publish",
    "distribute",
    # Measure
    "sentiment-monitoring",
    "track-performance",
    "generate-report",
    "attribution-modeling",
    "executive-reporting",
    "archive-tag",
    "content-governance",
    # Optimize
    "performance-review",
    "governance-gate",
    "optimize",
)


@dataclass(frozen=True)
class RoleSubgraph:
    """Nodes and links of the graph that belong to one role's view."""

    node_ids: frozenset[str]
    link_indices: frozenset[int]
    # Steps + gates the role directly owns or reviews
    primary_node_ids: frozenset[str]
    # Agents + inputs that support the role
    support_node_ids: frozenset[str]


@dataclass(frozen=True)
class TeamConnection:
    role_id: str
    role_title: str
    shared_node_ids: list[str] = field(default_factory=list)


def find_connecting_links(node_ids: Collection[str], links: Sequence[GraphLink]) -> frozenset[int]:
    """Indices of links whose source and target are both in node_ids."""
    return frozenset(
        i for i, link in enumerate(links) if link.source in node_ids and link.target in node_ids
    )


def trace_flow_paths(
    primary_ids: Collection[str],
    links: Sequence[GraphLink],
    max_hops: int = 4,
) -> set[str]:
    """Breadth-first walk along flows-to links between primary nodes.

    Starts from every primary node and only follows links whose target is
    also primary. The walk stops expanding at max_hops.
    """
    flow_links = [link for link in links if link.type == LinkType.FLOWS_TO]
    visited: set[str] = set()
    queue: deque[tuple[str, int]] = deque((node_id, 0) for node_id in primary_ids)

    while queue:
        node_id, depth = queue.popleft()
        if node_id in visited:
            continue
        visited.add(node_id)

        if depth >= max_hops:
            continue

        for link in flow_links:
            if link.source == node_id and link.target in primary_ids and link.target not in visited:
                queue.append((link.target, depth + 1))

    return visited


def compute_role_subgraph(role: RoleDefinition, graph: GraphData) -> RoleSubgraph:
    """Compute the subgraph for a given role."""
    primary = frozenset((*role.owned_steps, *role.reviewed_gates))
    support = frozenset((*role.related_agents, *role.related_inputs))

    flow_path_ids = trace_flow_paths(primary, graph.links)
    node_ids = primary | support | flow_path_ids

    return RoleSubgraph(
        node_ids=node_ids,
        link_indices=find_connecting_links(node_ids, graph.links),
        primary_node_ids=primary,
        support_node_ids=support,
    )


def get_team_connections(
    role: RoleDefinition,
    graph: GraphData,
    roles: Iterable[RoleDefinition] | None = None,
) -> list[TeamConnection]:
    """Find how other roles overlap with this one.

    Roles sharing node ids come first, in catalog order. Roles with no
    shared node but a graph link between the two node sets follow, with an
    empty shared_node_ids.

    Args:
        role: Role to compare against.
        graph: Pipeline graph used for link-based connections.
        roles: Roles to compare with. Defaults to the content production catalog.
    """
    others = [r for r in (ROLE_DEFINITIONS if roles is None else roles) if r.id != role.id]
    my_node_ids = set(get_role_node_ids(role))
    connections: list[TeamConnection] = []
    connected: set[str] = set()

    for other in others:
        shared = [node_id for node_id in get_role_node_ids(other) if node_id in my_node_ids]
        if shared:
            connections.append(TeamConnection(other.id, other.title, shared))
            connected.add(other.id)

    for other in others:
        if other.id in connected:
            continue
        other_node_ids = set(get_role_node_ids(other))
        has_link = any(
            (link.source in my_node_ids and link.target in other_node_ids)
            or (link.target in my_node_ids and link.source in other_node_ids)
            for link in graph.links
        )
        if has_link:
            connections.append(TeamConnection(other.id, other.title, []))
            connected.add(other.id)

    return connections


def build_ordered_node_ids(
    role: RoleDefinition,
    graph: GraphData,
    workflow_order: Sequence[str] = FULL_WORKFLOW_ORDER,
) -> list[str]:
    """Order the nodes of a role for a walkthrough.

    Only nodes present in the graph are included. Steps and gates come
    first in workflow order, then agents, then inputs in definition order.
    Each id appears once.
    """
    existing = graph.node_ids()
    pipeline = set(role.owned_steps) | set(role.reviewed_gates)

    ordered = [node_id for node_id in workflow_order if node_id in pipeline and node_id in existing]
    seen = set(ordered)
    for node_id in (*role.related_agents, *role.related_inputs):
        if node_id in existing and node_id not in seen:
            ordered.append(node_id)
            seen.add(node_id)
    return ordered
