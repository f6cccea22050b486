"""
Markdown role brief generator.

Renders one role, its graph footprint and its maturity-stage narrative as
a Markdown document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from roleatlas.roles.catalog import compute_role_stats
from roleatlas.roles.ir import (
    CategoryInfo,
    JourneyStage,
    MaturityStage,
    RoleCategory,
    RoleDefinition,
)

logger = logging.getLogger(__name__)

STAGE_TITLES: dict[MaturityStage, str] = {
    MaturityStage.PRE_AI: "Pre-AI",
    MaturityStage.AI_AGENTS: "AI Agents",
    MaturityStage.AI_AGENTIC: "AI Agentic",
}


@dataclass
class GeneratorResult:
    """Result of a generator run."""

    success: bool
    output_path: Path | None = None
    error: str | None = None


def _bullets(title: str, items: tuple[str, ...] | None) -> list[str]:
    if not items:
        return []
    return [f"**{title}:**", *(f"- {item}" for item in items), ""]


def _node_list(title: str, node_ids: tuple[str, ...]) -> str:
    value = ", ".join(f"`{n}`" for n in node_ids) if node_ids else "none"
    return f"- **{title}:** {value}"


def _journey_stage_lines(stage: MaturityStage, journey_stage: JourneyStage) -> list[str]:
    lines = [f"#### {STAGE_TITLES[stage]}", "", f"*{journey_stage.summary}*", ""]
    lines.append(journey_stage.detail)
    lines.append("")
    lines.extend(_bullets("Pain points", journey_stage.pain_points))
    lines.extend(_bullets("Benchmarks", journey_stage.benchmarks))
    lines.extend(_bullets("Outcomes", journey_stage.outcomes))
    if journey_stage.role_evolution:
        lines.append(f"**Role evolution:** {journey_stage.role_evolution}")
        lines.append("")
    lines.extend(_bullets("Anti-patterns", journey_stage.anti_patterns))
    return lines


def render_role_brief(
    role: RoleDefinition,
    *,
    categories: Mapping[RoleCategory, CategoryInfo] | None = None,
    total_graph_nodes: int | None = None,
) -> str:
    """Render a role as Markdown."""
    lines: list[str] = [f"# {role.title}", "", f"*{role.tagline}*", ""]

    category = categories.get(role.category) if categories else None
    if category:
        lines.append(f"**Category:** {category.label} ({category.subtitle})")
    else:
        lines.append(f"**Category:** {role.category.value.title()}")
    lines.append("")
    lines.append(role.description)
    lines.append("")

    # Graph footprint
    lines.append("## Pipeline Footprint")
    lines.append("")
    lines.append(_node_list("Owned steps", role.owned_steps))
    lines.append(_node_list("Reviewed gates", role.reviewed_gates))
    lines.append(_node_list("Related agents", role.related_agents))
    lines.append(_node_list("Related inputs", role.related_inputs))
    lines.append("")

    if total_graph_nodes is not None:
        stats = compute_role_stats(role, total_graph_nodes)
        lines.append("| Metric | Value |")
        lines.append("|--------|-------|")
        lines.append(f"| Steps | {stats.steps} |")
        lines.append(f"| Gates | {stats.gates} |")
        lines.append(f"| Nodes touched | {stats.total} |")
        lines.append(f"| Graph coverage | {stats.coverage_pct}% |")
        lines.append("")

    if role.pain_points:
        lines.append("## Pain Points")
        lines.append("")
        lines.extend(f"- {point}" for point in role.pain_points)
        lines.append("")

    lines.append("## Key Insight")
    lines.append("")
    lines.append(role.narrative.key_insight)
    lines.append("")

    overviews = role.narrative.stage_overviews
    if overviews:
        lines.append("## Stage Overviews")
        lines.append("")
        for stage, overview in overviews.stages():
            lines.append(f"### {STAGE_TITLES[stage]}")
            lines.append("")
            lines.append(overview.narrative)
            lines.append("")
            lines.append(f"**Time allocation:** {overview.time_allocation}")
            lines.append("")
            lines.extend(_bullets("Critical metrics", overview.critical_metrics))
            lines.append(f"**Strategic opportunity:** {overview.strategic_opportunity}")
            lines.append("")

    if role.narrative.node_journeys:
        lines.append("## Node Journeys")
        lines.append("")
        for node_id, journey in role.narrative.node_journeys.items():
            lines.append(f"### `{node_id}`")
            lines.append("")
            for stage, journey_stage in journey.stages():
                lines.extend(_journey_stage_lines(stage, journey_stage))

    lines.append("---")
    lines.append("*Generated by roleatlas*")
    return "\n".join(lines)


def generate_role_brief(
    role: RoleDefinition,
    output_path: Path,
    *,
    categories: Mapping[RoleCategory, CategoryInfo] | None = None,
    total_graph_nodes: int | None = None,
) -> GeneratorResult:
    """Generate a Markdown brief for a role.

    Args:
        role: Role to render.
        output_path: Path to write the .md file.
        categories: Category table used for the category label.
        total_graph_nodes: Graph size; adds a coverage table when given.

    Returns:
        GeneratorResult with success status and output path.
    """
    try:
        content = render_role_brief(
            role,
            categories=categories,
            total_graph_nodes=total_graph_nodes,
        )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return GeneratorResult(success=True, output_path=output_path)

    except Exception as e:
        logger.exception("Error generating role brief")
        return GeneratorResult(success=False, error=str(e))
