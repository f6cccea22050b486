"""Tests for the Markdown role brief generator."""

from __future__ import annotations

from pathlib import Path

from roleatlas.roles import frontoffice
from roleatlas.roles.catalog import ROLE_CATEGORIES, ROLE_MAP
from roleatlas.roles.generators.narrative import generate_role_brief, render_role_brief
from roleatlas.roles.ir import JourneyStage, NodeJourney, RoleNarrative


class TestRenderRoleBrief:
    def test_header(self, sample_role):
        content = render_role_brief(sample_role)
        assert content.startswith("# Sample Role\n")
        assert "*Tester. Checker. Verifier.*" in content
        assert "**Category:** Strategy" in content

    def test_category_from_table(self, sample_role):
        content = render_role_brief(sample_role, categories=ROLE_CATEGORIES)
        info = ROLE_CATEGORIES[sample_role.category]
        assert f"**Category:** {info.label} ({info.subtitle})" in content

    def test_footprint(self, sample_role):
        content = render_role_brief(sample_role)
        assert "## Pipeline Footprint" in content
        assert "- **Owned steps:** `a`, `b`" in content
        assert "- **Related agents:** none" in content

    def test_coverage_table_only_with_total(self, sample_role):
        assert "Graph coverage" not in render_role_brief(sample_role)
        content = render_role_brief(sample_role, total_graph_nodes=20)
        assert "| Nodes touched | 5 |" in content
        assert "| Graph coverage | 25% |" in content

    def test_zero_graph_coverage(self, sample_role):
        content = render_role_brief(sample_role, total_graph_nodes=0)
        assert "| Graph coverage | 0% |" in content

    def test_journeys(self, sample_role):
        content = render_role_brief(sample_role)
        assert "## Key Insight\n\nSample insight." in content
        assert "### `a`" in content
        pre = content.index("#### Pre-AI")
        agents = content.index("#### AI Agents")
        agentic = content.index("#### AI Agentic")
        assert pre < agents < agentic
        assert "*a before*" in content

    def test_optional_journey_fields(self, make_role):
        stage = JourneyStage(
            summary="s",
            detail="d",
            benchmarks=["2x faster"],
            role_evolution="From doer to director.",
        )
        role = make_role(
            narrative=RoleNarrative(
                key_insight="k",
                node_journeys={"n": NodeJourney(pre_ai=stage, ai_agents=stage, ai_agentic=stage)},
            )
        )
        content = render_role_brief(role)
        assert "**Benchmarks:**\n- 2x faster" in content
        assert "**Role evolution:** From doer to director." in content
        assert "Anti-patterns" not in content

    def test_no_optional_sections(self, make_role):
        content = render_role_brief(make_role())
        assert "## Pain Points" not in content
        assert "## Stage Overviews" not in content
        assert "## Node Journeys" not in content
        assert content.endswith("*Generated by roleatlas*")

    def test_front_office_role(self):
        cro = frontoffice.ROLE_MAP_FRONTOFFICE["chief-revenue-officer"]
        content = render_role_brief(cro, categories=frontoffice.ROLE_CATEGORIES_FRONTOFFICE)
        assert "**Category:** Strategy" in content
        assert "## Pain Points" in content
        assert "## Stage Overviews" in content
        assert "**Time allocation:**" in content

    def test_content_role(self):
        content = render_role_brief(ROLE_MAP["content-director"], total_graph_nodes=44)
        assert "# Content Director" in content
        assert "| Graph coverage | 25% |" in content


class TestGenerateRoleBrief:
    def test_writes_file(self, sample_role, tmp_path: Path):
        out = tmp_path / "briefs" / "sample-role.md"
        result = generate_role_brief(sample_role, out, total_graph_nodes=20)
        assert result.success
        assert result.output_path == out
        assert result.error is None
        assert out.read_text(encoding="utf-8") == render_role_brief(
            sample_role, total_graph_nodes=20
        )

    def test_failure_is_reported(self, sample_role, tmp_path: Path):
        # Writing to an existing directory fails
        result = generate_role_brief(sample_role, tmp_path)
        assert not result.success
        assert result.output_path is None
        assert result.error
