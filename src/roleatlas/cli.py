"""
roleatlas CLI.

Commands:
- list: List the roles of a catalog
- show: Show one role as Markdown or JSON
- stats: Show a role's node counts and graph coverage
- validate: Validate a catalog, optionally against a pipeline graph
- brief: Write a Markdown brief for a role
- connections: List the roles a role works with in a pipeline graph
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from roleatlas._version import get_version
from roleatlas.core.environment import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    get_default_catalog,
    parse_catalog_name,
)
from roleatlas.core.errors import RoleAtlasError
from roleatlas.roles.ir import RoleCatalog, RoleCategory, RoleDefinition

app = typer.Typer(
    help="Explore AI-era role catalogs and their pipeline graph footprint.",
    no_args_is_help=True,
)

console = Console()

CatalogOption = Annotated[
    str | None,
    typer.Option(
        "--catalog",
        "-c",
        help="Built-in catalog: content-production or front-office (default: $ROLEATLAS_CATALOG)",
    ),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Catalog YAML file (overrides --catalog)"),
]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"roleatlas {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", envvar=LOG_LEVEL_ENV_VAR, help="Logging level"),
    ] = None,
) -> None:
    """Explore AI-era role catalogs and their pipeline graph footprint."""
    configure_logging(log_level)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(code=1)


def _load_catalog(catalog: str | None, file: Path | None) -> RoleCatalog:
    from roleatlas.roles.loader import load_builtin_catalog, load_catalog

    try:
        if file is not None:
            return load_catalog(file)
        if catalog is None:
            return load_builtin_catalog(get_default_catalog())
        name = parse_catalog_name(catalog)
        if name is None:
            raise _fail(f"Unknown catalog '{catalog}'. Use content-production or front-office.")
        return load_builtin_catalog(name)
    except RoleAtlasError as e:
        raise _fail(str(e))


def _get_role(role_catalog: RoleCatalog, role_id: str) -> RoleDefinition:
    from roleatlas.roles.catalog import build_role_map

    try:
        role_map = build_role_map(role_catalog.roles)
    except RoleAtlasError as e:
        raise _fail(str(e))

    role = role_map.get(role_id)
    if role is None:
        raise _fail(f"Unknown role '{role_id}' in catalog '{role_catalog.name}'")
    return role


@app.command("list")
def list_roles(
    catalog: CatalogOption = None,
    file: FileOption = None,
    category: Annotated[
        RoleCategory | None,
        typer.Option("--category", help="Only list roles in this category"),
    ] = None,
) -> None:
    """List the roles of a catalog."""
    from roleatlas.roles.catalog import compute_role_stats

    role_catalog = _load_catalog(catalog, file)
    roles = [r for r in role_catalog.roles if category is None or r.category == category]

    table = Table(title=role_catalog.label)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Steps", justify="right")
    table.add_column("Gates", justify="right")
    table.add_column("Nodes", justify="right")

    for role in roles:
        stats = compute_role_stats(role, 0)
        table.add_row(
            role.id,
            role.title,
            role_catalog.categories[role.category].label,
            str(stats.steps),
            str(stats.gates),
            str(stats.total),
        )

    console.print(table)
    typer.echo(f"{len(roles)} roles")


@app.command("show")
def show_role(
    role_id: Annotated[str, typer.Argument(help="Role id")],
    catalog: CatalogOption = None,
    file: FileOption = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show one role."""
    from roleatlas.roles.generators.narrative import render_role_brief

    role_catalog = _load_catalog(catalog, file)
    role = _get_role(role_catalog, role_id)

    if output_json:
        typer.echo(role.model_dump_json(indent=2, exclude_none=True))
        return

    console.print(Markdown(render_role_brief(role, categories=role_catalog.categories)))


@app.command("stats")
def role_stats(
    role_id: Annotated[str, typer.Argument(help="Role id")],
    total: Annotated[int, typer.Option("--total", "-t", min=0, help="Total nodes in the graph")],
    catalog: CatalogOption = None,
    file: FileOption = None,
) -> None:
    """Show a role's node counts and graph coverage."""
    from roleatlas.roles.catalog import compute_role_stats

    role = _get_role(_load_catalog(catalog, file), role_id)
    stats = compute_role_stats(role, total)

    typer.echo(f"Role:     {role.title} ({role.id})")
    typer.echo(f"Steps:    {stats.steps}")
    typer.echo(f"Gates:    {stats.gates}")
    typer.echo(f"Total:    {stats.total}")
    typer.echo(f"Coverage: {stats.coverage_pct}%")


@app.command("validate")
def validate(
    catalog: CatalogOption = None,
    file: FileOption = None,
    graph_path: Annotated[
        Path | None,
        typer.Option("--graph", "-g", help="Pipeline graph (JSON/YAML) to check node ids against"),
    ] = None,
) -> None:
    """Validate a role catalog."""
    from roleatlas.graph.loader import load_graph
    from roleatlas.roles.loader import validate_catalog

    role_catalog = _load_catalog(catalog, file)

    graph = None
    if graph_path is not None:
        try:
            graph = load_graph(graph_path)
        except RoleAtlasError as e:
            raise _fail(str(e))

    result = validate_catalog(role_catalog, graph)

    if result.errors:
        typer.echo(f"Errors ({len(result.errors)}):")
        for err in result.errors:
            typer.echo(f"  ✗ {err}")

    if result.warnings:
        typer.echo(f"Warnings ({len(result.warnings)}):")
        for warn in result.warnings:
            typer.echo(f"  ⚠ {warn}")

    if result.is_valid:
        typer.echo(f"Catalog '{role_catalog.name}' is valid ({len(role_catalog.roles)} roles).")
    else:
        typer.echo(f"Catalog '{role_catalog.name}' has errors.")
        raise typer.Exit(code=1)


@app.command("brief")
def brief(
    role_id: Annotated[str, typer.Argument(help="Role id")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file path")
    ] = None,
    total: Annotated[
        int | None,
        typer.Option("--total", "-t", min=0, help="Total graph nodes, adds a coverage table"),
    ] = None,
    catalog: CatalogOption = None,
    file: FileOption = None,
) -> None:
    """Write a Markdown brief for a role."""
    from roleatlas.roles.generators.narrative import generate_role_brief

    role_catalog = _load_catalog(catalog, file)
    role = _get_role(role_catalog, role_id)

    out_path = output or Path(f"{role.id}.md")
    result = generate_role_brief(
        role,
        out_path,
        categories=role_catalog.categories,
        total_graph_nodes=total,
    )
    if not result.success:
        raise _fail(result.error or "brief generation failed")
    typer.echo(f"Generated brief: {result.output_path}")


@app.command("connections")
def connections(
    role_id: Annotated[str, typer.Argument(help="Role id")],
    graph_path: Annotated[
        Path, typer.Option("--graph", "-g", help="Pipeline graph (JSON/YAML)")
    ],
    catalog: CatalogOption = None,
    file: FileOption = None,
) -> None:
    """List the roles a role works with."""
    from roleatlas.graph.loader import load_graph
    from roleatlas.roles.subgraph import compute_role_subgraph, get_team_connections

    role_catalog = _load_catalog(catalog, file)
    role = _get_role(role_catalog, role_id)

    try:
        graph = load_graph(graph_path)
    except RoleAtlasError as e:
        raise _fail(str(e))

    subgraph = compute_role_subgraph(role, graph)
    team = get_team_connections(role, graph, role_catalog.roles)

    typer.echo(
        f"{role.title}: {len(subgraph.node_ids)} nodes, {len(subgraph.link_indices)} links"
    )
    if not team:
        typer.echo("No connected roles.")
        return

    for conn in team:
        shared = ", ".join(conn.shared_node_ids) if conn.shared_node_ids else "(linked)"
        typer.echo(f"  {conn.role_id}: {shared}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
