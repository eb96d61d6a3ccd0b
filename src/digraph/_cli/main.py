"""Command line interface for inspecting and querying graph files."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from digraph._errors import GraphError, GraphFormatError
from digraph._graph import Graph, depth_first_search, dijkstra, topological_sort
from digraph._io import dump_graph, load_graph

from .config import ConfigError, get_config

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Directed, weighted graph toolkit."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _resolve_graph_path(graph_path: Path | None) -> Path:
    """Use the given path, or fall back to [tool.digraph].graph."""
    if graph_path is not None:
        return graph_path

    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if config.graph is None:
        err_console.print("[red]Error: No graph file given and no graph configured in pyproject.toml[/red]")
        raise typer.Exit(code=1)

    logger.debug(f"Using graph from config: {config.graph}")
    return config.graph


def _load(graph_path: Path | None) -> Graph[Any]:
    path = _resolve_graph_path(graph_path)
    if not path.exists():
        err_console.print(f"[red]Error: Graph file not found: {path}[/red]")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")
    try:
        return load_graph(path)
    except (GraphFormatError, ValidationError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _resolve_node(graph: Graph[Any], text: str) -> Any:
    """Map a command line node name to the graph's own id.

    Ids loaded from a file may be numbers, so a name matches the first node
    whose string form equals it. Unmatched names are returned unchanged.
    """
    if text in graph:
        return text
    return next((node for node in graph.all_nodes() if str(node) == text), text)


def _resolve_sources(graph: Graph[Any], names: list[str] | None) -> list[Any] | None:
    if names is None:
        return None
    return [_resolve_node(graph, name) for name in names]


def _print_order(nodes: list[Any]) -> None:
    for node in nodes:
        out_console.print(escape(str(node)))


GraphArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a graph file (.json or .toml). Defaults to the graph set in pyproject.toml"),
]
SourceOption = Annotated[
    list[str] | None,
    typer.Option("-s", "--source", help="Source node to start from (repeatable). Defaults to all nodes"),
]
ExcludeSourcesOption = Annotated[
    bool,
    typer.Option("--exclude-sources", help="Leave the source nodes out of the result"),
]


@app.command()
def info(graph_path: GraphArgument = None) -> None:
    """Show the nodes of a graph with their degrees."""
    graph = _load(graph_path)
    nodes = graph.all_nodes()

    table = Table(title="Nodes")
    table.add_column("Node", style="bold")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    for node in nodes:
        table.add_row(escape(str(node)), str(graph.indegree(node)), str(graph.outdegree(node)))

    out_console.print(table)
    edge_count = sum(graph.outdegree(node) for node in nodes)
    out_console.print(f"{len(nodes)} nodes, {edge_count} edges")


@app.command()
def dfs(
    graph_path: GraphArgument = None,
    *,
    source: SourceOption = None,
    exclude_sources: ExcludeSourcesOption = False,
) -> None:
    """Print nodes in depth-first finish order."""
    graph = _load(graph_path)
    sources = _resolve_sources(graph, source)
    _print_order(depth_first_search(graph, sources, include_source_nodes=not exclude_sources))


@app.command()
def toposort(
    graph_path: GraphArgument = None,
    *,
    source: SourceOption = None,
    exclude_sources: ExcludeSourcesOption = False,
) -> None:
    """Print nodes in topological order (cycles are not detected)."""
    graph = _load(graph_path)
    sources = _resolve_sources(graph, source)
    _print_order(topological_sort(graph, sources, include_source_nodes=not exclude_sources))


@app.command()
def path(
    source: Annotated[
        str,
        typer.Argument(help="Start node (numeric ids in the graph file are matched by their text)"),
    ],
    destination: Annotated[str, typer.Argument(help="End node")],
    *,
    graph_path: Annotated[
        Path | None,
        typer.Option(
            "-g",
            "--graph",
            help="Path to a graph file (.json or .toml). Defaults to the graph set in pyproject.toml",
        ),
    ] = None,
    avoid: Annotated[
        list[str] | None,
        typer.Option("--avoid", help="Node the path must not pass through (repeatable)"),
    ] = None,
) -> None:
    """Find the shortest path between two nodes."""
    graph = _load(graph_path)
    avoided = {_resolve_node(graph, name) for name in avoid or ()}

    try:
        result = dijkstra(
            graph,
            _resolve_node(graph, source),
            _resolve_node(graph, destination),
            lambda node: node not in avoided,
        )
    except GraphError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    out_console.print(" -> ".join(escape(str(node)) for node in result.path))
    out_console.print(f"distance: {result.distance}")


@app.command()
def convert(
    input: Annotated[  # noqa: A002
        Path,
        typer.Argument(help="Graph file to read (.json or .toml)"),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Graph file to write (.json or .toml)"),
    ],
) -> None:
    """Rewrite a graph file in another format."""
    graph = _load(input)

    try:
        dump_graph(graph, output)
    except GraphFormatError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    err_console.print(f"[green]✓ Graph written to {output}[/green]")


def main() -> None:
    app()
