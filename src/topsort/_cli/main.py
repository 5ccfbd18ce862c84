import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from topsort._graph import CycleError, Graph
from topsort._graph._algorithms import CYCLE_SEPARATOR
from topsort._io import GraphFileError, load_graph

from .config import ConfigError, TopsortConfig, get_config
from .graph_query import get_dependency_tree, sort_from
from .graph_render import render_order, render_tree

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
    """Topological ordering of dependency graphs."""
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


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_config() -> TopsortConfig:
    try:
        return get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e


def _load_graph(graph_path: Path | None, config: TopsortConfig) -> Graph[str]:
    """Load the graph from the given path, falling back to [tool.topsort].graph."""
    if graph_path is None:
        graph_path = config.graph
    if graph_path is None:
        msg = "No graph file given. Pass --graph or set [tool.topsort].graph in pyproject.toml"
        raise _fail(msg)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {escape(str(graph_path))}")
    try:
        graph = load_graph(graph_path)
    except GraphFileError as e:
        raise _fail(str(e)) from e
    logger.debug(f"Graph has {len(graph)} nodes")
    return graph


def _fail_on_cycle(error: CycleError) -> typer.Exit:
    cycle = CYCLE_SEPARATOR.join(str(key) for key in error.cycle)
    err_console.print(f"[red]✗ Dependency cycle detected:[/red] {escape(cycle)}")
    return typer.Exit(code=1)


@app.command()
def sort(
    start: Annotated[str, typer.Argument(help="Node to start the sort from")],
    *,
    graph_path: Annotated[
        Path | None,
        typer.Option("-g", "--graph", help="Path to graph TOML file"),
    ] = None,
    stable: Annotated[
        bool | None,
        typer.Option(
            "--stable/--fast",
            help="Visit edges in key order for a reproducible result (default from [tool.topsort].stable)",
        ),
    ] = None,
) -> None:
    """Print the nodes reachable from START, dependencies first."""
    config = _load_config()
    graph = _load_graph(graph_path, config)
    if stable is None:
        stable = config.stable

    try:
        result = sort_from(graph, start, stable=stable)
    except KeyError as e:
        raise _fail(f"Node not found: {start}") from e
    except CycleError as e:
        raise _fail_on_cycle(e) from e

    err_console.print(f"[green]✓ Sorted {len(result.order)} nodes[/green]")
    render_order(result, out_console)


@app.command()
def tree(
    start: Annotated[str, typer.Argument(help="Node at the root of the tree")],
    *,
    graph_path: Annotated[
        Path | None,
        typer.Option("-g", "--graph", help="Path to graph TOML file"),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", min=1, help="Maximum depth to display"),
    ] = None,
) -> None:
    """Show what START depends on as a tree."""
    config = _load_config()
    graph = _load_graph(graph_path, config)

    try:
        tree_node = get_dependency_tree(graph, start, max_depth=max_depth)
    except KeyError as e:
        raise _fail(f"Node not found: {start}") from e
    except CycleError as e:
        raise _fail_on_cycle(e) from e

    render_tree(tree_node, out_console)


def main() -> None:
    app()
