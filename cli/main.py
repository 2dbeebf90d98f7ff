"""
flatgraph CLI

Command-line interface for exploring small directed graphs.
Graphs are described inline with repeated --edge options whose endpoints
are integer node labels; each distinct label becomes one node.

Commands:
    flatgraph demo                       Walk through the API on a sample graph
    flatgraph path <start> <end> -e ...  Print a shortest path between two labels
    flatgraph distance <start> <end> -e  Print the BFS distance between two labels
    flatgraph boundary -e ...            Print the nodes without outgoing edges

Usage:
    $ flatgraph path 0 5 -e 0:3 -e 3:5 -e 0:4 -e 4:5
    $ flatgraph boundary -e 0:1 -e 1:2
"""

import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from flatgraph import __version__, config
from flatgraph.graph import Graph
from flatgraph.models import Edge, Node

# Initialize Typer app and Rich console
app = typer.Typer(
    name="flatgraph",
    help="flatgraph: query small directed graphs from the command line",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)

EDGE_HELP = (
    f"Directed edge as SOURCE{config.EDGE_SEPARATOR}TARGET integer labels; repeat for more edges"
)


def parse_edge(spec: str) -> tuple[int, int]:
    """
    Parse an --edge option into a pair of integer labels.

    Args:
        spec: Text such as "0:3"

    Returns:
        The (source, target) labels

    Raises:
        ValueError: If the text is not two integers around the separator
    """
    parts = spec.split(config.EDGE_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(
            f"Edge '{spec}' must look like SOURCE{config.EDGE_SEPARATOR}TARGET"
        )
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Edge '{spec}' endpoints must be integers") from None


def build_graph(edge_specs: list[str]) -> tuple[Graph, dict[int, int]]:
    """
    Build a graph of integer-labelled nodes from --edge options.

    Returns:
        The graph and a mapping from label to node index
    """
    graph = Graph()
    index_of: dict[int, int] = {}

    for spec in edge_specs:
        source, target = parse_edge(spec)
        for label in (source, target):
            index_of[label] = graph.add_node(Node.integer(label))
        graph.add_edge(Edge(index_of[source], index_of[target]))

    logger.debug("Built graph with %d node(s), %d edge(s)", graph.node_count, graph.edge_count)
    return graph, index_of


def _load(edge_specs: Optional[list[str]]) -> tuple[Graph, dict[int, int]]:
    """Build the graph for a command, exiting with an error on bad input."""
    try:
        return build_graph(edge_specs or [])
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _resolve(index_of: dict[int, int], label: int) -> int:
    """Map a label to its node index, exiting if the graph lacks it."""
    if label not in index_of:
        console.print(f"[red]Node {label} is not in the graph.[/red]")
        raise typer.Exit(1)
    return index_of[label]


def _label(graph: Graph, idx: int) -> str:
    return str(graph.get_node(idx).value)


@app.command()
def path(
    start: int = typer.Argument(..., help="Label of the node to start from"),
    end: int = typer.Argument(..., help="Label of the node to reach"),
    edges: Optional[list[str]] = typer.Option(None, "--edge", "-e", help=EDGE_HELP),
) -> None:
    """
    Print a shortest directed path between two nodes.

    Exits with status 1 when no path exists.
    """
    graph, index_of = _load(edges)
    found = graph.shortest_path(_resolve(index_of, start), _resolve(index_of, end))

    if found is None:
        console.print(f"[yellow]No path from {start} to {end}.[/yellow]")
        raise typer.Exit(1)

    console.print(" → ".join(_label(graph, idx) for idx in found))


@app.command()
def distance(
    start: int = typer.Argument(..., help="Label of the node to start from"),
    end: int = typer.Argument(..., help="Label of the node to reach"),
    edges: Optional[list[str]] = typer.Option(None, "--edge", "-e", help=EDGE_HELP),
) -> None:
    """
    Print the breadth-first search distance between two nodes.

    The value counts nodes expanded before the target is discovered.
    Exits with status 1 when the target is unreachable.
    """
    graph, index_of = _load(edges)
    result = graph.bfs_distance(_resolve(index_of, start), _resolve(index_of, end))

    if result is None:
        console.print(f"[yellow]{end} is unreachable from {start}.[/yellow]")
        raise typer.Exit(1)

    console.print(str(result))


@app.command()
def boundary(
    edges: Optional[list[str]] = typer.Option(None, "--edge", "-e", help=EDGE_HELP),
) -> None:
    """
    Print every node that has no outgoing edge.
    """
    graph, _ = _load(edges)
    found = graph.boundary()

    if found is None:
        console.print("[yellow]Every node has an outgoing edge.[/yellow]")
        return

    console.print(", ".join(_label(graph, idx) for idx in found))


@app.command()
def demo() -> None:
    """
    Build the sample graph and exercise every query on it.

    The sample has six text nodes; node 0 fans out to 1-4 and both
    3 and 4 lead to 5. After the queries, node 3 is removed to show
    how the last node takes over its index.
    """
    single = Graph()
    single.add_node(Node.integer(1))
    console.print(f"Single node boundary: {single.boundary()}")

    graph = Graph()
    for label in config.DEMO_LABELS:
        graph.add_node(Node.text(label))
    for source, target in config.DEMO_EDGES:
        graph.add_edge(Edge(source, target))

    _print_graph(graph, "Sample Graph")

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Query", style="dim")
    table.add_column("Result", style="bold")
    table.add_row("boundary()", str(graph.boundary()))
    table.add_row("bfs_distance(0, 5)", str(graph.bfs_distance(0, 5)))
    for start, end in ((0, 5), (2, 5), (3, 5)):
        table.add_row(f"shortest_path({start}, {end})", str(graph.shortest_path(start, end)))
    console.print(Panel(table, title="[bold blue]Queries[/bold blue]", border_style="blue"))

    removed = graph.remove_node(3)
    console.print(f"\n[bold]Removed node 3:[/bold] {removed}")
    _print_graph(graph, "After Removal")
    console.print(f"reachable_nodes_from(0): {graph.reachable_nodes_from(0)}")
    console.print(f"nodes_that_can_reach(1): {graph.nodes_that_can_reach(1)}")


def configure_logging(level: str) -> None:
    """
    Send flatgraph and CLI log records to the Rich console at the given level.

    Handlers are attached to the package loggers rather than the root logger,
    and any handler from an earlier call is replaced.
    """
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))

    for name in config.LOGGER_NAMES:
        package_logger = logging.getLogger(name)
        for old in [h for h in package_logger.handlers if isinstance(h, RichHandler)]:
            package_logger.removeHandler(old)
        package_logger.addHandler(handler)
        package_logger.setLevel(level)


# Helper functions for output formatting

def _print_graph(graph: Graph, title: str) -> None:
    """Print the nodes of a graph with their outgoing edges."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Node")
    table.add_column("Reaches", style="dim")

    for idx, node in enumerate(graph.nodes):
        reaches = graph.reachable_nodes_from(idx)
        table.add_row(str(idx), str(node), ", ".join(map(str, reaches)) or "-")

    console.print(table)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log graph operations at DEBUG level",
    ),
) -> None:
    """
    flatgraph: query small directed graphs from the command line.
    """
    if version:
        console.print(f"[bold]flatgraph[/bold] version {__version__}")
        raise typer.Exit()

    configure_logging("DEBUG" if verbose else config.LOG_LEVEL)


if __name__ == "__main__":
    app()
