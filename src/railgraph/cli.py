"""CLI interface for railgraph using Typer framework."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from railgraph import __description__, __version__
from railgraph.builders import ModelsDiagramBuilder, build_diagram, load_graph_document, load_schema_facts
from railgraph.config import LogLevel, RailgraphConfig, load_config
from railgraph.graph import DiagramGraph, EdgeKind, NodeKind, available_formats, get_renderer

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="railgraph",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def _setup_logging(level: str) -> None:
    """Configure application logging on stderr."""
    logging.basicConfig(
        level=_LOG_LEVELS.get(level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _parse_size(value: str | None) -> tuple[int, int] | None:
    """Parse a ``W,H`` canvas size."""
    if value is None:
        return None
    try:
        width, height = (int(part) for part in value.split(","))
    except ValueError:
        raise ValueError(f"Invalid size '{value}'. Expected WIDTH,HEIGHT, e.g. 8,11")
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid size '{value}'. Width and height must be positive")
    return width, height


def _load(config: Path | None, verbose: bool) -> RailgraphConfig:
    railgraph_config = load_config(config)
    _setup_logging(LogLevel.DEBUG.value if verbose else railgraph_config.logging.level)
    return railgraph_config


def _emit(diagram: DiagramGraph, format: str, hops: int, out: Path | None) -> None:
    """Render ``diagram`` and write it to ``out`` or stdout."""
    renderer = get_renderer(format)
    logger.debug(f"Rendering {format} output with {hops} pruning rounds")
    rendered = renderer.render(diagram, hops)

    if out:
        output_file = out.resolve()
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(rendered)
        err_console.print(f"[green]Diagram generated:[/green] {output_file}")
    else:
        typer.echo(rendered, nl=False)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"railgraph version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """railgraph - Diagram graph model and Graphviz DOT renderer."""


@app.command()
def render(
    graph: Annotated[
        Path,
        typer.Argument(help="Graph document (JSON with nodes and edges)")
    ],
    hops: Annotated[
        Optional[int],
        typer.Option("--hops", "-n", help="Pruning rounds around the origin node (0: no pruning)")
    ] = None,
    size: Annotated[
        Optional[str],
        typer.Option("--size", "-s", help="Canvas size as WIDTH,HEIGHT")
    ] = None,
    label: Annotated[
        Optional[bool],
        typer.Option("--label/--no-label", help="Add a diagram information node")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: dot, xmi")
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .railgraph.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Render a raw graph document."""
    try:
        railgraph_config = _load(config, verbose)
        document = load_graph_document(graph)

        diagram = build_diagram(
            document,
            size=_parse_size(size) or railgraph_config.diagram.size,
            schema_version=railgraph_config.diagram.schema_version,
        )
        diagram.set_show_label(railgraph_config.diagram.show_label if label is None else label)

        _emit(diagram,
              format or railgraph_config.output.format,
              railgraph_config.diagram.hops if hops is None else hops,
              out)

    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def models(
    schema: Annotated[
        Path,
        typer.Argument(help="Schema facts document (JSON)")
    ],
    brief: Annotated[bool, typer.Option("--brief", "-b", help="Generate compact diagram (no attributes)")] = False,
    hide_magic: Annotated[bool, typer.Option("--hide-magic", help="Hide magic field names")] = False,
    hide_types: Annotated[bool, typer.Option("--hide-types", help="Hide attribute types")] = False,
    inheritance: Annotated[bool, typer.Option("--inheritance", "-i", help="Include inheritance relations")] = False,
    transitive: Annotated[bool, typer.Option("--transitive", help="Include transitive associations")] = False,
    only_simple_edge: Annotated[
        bool, typer.Option("--only-simple-edge", help="Skip many-to-many and through associations")
    ] = False,
    all_classes: Annotated[bool, typer.Option("--all-classes", "-a", help="Include non-model classes")] = False,
    modules: Annotated[bool, typer.Option("--modules", "-m", help="Include modules")] = False,
    fontsize: Annotated[Optional[int], typer.Option("--fontsize", help="Node font size")] = None,
    origin: Annotated[str, typer.Option("--origin", help="Origin node for pruning")] = "",
    hops: Annotated[
        Optional[int],
        typer.Option("--hops", "-n", help="Pruning rounds around the origin node (0: no pruning)")
    ] = None,
    size: Annotated[Optional[str], typer.Option("--size", "-s", help="Canvas size as WIDTH,HEIGHT")] = None,
    label: Annotated[
        Optional[bool], typer.Option("--label/--no-label", help="Add a diagram information node")
    ] = None,
    format: Annotated[Optional[str], typer.Option("--format", "-f", help="Output format: dot, xmi")] = None,
    out: Annotated[
        Optional[Path], typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .railgraph.json)")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
) -> None:
    """Generate a models diagram from schema facts."""
    try:
        railgraph_config = _load(config, verbose)
        schema_facts = load_schema_facts(schema)

        # Command-line flags switch options on, they never switch config off
        flags = {
            "brief": brief,
            "hide_magic": hide_magic,
            "hide_types": hide_types,
            "inheritance": inheritance,
            "transitive": transitive,
            "only_simple_edge": only_simple_edge,
            "all_classes": all_classes,
            "modules": modules,
        }
        updates = {name: True for name, value in flags.items() if value}
        if fontsize is not None:
            updates["fontsize"] = fontsize
        models_options = railgraph_config.models.model_copy(update=updates)

        diagram_options = {"size": _parse_size(size) or railgraph_config.diagram.size}
        if railgraph_config.diagram.schema_version:
            diagram_options["schema_version"] = railgraph_config.diagram.schema_version

        builder = ModelsDiagramBuilder(models_options, origin, **diagram_options)
        diagram = builder.build(schema_facts)
        diagram.set_show_label(railgraph_config.diagram.show_label if label is None else label)

        err_console.print(f"[green]OK[/green] Models diagram with {len(diagram.nodes)} nodes "
                          f"and {len(diagram.edges)} edges")
        _emit(diagram,
              format or railgraph_config.output.format,
              railgraph_config.diagram.hops if hops is None else hops,
              out)

    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def kinds() -> None:
    """List the node kinds, edge kinds and output formats."""
    table = Table(title="Diagram vocabulary")
    table.add_column("Category", style="cyan")
    table.add_column("Values", style="white")

    table.add_row("node kinds", ", ".join(kind.value for kind in NodeKind))
    table.add_row("edge kinds", ", ".join(kind.value for kind in EdgeKind))
    table.add_row("formats", ", ".join(available_formats()))

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"railgraph version {__version__}")


if __name__ == "__main__":
    app()
