"""Command-line interface for pipegraph.

Entry point for laying out pipeline trees from files.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import ValidationError

from pipegraph import __version__
from pipegraph.contracts import LayoutResult, Tree
from pipegraph.core.config import PipegraphSettings, load_settings
from pipegraph.core.layout import build, cycles, dangling_edges, is_acyclic, overlapping_nodes
from pipegraph.core.logging import configure_logging, get_logger

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

app = typer.Typer(
    name="pipegraph",
    help="Pipegraph: lay out stream pipeline trees as node/edge diagrams.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pipegraph version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Pipegraph: lay out stream pipeline trees as node/edge diagrams."""


def _format_validation_error(
    title: str,
    message: str,
    hint: str | None = None,
    details: list[str] | None = None,
) -> None:
    """Display a formatted validation error with optional hint and details."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(stderr=True)

    content = Text()
    content.append(message, style="white")

    if details:
        content.append("\n\n")
        for detail in details:
            content.append(f"  • {detail}\n", style="dim")

    if hint:
        content.append("\n")
        content.append("Hint: ", style="yellow bold")
        content.append(hint, style="yellow")

    panel = Panel(
        content,
        title=f"[red bold]❌ {title}[/]",
        border_style="red",
        padding=(0, 1),
    )
    console.print(panel)


def _read_tree_document(source: str) -> Any:
    """Parse a tree document from a file path, or stdin when source is "-".

    YAML is accepted for .yaml/.yml files; everything else is read as JSON.
    """
    if source == "-":
        text = sys.stdin.read()
        return json.loads(text)

    path = Path(source).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Tree file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


def _load_tree_or_exit(source: str) -> Tree:
    try:
        document = _read_tree_document(source)
        return Tree.model_validate(document)
    except FileNotFoundError:
        _format_validation_error(
            title="File Not Found",
            message=f"Tree file does not exist: {source}",
            hint="Check the path and ensure the file exists.",
        )
        raise typer.Exit(1) from None
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        _format_validation_error(
            title="Syntax Error",
            message=f"Failed to parse tree document {source}",
            details=[str(e)],
            hint="Trees are JSON, or YAML when the file ends in .yaml/.yml.",
        )
        raise typer.Exit(1) from None
    except ValidationError as e:
        details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            details.append(f"{loc}: {error['msg']}")
        _format_validation_error(
            title="Tree Validation Failed",
            message=f"Invalid pipeline tree in {source}",
            details=details,
            hint="Check field names and types against the management API tree format.",
        )
        raise typer.Exit(1) from None


def _load_settings_or_exit(settings: Path | None) -> PipegraphSettings:
    if settings is None:
        return PipegraphSettings()
    try:
        return load_settings(settings.expanduser())
    except FileNotFoundError:
        _format_validation_error(
            title="File Not Found",
            message=f"Settings file does not exist: {settings}",
            hint="Check the path and ensure the file exists.",
        )
        raise typer.Exit(1) from None
    except ValidationError as e:
        details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            details.append(f"{loc}: {error['msg']}")
        _format_validation_error(
            title="Configuration Validation Failed",
            message=f"Invalid settings in {settings.name}",
            details=details,
            hint="Paddings must be >= 0 and component sizes > 0.",
        )
        raise typer.Exit(1) from None


def _layout(
    tree_source: str,
    settings_path: Path | None,
    *,
    read_only: bool = False,
    log_level: str | None = None,
    json_logs: bool = False,
) -> LayoutResult:
    config = _load_settings_or_exit(settings_path)
    level = config.logging.level
    if log_level is not None:
        level = log_level.upper()
        if level not in _LOG_LEVELS:
            _format_validation_error(
                title="Invalid Option",
                message=f"Unknown log level: {log_level}",
                hint=f"Use one of {', '.join(_LOG_LEVELS)}.",
            )
            raise typer.Exit(1)
    configure_logging(json_output=json_logs or config.logging.json_output, level=level)
    tree = _load_tree_or_exit(tree_source)
    if read_only and not tree.read_only:
        tree = tree.model_copy(update={"read_only": True})

    logger = get_logger(__name__)
    result = build(tree, settings=config.layout)
    logger.info("tree_laid_out", source=tree_source, nodes=len(result.nodes), edges=len(result.edges))
    return result


@app.command()
def layout(
    tree: str = typer.Argument(..., help="Tree file (JSON, or YAML for .yaml/.yml); '-' reads JSON from stdin."),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the graph JSON here instead of stdout.",
    ),
    read_only: bool = typer.Option(
        False,
        "--read-only",
        help="Lay out as read-only, hiding 'add new component' placeholders.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit JSON log lines on stderr.",
    ),
) -> None:
    """Lay out a pipeline tree and print the node/edge JSON."""
    result = _layout(tree, settings, read_only=read_only, log_level=log_level, json_logs=json_logs)
    rendered = json.dumps(result.to_dict(), indent=2)
    if output is None:
        typer.echo(rendered)
    else:
        output.expanduser().write_text(rendered + "\n", encoding="utf-8")


@app.command()
def validate(
    tree: str = typer.Argument(..., help="Tree file (JSON, or YAML for .yaml/.yml); '-' reads JSON from stdin."),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Validate a pipeline tree and check its layout without printing it."""
    result = _layout(tree, settings)

    dangling = dangling_edges(result)
    if dangling:
        _format_validation_error(
            title="Layout Error",
            message=f"{len(dangling)} edge(s) point at nodes missing from the layout",
            details=[f"{edge.id}: {edge.source} -> {edge.target}" for edge in dangling[:10]],
        )
        raise typer.Exit(1)

    if not is_acyclic(result):
        loops = cycles(result)
        _format_validation_error(
            title="Layout Error",
            message=f"{len(loops)} cycle(s) in the pipeline graph",
            details=[" -> ".join([*loop, loop[0]]) for loop in loops[:10]],
            hint="Each tree entry needs its own path; entries sharing a path are merged.",
        )
        raise typer.Exit(1)

    overlaps = overlapping_nodes(result)
    if overlaps:
        _format_validation_error(
            title="Layout Error",
            message=f"{len(overlaps)} pair(s) of nodes overlap",
            details=[f"{a.data.path or a.id} / {b.data.path or b.id}" for a, b in overlaps[:10]],
            hint="Check the layout settings for zero-sized components.",
        )
        raise typer.Exit(1)

    typer.echo("✅ Pipeline tree valid!")
    typer.echo(f"  Graph: {len(result.nodes)} nodes, {len(result.edges)} edges")
    typer.echo(f"  Size: {result.width:g} x {result.height:g}")


if __name__ == "__main__":
    app()
