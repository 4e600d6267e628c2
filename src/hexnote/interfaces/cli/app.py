"""CLI application for HexNote using Rich and Typer."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hexnote.cards.errors import CardError, CardNotFoundError, PathResolutionError
from hexnote.cards.repository import CardRepository, set_card_repository
from hexnote.cards.titles import derive_title
from hexnote.core.config import setup_logging
from hexnote.core.paths import get_cards_directory
from hexnote.tools.card_tools import CardTools
from hexnote.tools.registry import ToolRegistry

app = typer.Typer(
    name="hexnote",
    help="HexNote CLI - sticky-note cards stored as Markdown files",
    no_args_is_help=True,
)

console = Console()


def _format_time(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M")


def _repository(ctx: typer.Context) -> CardRepository:
    return ctx.obj["repository"]


def _read_content(content: Optional[str], file: Optional[Path]) -> str:
    """Content from the argument, a file, or stdin, in that order."""
    if content is not None:
        return content
    if file is not None:
        return file.read_text(encoding="utf-8")
    return typer.get_text_stream("stdin").read()


def _not_found(card_id: str) -> typer.Exit:
    console.print(f"[red]Card not found: {escape(card_id)}[/red]")
    return typer.Exit(1)


def _failed(error: Exception) -> typer.Exit:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    return typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    cards_dir: Optional[str] = typer.Option(
        None,
        "--dir",
        "-d",
        help="Cards directory (default: platform data dir or $HEXNOTE_CARDS_DIR)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
):
    """Manage HexNote cards."""
    if debug:
        setup_logging("DEBUG")

    if cards_dir:
        directory = Path(cards_dir).expanduser()
    else:
        try:
            directory = get_cards_directory()
        except PathResolutionError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1) from e

    ctx.obj = {"repository": CardRepository(directory)}


@app.command()
def new(
    ctx: typer.Context,
    content: Optional[str] = typer.Argument(None, help="Markdown content"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read content from a file"
    ),
):
    """Create a new card."""
    try:
        card = _repository(ctx).create(_read_content(content, file))
    except (CardError, OSError) as e:
        raise _failed(e) from e
    console.print(f"[green]Created card {card.id}[/green]")


@app.command("list")
def list_cards(ctx: typer.Context):
    """List all cards, most recently updated first."""
    try:
        cards = _repository(ctx).list()
    except OSError as e:
        raise _failed(e) from e
    cards.sort(key=lambda c: c.updated_at, reverse=True)

    if not cards:
        console.print("[dim]No cards yet.[/dim]")
        return

    table = Table(title="Cards", show_header=True)
    table.add_column("ID", no_wrap=True, min_width=36)
    table.add_column("Title", style="cyan")
    table.add_column("Updated")

    for card in cards:
        table.add_row(
            card.id, escape(derive_title(card.content)), _format_time(card.updated_at)
        )

    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    card_id: str = typer.Argument(..., help="Card id"),
    raw: bool = typer.Option(False, "--raw", help="Print the content unrendered"),
):
    """Show a card."""
    try:
        card = _repository(ctx).read(card_id)
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except OSError as e:
        raise _failed(e) from e

    if raw:
        typer.echo(card.content, nl=False)
        return

    console.print(
        Panel(
            Markdown(card.content),
            title=escape(derive_title(card.content)),
            subtitle=f"created {_format_time(card.created_at)} | "
            f"updated {_format_time(card.updated_at)}",
            border_style="blue",
        )
    )


@app.command()
def edit(
    ctx: typer.Context,
    card_id: str = typer.Argument(..., help="Card id"),
    content: Optional[str] = typer.Argument(None, help="New Markdown content"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Read content from a file"
    ),
):
    """Replace the content of a card."""
    try:
        _repository(ctx).update(card_id, _read_content(content, file))
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except (CardError, OSError) as e:
        raise _failed(e) from e
    console.print(f"[green]Updated card {card_id}[/green]")


@app.command()
def delete(
    ctx: typer.Context,
    card_id: str = typer.Argument(..., help="Card id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
):
    """Delete a card."""
    repository = _repository(ctx)
    try:
        path = repository.path_for(card_id)
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except OSError as e:
        raise _failed(e) from e

    if not yes and not typer.confirm(f"Delete '{path.stem}'?"):
        raise typer.Exit(1)

    try:
        repository.delete(card_id)
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except OSError as e:
        raise _failed(e) from e
    console.print(f"[yellow]Deleted card {card_id}[/yellow]")


@app.command()
def where(ctx: typer.Context):
    """Print the cards directory."""
    typer.echo(str(_repository(ctx).directory))


@app.command()
def tools(ctx: typer.Context):
    """List the tools offered to AI agents."""
    registry = ToolRegistry(CardTools(_repository(ctx)))

    table = Table(title="Tools", show_header=True, header_style="bold cyan")
    table.add_column("Tool", style="green", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Description")

    for tool in registry.list_tools():
        table.add_row(tool.name, ", ".join(tool.required), tool.description)

    console.print(table)


@app.command()
def call(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Tool name, e.g. create_note"),
    arguments: str = typer.Argument("{}", help="Tool arguments as a JSON object"),
):
    """Run a tool call the way an agent would and print its result."""
    try:
        parsed = json.loads(arguments)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON arguments: {e}[/red]")
        raise typer.Exit(2) from e
    if not isinstance(parsed, dict):
        console.print("[red]Tool arguments must be a JSON object[/red]")
        raise typer.Exit(2)

    registry = ToolRegistry(CardTools(_repository(ctx)))
    result = registry.dispatch(name, parsed)
    typer.echo(result.text)
    if result.is_error:
        raise typer.Exit(1)


@app.command()
def serve(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
):
    """Start the REST API server."""
    from hexnote.api.app import run_server

    setup_logging()
    set_card_repository(_repository(ctx))
    run_server(host=host, port=port)


def run_cli():
    """Entry point for the hexnote command."""
    app()


if __name__ == "__main__":
    run_cli()
