"""CLI interface using typer + rich."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.table import Table

from resume_contracts.ast_check import check_ast
from resume_contracts.config import AppConfig, load_config
from resume_contracts.errors import ValidationIssue
from resume_contracts.logging.setup import setup_logging
from resume_contracts.parsers.document_parser import load_document, save_document
from resume_contracts.resolver.engine import ResumeResolver, utc_now
from resume_contracts.resolver.tables import TABLES
from resume_contracts.validation import validate_dsl

app = typer.Typer(
    name="resume-contracts",
    help="Validate resume layout DSL documents and resolve them into layout trees",
    no_args_is_help=True,
)
console = Console()


def _prepare(verbose: bool) -> AppConfig:
    config = load_config()
    setup_logging("DEBUG" if verbose else config.logging.level)
    return config


def _read(path: Path, label: str) -> Any:
    if not path.exists():
        console.print(f"[red]{label} not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return load_document(path)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Cannot read {label}: {e}[/red]")
        raise typer.Exit(1)


def _print_issues(title: str, issues: list[ValidationIssue] | tuple[ValidationIssue, ...]) -> None:
    table = Table(title=title)
    # Paths and kinds are printed whole; only messages wrap.
    table.add_column("Path", no_wrap=True, overflow="fold")
    table.add_column("Kind", no_wrap=True, overflow="fold")
    table.add_column("Message")
    for issue in issues:
        table.add_row(issue.path or "<root>", issue.kind, issue.message)
    console.print(table)


def _format_value(value: Any) -> str:
    if dataclasses.is_dataclass(value):
        return ", ".join(f"{k}={v}" for k, v in dataclasses.asdict(value).items())
    if value is None:
        return "-"
    return str(value)


@app.command()
def validate(
    dsl_file: Path = typer.Argument(help="DSL document (.json/.yaml)"),
    strict: bool = typer.Option(False, "--strict", help="Also enforce cross-field layout rules"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Validate a resume DSL document."""
    config = _prepare(verbose)
    data = _read(dsl_file, "DSL file")

    result = validate_dsl(data, strict_layout=strict or config.validation.strict_layout)
    if not result.success:
        _print_issues("DSL validation failed", result.errors)
        raise typer.Exit(1)

    dsl = result.data
    visible = sum(1 for s in dsl.sections if s.visible)
    console.print(
        f"[green]Valid DSL[/green] version {dsl.version}: "
        f"{dsl.layout.type} on {dsl.layout.paper_size}, "
        f"{visible}/{len(dsl.sections)} sections visible"
    )


@app.command()
def resolve(
    dsl_file: Path = typer.Argument(help="DSL document (.json/.yaml)"),
    content: Path = typer.Option(..., "--content", "-c", help="Section content document (.json/.yaml)"),
    output: Path = typer.Option(None, "--output", "-o", help="Write AST JSON here instead of stdout"),
    at: str = typer.Option(None, "--at", help="Fixed generatedAt timestamp (ISO-8601)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Resolve a DSL document and its content into a layout tree."""
    config = _prepare(verbose)
    dsl_data = _read(dsl_file, "DSL file")
    content_data = _read(content, "Content file")
    if not isinstance(content_data, dict):
        console.print("[red]Content file must map section ids to section content[/red]")
        raise typer.Exit(1)

    clock = utc_now
    if at:
        try:
            moment = datetime.fromisoformat(at.replace("Z", "+00:00"))
        except ValueError:
            console.print(f"[red]Invalid --at timestamp: {at}[/red]")
            raise typer.Exit(1)
        clock = lambda: moment  # noqa: E731

    resolver = ResumeResolver.from_config(config, clock=clock)
    result = resolver.run(dsl_data, content_data)
    if not result.ok:
        _print_issues(f"Resolution failed ({result.error_kind})", result.errors)
        raise typer.Exit(1)

    text = result.ast.to_json(indent=config.output.indent or None)
    if output is None:
        typer.echo(text)
        return
    save_document(text, output)
    console.print(f"[green]AST saved: {output}[/green] ({len(result.ast.sections)} sections)")


@app.command("check-ast")
def check_ast_command(
    ast_file: Path = typer.Argument(help="AST document (.json/.yaml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Check a resolved layout tree before it goes to a renderer."""
    _prepare(verbose)
    data = _read(ast_file, "AST file")

    result = check_ast(data)
    if not result.success:
        _print_issues("AST check failed", result.errors)
        raise typer.Exit(1)

    ast = result.data
    columns = ", ".join(f"{c.id} {c.width_percentage}%" for c in ast.page.columns)
    console.print(f"[green]Valid AST[/green]: {len(ast.sections)} sections, columns [{columns}]")


@app.command()
def tables() -> None:
    """Show the token resolution tables."""
    for name, (table, _domain) in TABLES.items():
        view = Table(title=name)
        view.add_column("Token")
        view.add_column("Value")
        for key, value in table.items():
            view.add_row(str(key), _format_value(value))
        console.print(view)


if __name__ == "__main__":
    app()
