"""Main CLI interface for advisory-shield."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import DatabaseConfig
from ..core.advisory import Advisory
from ..core.errors import AdvisoryShieldError
from ..database import AdvisoryDatabase, load_advisory
from ..utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="advisory-shield",
    help="Check package versions against a local security advisory database",
    add_completion=False
)

console = Console()
logger = get_logger("CLI")

EXIT_VULNERABLE = 1
EXIT_ERROR = 2


def _open_database(database_path: Optional[Path]) -> AdvisoryDatabase:
    try:
        config = DatabaseConfig(database_path or DatabaseConfig.default_path())
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_ERROR)
    return AdvisoryDatabase(config)


def _describe(advisory: Advisory) -> str:
    criticality = advisory.criticality()
    label = criticality.value if criticality else "unknown"
    return f"{advisory.id} [{label}] {advisory.title or ''}".rstrip()


@app.command()
def check(
    gem: str = typer.Argument(..., help="Name of the gem to check"),
    version: str = typer.Argument(..., help="Installed version of the gem"),
    database_path: Optional[Path] = typer.Option(
        None,
        "--database",
        "-d",
        help="Path to the advisory database (defaults to $ADVISORY_SHIELD_DB)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file"
    )
) -> None:
    """Report every advisory a gem version is vulnerable to."""
    setup_logging(log_file=log_file, verbose=verbose)
    database = _open_database(database_path)

    try:
        vulnerable = database.check_gem(gem, version)
    except AdvisoryShieldError as e:
        logger.error(f"Check failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_ERROR)

    if not vulnerable:
        console.print(f"[green]{escape(gem)} {escape(version)}: no known vulnerabilities[/green]")
        return

    console.print(f"[red]{escape(gem)} {escape(version)}: {len(vulnerable)} vulnerabilities[/red]")
    for advisory in vulnerable:
        console.print(f"  {_describe(advisory)}", markup=False)
    raise typer.Exit(EXIT_VULNERABLE)


@app.command()
def advisory(
    path: Path = typer.Argument(..., help="Path to an advisory YAML file"),
    version: str = typer.Argument(..., help="Version to classify"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file"
    )
) -> None:
    """Classify a version against a single advisory file."""
    setup_logging(log_file=log_file, verbose=verbose)

    try:
        loaded = load_advisory(path)
        patched = loaded.patched(version)
        unaffected = loaded.unaffected(version)
        vulnerable = loaded.vulnerable(version)
    except AdvisoryShieldError as e:
        logger.error(f"Classification failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_ERROR)

    console.print(_describe(loaded), markup=False)
    console.print(f"patched: {str(patched).lower()}")
    console.print(f"unaffected: {str(unaffected).lower()}")
    console.print(f"vulnerable: {str(vulnerable).lower()}")

    if vulnerable:
        raise typer.Exit(EXIT_VULNERABLE)


@app.command()
def stats(
    database_path: Optional[Path] = typer.Option(
        None,
        "--database",
        "-d",
        help="Path to the advisory database (defaults to $ADVISORY_SHIELD_DB)"
    )
) -> None:
    """Show how many gems and advisories the database holds."""
    setup_logging()
    database = _open_database(database_path)

    console.print(f"gems: {len(database.gems())}")
    console.print(f"advisories: {database.size()}")


if __name__ == "__main__":
    app()
