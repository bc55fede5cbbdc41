"""Main CLI interface for the cricket stats dashboard."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from sqlalchemy import select

from ..config import settings
from ..database import create_tables, drop_tables, get_session, init_engine
from ..errors import ApiError
from ..models import LogStatus, SqlLog
from ..seeds import seed_all
from ..services.procedures import total_runs as player_total_runs

# Initialize rich console
console = Console()


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console output goes through rich; the optional file gets plain lines
    console_handler = RichHandler(console=console, show_time=True, show_path=False)
    console_handler.setLevel(log_level)

    handlers = [console_handler]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


app = typer.Typer(
    name="cricket-dashboard",
    help="Cricket Stats Dashboard - REST API and tools for cricket statistics",
    no_args_is_help=True
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
    db_url: Optional[str] = typer.Option(None, "--db-url", help="SQLAlchemy URL overriding the configured database"),
):
    """Cricket Stats Dashboard - REST API and tools for cricket statistics."""
    log_level = "DEBUG" if verbose else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)

    if db_url:
        init_engine(db_url)


@app.command()
def setup_db(force: bool = typer.Option(False, "--force", help="Force recreation of tables")):
    """Initialize database schema."""
    console.print("[bold]Setting up database schema...[/bold]")

    try:
        if force:
            console.print("Dropping existing tables...")
            drop_tables()

        console.print("Creating database tables...")
        create_tables()

        console.print("[green]✅ Database schema initialized successfully![/green]")

    except Exception as e:
        console.print(f"[red]❌ Database setup failed: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def seed():
    """Load the sample teams, players, matches and awards."""
    console.print("[bold]Seeding sample data...[/bold]")

    try:
        create_tables()
        stats = seed_all()
    except Exception as e:
        console.print(f"[red]❌ Seeding failed: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Seeded Rows")
    table.add_column("Table", style="cyan")
    table.add_column("Inserted", style="green")
    for name, count in stats.items():
        table.add_row(name, str(count) if count else "skipped")
    console.print(table)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    host = host or settings.api.host
    port = port or settings.api.port
    console.print(f"[bold]Serving API on http://{host}:{port}[/bold]")
    uvicorn.run(
        "cricket_dashboard.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command("total-runs")
def total_runs(player_id: str = typer.Argument(..., help="Player ID")):
    """Show a player's career runs."""
    try:
        result = player_total_runs(player_id)
    except ApiError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[bold]{result['playerName']}[/bold] (#{result['playerId']}): "
        f"[green]{result['totalRuns']}[/green] runs"
    )


def _log_table(entries) -> Table:
    table = Table(title="SQL Logs")
    table.add_column("ID", style="cyan")
    table.add_column("Executed", style="magenta")
    table.add_column("Operation", style="yellow")
    table.add_column("Table", style="blue")
    table.add_column("Status", style="green")
    table.add_column("Statement / Error")
    for entry in entries:
        detail = entry.error_message if entry.status == LogStatus.ERROR else entry.sql_statement
        table.add_row(
            str(entry.id),
            entry.executed_at.strftime("%Y-%m-%d %H:%M:%S"),
            entry.operation_type.value if entry.operation_type else "-",
            entry.table_name or "-",
            entry.status.value if entry.status else "-",
            detail or "",
        )
    return table


@app.command()
def logs(
    limit: int = typer.Option(20, "--limit", help="Number of entries to show"),
    status: Optional[LogStatus] = typer.Option(None, "--status", help="Only show entries with this status"),
):
    """Show recent audit log entries."""
    query = select(SqlLog).order_by(SqlLog.executed_at.desc(), SqlLog.id.desc()).limit(max(1, limit))
    if status is not None:
        query = query.where(SqlLog.status == status)

    try:
        with get_session() as session:
            entries = session.scalars(query).all()
            table = _log_table(entries)
    except Exception as e:
        console.print(f"[red]❌ Could not read logs: {e}[/red]")
        raise typer.Exit(1)

    if not entries:
        console.print("[yellow]No log entries found[/yellow]")
        return
    console.print(table)


if __name__ == "__main__":
    app()
