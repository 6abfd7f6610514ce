#!/usr/bin/env python3
"""
Notepad API command line.

    python run.py serve [--host H] [--port P] [--reload]
    python run.py init-db
    python run.py test [unit|integration|all] [--coverage]

`-v` / `-d` before the command raise the log level to INFO / DEBUG.
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import click

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from notepad.core.logging import get_logger, setup_logging

logger = get_logger("notepad.cli")

TEST_DIRS = {
    "unit": "tests/unit",
    "integration": "tests/integration",
    "all": "tests",
}


def validate_project_root() -> Path:
    """Config paths are resolved from the marker file, so refuse to run elsewhere."""
    if not (PROJECT_ROOT / ".project_root").exists():
        click.secho("Missing .project_root next to run.py", fg="red", err=True)
        sys.exit(1)
    return PROJECT_ROOT


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at INFO.")
@click.option("--debug", "-d", is_flag=True, help="Log at DEBUG.")
def cli(verbose: bool, debug: bool) -> None:
    """Notepad API: run the server, prepare the database, run the tests."""
    validate_project_root()
    level = "DEBUG" if debug else "INFO" if verbose else "WARNING"
    setup_logging(level=level, format_type="console")


@cli.command()
@click.option("--host", default=None, help="Bind address (default from application.yaml).")
@click.option("--port", default=None, type=int, help="Port (default from application.yaml).")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the API under uvicorn."""
    from notepad.core.config import get_app_config

    server = get_app_config().application.server
    host = host or server.host
    port = port or server.port

    cmd = [
        sys.executable, "-m", "uvicorn", "notepad.main:app",
        "--host", host, "--port", str(port),
    ]
    if reload:
        cmd.append("--reload")

    logger.info("Starting uvicorn", extra={"host": host, "port": port, "reload": reload})
    click.echo(f"Serving notes on http://{host}:{port}")

    try:
        subprocess.run(cmd, check=True)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        sys.exit(e.returncode)


async def _create_schema() -> None:
    from notepad.core.database import Database

    database = Database.from_config()
    try:
        await database.create_tables()
    finally:
        await database.dispose()


@cli.command("init-db")
def init_db() -> None:
    """Create the users, notes and archived_notes tables if missing."""
    try:
        asyncio.run(_create_schema())
    except Exception as e:
        logger.error("Schema creation failed", extra={"error": str(e)})
        click.secho(f"Could not create tables: {e}", fg="red")
        sys.exit(1)

    click.secho("Database tables created.", fg="green")


@cli.command()
@click.argument("suite", type=click.Choice(sorted(TEST_DIRS)), default="all")
@click.option("--coverage", is_flag=True, help="Report coverage of the notepad package.")
def test(suite: str, coverage: bool) -> None:
    """Run pytest over one test suite."""
    cmd = [sys.executable, "-m", "pytest", TEST_DIRS[suite], "-v"]
    if coverage:
        cmd += ["--cov=notepad", "--cov-report=term-missing"]

    click.echo(" ".join(cmd))
    sys.exit(subprocess.run(cmd).returncode)


if __name__ == "__main__":
    cli()
