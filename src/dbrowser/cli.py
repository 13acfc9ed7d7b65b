"""dbrowser command line interface."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from loguru import logger

from dbrowser.config import get_settings
from dbrowser.errors import DBrowserError
from dbrowser.framework import BrowserFramework
from dbrowser.logging_utils import configure_logging
from dbrowser.router import run_browser
from dbrowser.terminal import Terminal

app = typer.Typer(name="dbrowser", help="Terminal browser for debots", add_completion=False)


def _load_framework(url: Optional[str] = None) -> BrowserFramework:
    settings = get_settings(url=url)
    configure_logging(profile=settings.log_profile, level=settings.log_level)
    framework = BrowserFramework(settings)
    framework.load_plugins()
    return framework


@app.command()
def run(
    address: str = typer.Argument(..., help="Debot address, <workchain>:<hex id>"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Network endpoint"),
) -> None:
    """Start a debot and browse its actions."""

    framework = _load_framework(url)
    terminal = Terminal()
    terminal.print(f"Connecting to {framework.settings.url}")
    try:
        env = framework.build_env(terminal)
        asyncio.run(run_browser(address, env))
    except DBrowserError as exc:
        logger.debug("browser.failed error={!r}", exc)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc
    except (KeyboardInterrupt, EOFError) as exc:
        typer.echo("\nInterrupted.", err=True)
        raise typer.Exit(1) from exc


@app.command("hooks")
def list_hooks() -> None:
    """Show hook implementation mapping."""

    framework = _load_framework()
    report = framework.hook_report()
    if not report:
        typer.echo("(no hook implementations)")
        return
    for hook_name, plugin_names in report.items():
        typer.echo(f"{hook_name}: {', '.join(plugin_names)}")
    for group, error in framework.failed_plugins.items():
        typer.echo(f"failed {group}: {error}")
