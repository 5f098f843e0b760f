"""Command-line entry point: run the todolist server."""

import sys

from flask import Flask
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from todolist.config import (
    BaseSettings,
    SettingsValidationError,
    get_settings,
    validate_settings,
)
from todolist.logging import Loggers, configure_logging
from todolist.web import create_app

logger = Loggers.web()


def build_banner(app: Flask, settings: BaseSettings) -> Panel:
    """Render the startup banner: address plus the route table."""
    table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    table.add_column("Methods", style="bold cyan", no_wrap=True)
    table.add_column("Path")

    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        methods = sorted(rule.methods - {"HEAD", "OPTIONS"})
        table.add_row(" ".join(methods), rule.rule)

    return Panel(
        table,
        title=f"[bold]Server is running on {settings.base_url}[/bold]",
        border_style="cyan",
    )


def main() -> int:
    """Load settings, build the app and serve it until interrupted."""
    console = Console(stderr=True)
    settings = get_settings()

    try:
        validate_settings(settings)
    except SettingsValidationError as e:
        console.print(f"[red]Invalid configuration:[/red]\n{e}")
        return 1

    configure_logging(settings)
    app = create_app(settings)

    console.print(build_banner(app, settings))
    logger.info("server_starting", host=settings.host, port=settings.port)

    app.run(
        host=settings.host,
        port=settings.port,
        debug=settings.debug,
        threaded=settings.threaded,
        use_reloader=False,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
