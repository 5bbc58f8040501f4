from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import SETTING_KEYS, ConfigManager
from .interpreter import TodoApp
from .manager import TaskManager
from .storage import create_backend

app = typer.Typer(add_completion=False, help="Interactive to-do list manager")

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _plain(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.callback(invoke_without_command=True)  # type: ignore[misc]
def main(ctx: typer.Context) -> None:
    """Start the interactive to-do prompt (add, list, toggle, delete, exit)."""
    if ctx.invoked_subcommand is not None:
        return

    console = Console()
    config = ConfigManager()
    _configure_logging(config.log_level)

    try:
        backend = create_backend(config.backend, config.data_file)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    logger.debug(f"Using {type(backend).__name__} backend")
    TodoApp(TaskManager(backend), console=console).run()
    raise typer.Exit(0)


@app.command("config")  # type: ignore[misc]
def config_command(
    key: Optional[str] = typer.Argument(None, help="backend | data_file | log_level"),
    value: Optional[str] = typer.Argument(None, help="New value to store"),
) -> None:
    """Show the effective settings, or store KEY VALUE in config.json."""
    console = Console()
    config = ConfigManager()

    if key is None:
        for name in SETTING_KEYS:
            _plain(console, f"{name}: {getattr(config, name)}")
        _plain(console, f"Config file: {config.config_file_path}")
        return

    if key not in SETTING_KEYS:
        console.print(
            f"[red]Unknown setting {escape(key)!r}; expected one of: "
            f"{', '.join(SETTING_KEYS)}[/red]"
        )
        raise typer.Exit(1)

    if value is None:
        _plain(console, str(getattr(config, key)))
        return

    config.set(key, value)
    _plain(console, f"{key} set -> {value}")


if __name__ == "__main__":
    app()
