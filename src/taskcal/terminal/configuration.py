# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskcal import configuration
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup
from taskcal.terminal.validate import validate_cap, validate_log_level

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()
    backend_url, backend_anon_key = configuration.resolve_backend_settings(config)

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "clear_ids_on_view",
        "✓ Enabled" if config["clear_ids_on_view"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    table.add_row("month_indicator_cap", str(config["month_indicator_cap"]))
    table.add_row("month_overflow_cap", str(config["month_overflow_cap"]))
    table.add_row("week_indicator_cap", str(config["week_indicator_cap"]))
    table.add_row("week_overflow_cap", str(config["week_overflow_cap"]))
    table.add_row("recent_tasks_limit", str(config["recent_tasks_limit"]))
    table.add_row("backend_url", backend_url or "None")
    table.add_row("backend_anon_key", "set" if backend_anon_key else "None")
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        from yaml import Loader  # type: ignore[assignment] # noqa: F401

        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show report headers"),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Enable/disable automatic clearing of ID map before list commands",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
    month_indicator_cap: Annotated[
        Optional[int],
        typer.Option(
            "--month-indicator-cap",
            callback=validate_cap,
            help="Task indicators per month cell",
        ),
    ] = None,
    month_overflow_cap: Annotated[
        Optional[int],
        typer.Option(
            "--month-overflow-cap",
            callback=validate_cap,
            help="Overflow indicators per month cell",
        ),
    ] = None,
    week_indicator_cap: Annotated[
        Optional[int],
        typer.Option(
            "--week-indicator-cap",
            callback=validate_cap,
            help="Task titles per week cell",
        ),
    ] = None,
    week_overflow_cap: Annotated[
        Optional[int],
        typer.Option(
            "--week-overflow-cap",
            callback=validate_cap,
            help="Overflow indicators per week cell",
        ),
    ] = None,
    recent_tasks_limit: Annotated[
        Optional[int],
        typer.Option("--recent-tasks-limit", callback=validate_cap),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory path for storing data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the platform data directory"),
    ] = False,
    backend_url: Annotated[Optional[str], typer.Option("--backend-url")] = None,
    remove_backend_url: Annotated[
        bool, typer.Option("--remove-backend-url")
    ] = False,
    backend_anon_key: Annotated[
        Optional[str], typer.Option("--backend-anon-key")
    ] = None,
    remove_backend_anon_key: Annotated[
        bool, typer.Option("--remove-backend-anon-key")
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        clear_ids_on_view=clear_ids_on_view,
        log_level=log_level,
        month_indicator_cap=month_indicator_cap,
        month_overflow_cap=month_overflow_cap,
        week_indicator_cap=week_indicator_cap,
        week_overflow_cap=week_overflow_cap,
        recent_tasks_limit=recent_tasks_limit,
        data_path=data_path,
        remove_data_path=remove_data_path,
        backend_url=backend_url,
        remove_backend_url=remove_backend_url,
        backend_anon_key=backend_anon_key,
        remove_backend_anon_key=remove_backend_anon_key,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table("Updated Configuration"))
