# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer
from rich.console import Console

from taskcal.exceptions import TaskcalError
from taskcal.id_map import clear_id_map_if_required, resolve_id
from taskcal.model.calendar import MONTH, WEEK
from taskcal.model.entity_id import EntityId
from taskcal.model.task import TaskPriority, TaskStatus
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service import task as task_service
from taskcal.service.calendar_controller import CalendarController
from taskcal.service.calendar_presenter import (
    ACTION_COMPLETE,
    ACTION_DELETE,
    ACTION_EDIT,
    task_detail,
)
from taskcal.service.data_source import RepositoryDataSource
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup
from taskcal.terminal.parse import DATE_HELP, parse_date
from taskcal.terminal.validate import validate_priority, validate_status
from taskcal.time import date_to_display_str
from taskcal.view.view.views.calendar import (
    calendar_grid_view,
    date_popup_view,
    task_detail_view,
)

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)

BROWSE_HELP = (
    "n next | p previous | t today | m month | w week | s <date> select | "
    "o <id> open | e <id> edit | c <id> complete | d <id> delete | "
    "a [date] add | q quit"
)


class TerminalTaskActions:
    """Task affordances of the calendar, answered with prompts on the terminal."""

    def __init__(self, data_source: RepositoryDataSource) -> None:
        self.data_source = data_source
        self.console = Console()

    def open_task_detail(self, task_id: EntityId) -> None:
        detail = task_detail(
            task_id, self.data_source.get_tasks(), self.data_source.get_projects()
        )
        if detail is None:
            self.console.print("[red]No such task[/red]")
            return
        task_detail_view(detail, self.console)

    def open_edit_task(self, task_id: EntityId) -> None:
        task = TASK_REPO.get_task(task_id)
        title = typer.prompt("Title", default=task["title"])
        status = validate_status(typer.prompt("Status", default=task["status"]))
        priority = validate_priority(
            typer.prompt("Priority", default=task["priority"])
        )
        TASK_REPO.modify_task(
            task_id,
            title=title,
            status=cast(TaskStatus, status),
            priority=cast(TaskPriority, priority),
        )
        self.open_task_detail(task_id)

    def open_new_task_with_date(self, date: pendulum.Date) -> None:
        self.console.print(f"New task on {date_to_display_str(date)}")
        title = typer.prompt("Title")
        id = task_service.create_task(title, start_date=date, due_date=date)
        self.open_task_detail(id)

    def delete_task(self, task_id: EntityId) -> None:
        task = TASK_REPO.get_task(task_id)
        if typer.confirm(f"Delete '{task['title']}'?"):
            task_service.delete_task(task_id)
            self.console.print("[green]Deleted[/green]")

    def complete_task(self, task_id: EntityId) -> None:
        task_service.complete_task(task_id)
        self.console.print("[green]Completed[/green]")


def _controller() -> CalendarController:
    config = CONFIGURATION_REPO.get_config()
    data_source = RepositoryDataSource()
    return CalendarController(
        data_source,
        TerminalTaskActions(data_source),
        month_indicator_cap=config["month_indicator_cap"],
        month_overflow_cap=config["month_overflow_cap"],
        week_indicator_cap=config["week_indicator_cap"],
        week_overflow_cap=config["week_overflow_cap"],
    )


def _show(controller: CalendarController) -> None:
    calendar_grid_view(
        SESSION_REPO.get_workspace_name(),
        controller.grid(),
        controller.data_source.get_projects(),
    )
    date_popup_view(controller.popup())


def _grid_command(
    mode: str, date: Optional[pendulum.Date], select: Optional[pendulum.Date]
) -> None:
    clear_id_map_if_required()
    controller = _controller()
    controller.switch_mode(mode)
    if date is not None:
        controller.go_to_date(date)
    if select is not None:
        controller.select_date(select)
    _show(controller)


@app.command("month, m")
def month(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    select: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--select", "-s", parser=parse_date, help="list the tasks of this day"
        ),
    ] = None,
) -> None:
    """Show the month containing a date as a 6 x 7 grid."""
    _grid_command(MONTH, date, select)


@app.command("week, w")
def week(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    select: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--select", "-s", parser=parse_date, help="list the tasks of this day"
        ),
    ] = None,
) -> None:
    """Show the Sunday to Saturday week containing a date."""
    _grid_command(WEEK, date, select)


@app.command("day, d")
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """List the tasks covering a single day."""
    clear_id_map_if_required()
    controller = _controller()
    controller.go_to_date(date)
    date_popup_view(controller.popup(controller.state["anchor"]))


@app.command("browse, b")
def browse(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    mode: Annotated[str, typer.Option("--mode")] = MONTH,
) -> None:
    """Navigate the calendar interactively."""
    controller = _controller()
    try:
        controller.switch_mode(mode)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    if date is not None:
        controller.go_to_date(date)

    console = Console()
    while True:
        clear_id_map_if_required()
        _show(controller)
        console.print(f"[dim]{BROWSE_HELP}[/dim]")

        command = typer.prompt(">").strip()
        key, _, argument = command.partition(" ")
        argument = argument.strip()

        try:
            if key == "q":
                break
            elif key == "n":
                controller.next()
            elif key == "p":
                controller.previous()
            elif key == "t":
                controller.go_to_today()
            elif key == "m":
                controller.switch_mode(MONTH)
            elif key == "w":
                controller.switch_mode(WEEK)
            elif key == "s":
                controller.select_date(parse_date(argument) if argument else None)
            elif key == "a":
                controller.new_task_on(parse_date(argument) if argument else None)
            elif key in ("o", "e", "c", "d") and argument:
                task_id = resolve_id("tasks", argument)
                if key == "o":
                    controller.open_task(task_id)
                else:
                    action = {"e": ACTION_EDIT, "c": ACTION_COMPLETE, "d": ACTION_DELETE}
                    controller.perform(action[key], task_id)
            else:
                console.print(f"[red]Unknown command:[/red] {command}")
        except typer.BadParameter as e:
            console.print(f"[red]{e.message}[/red]")
        except (TaskcalError, ValueError) as e:
            console.print(f"[red]{e}[/red]")
