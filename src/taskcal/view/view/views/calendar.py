# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskcal.color import (
    OTHER_MONTH_STYLE,
    OVERFLOW_STYLE,
    SELECTED_STYLE,
    TODAY_STYLE,
    project_style,
)
from taskcal.model.calendar import (
    WEEK,
    CalendarCell,
    CalendarGrid,
    DatePopup,
    TaskDetail,
)
from taskcal.model.project import Project
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.service.calendar_grid import grid_rows
from taskcal.service.display import get_priority_config, get_status_config
from taskcal.time import DAY_NAMES, date_to_display_str, date_to_display_str_optional
from taskcal.view.view.util import task_style, truncate
from taskcal.view.view.views.header import header

INDICATOR_DOT = "●"
OVERFLOW_DOT = "∙"


def calendar_grid_view(
    workspace_name: str,
    grid: Optional[CalendarGrid],
    projects: Optional[list[Project]] = None,
    cell_width: int = 14,
    console: Optional[Console] = None,
) -> None:
    """
    Paint a month or week grid model.

    Args:
        workspace_name: The name of the active workspace
        grid: The grid model built by taskcal.service.calendar_grid
        projects: Projects used to color the task indicators
        cell_width: Width of each day cell in characters
        console: Console to print to (defaults to a new stdout console)
    """
    if grid is None:
        return

    header(workspace_name, f"calendar-{grid['mode']}")

    if console is None:
        console = Console()

    console.print(f"\n[bold]{grid['title']}[/bold]\n")
    console.print(render_grid(grid, projects, cell_width))
    console.print()


def render_grid(
    grid: CalendarGrid,
    projects: Optional[list[Project]] = None,
    cell_width: int = 14,
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))

    # Sunday-first day-of-week headers
    for day_name in DAY_NAMES:
        table.add_column(day_name, style="bold", width=cell_width)

    for row in grid_rows(grid):
        if grid["mode"] == WEEK:
            table.add_row(*[_week_cell(cell, projects, cell_width) for cell in row])
        else:
            table.add_row(*[_month_cell(cell, projects) for cell in row])

    return table


def _day_number(cell: CalendarCell) -> Text:
    day_num = f"{cell['date'].day:2d}"
    if cell["is_selected"]:
        return Text(f"{day_num} ", style=SELECTED_STYLE)
    if cell["is_today"]:
        return Text(f"{day_num} ", style=TODAY_STYLE)
    if not cell["in_current_period"]:
        return Text(day_num, style=OTHER_MONTH_STYLE)
    return Text(day_num, style="bold")


def _overflow_dots(cell: CalendarCell) -> Text:
    return Text(OVERFLOW_DOT * cell["overflow"], style=OVERFLOW_STYLE)


def _month_cell(cell: CalendarCell, projects: Optional[list[Project]]) -> Text:
    cell_content = _day_number(cell)
    cell_content.append("\n")

    for task in cell["indicators"]:
        style = task_style(task, projects)
        if not cell["in_current_period"]:
            style = OTHER_MONTH_STYLE
        cell_content.append(INDICATOR_DOT, style=style)

    if cell["overflow"] > 0:
        cell_content.append(" ")
        cell_content.append_text(_overflow_dots(cell))

    return cell_content


def _week_cell(
    cell: CalendarCell, projects: Optional[list[Project]], cell_width: int
) -> Text:
    cell_content = _day_number(cell)
    cell_content.append("\n")

    # Account for dot and space
    max_title_len = cell_width - 2
    for task in cell["indicators"]:
        style = task_style(task, projects)
        cell_content.append(f"{INDICATOR_DOT} ", style=style)
        cell_content.append(f"{truncate(task['title'], max_title_len)}\n", style=style)

    if cell["overflow"] > 0:
        cell_content.append_text(_overflow_dots(cell))
        cell_content.append("\n")

    return cell_content


def date_popup_view(
    popup: Optional[DatePopup],
    console: Optional[Console] = None,
) -> None:
    """Paint the task list for one day, or the empty state."""
    if popup is None:
        return

    if console is None:
        console = Console()

    title = date_to_display_str(popup["date"])
    if popup["empty"]:
        console.print(
            Panel(
                Text("No tasks on this day", style="dim"),
                title=title,
                box=box.ROUNDED,
                expand=False,
            )
        )
        return

    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("id")
    table.add_column("title")
    table.add_column("project")
    table.add_column("status")
    table.add_column("priority")
    table.add_column("dates")
    table.add_column("description")

    for row in popup["rows"]:
        synthetic_id = (
            str(ID_MAP_REPO.associate_id("tasks", row["task_id"]))
            if row["task_id"] is not None
            else ""
        )
        status_config = get_status_config(row["status"])
        table.add_row(
            synthetic_id,
            row["title"],
            Text(row["project_name"], style=project_style(row["project_color"]))
            if row["project_name"] is not None
            else "",
            Text(row["status_label"], style=status_config["style"]),
            row["priority_label"],
            row["date_line"] or "",
            row["description"] or "",
        )

    console.print(Panel(table, title=title, box=box.ROUNDED, expand=False))


def task_detail_view(
    detail: Optional[TaskDetail],
    console: Optional[Console] = None,
) -> None:
    """Paint the detail panel for one task with its available actions."""
    if detail is None:
        return

    if console is None:
        console = Console()

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("property", style="cyan")
    table.add_column("value")

    if detail["task_id"] is not None:
        table.add_row("id", str(ID_MAP_REPO.associate_id("tasks", detail["task_id"])))
    table.add_row("title", detail["title"])
    table.add_row(
        "project",
        Text(detail["project_name"], style=project_style(detail["project_color"]))
        if detail["project_name"] is not None
        else "",
    )
    table.add_row(
        "status",
        Text(detail["status_label"], style=get_status_config(detail["status"])["style"]),
    )
    table.add_row(
        "priority",
        Text(
            detail["priority_label"],
            style=get_priority_config(detail["priority"])["style"],
        ),
    )
    table.add_row("start", date_to_display_str_optional(detail["start_date"]) or "")
    table.add_row("due", date_to_display_str_optional(detail["due_date"]) or "")
    table.add_row("description", detail["description"] or "")
    table.add_row("actions", Text(" | ".join(detail["actions"]), style="dim"))

    console.print(Panel(table, title=detail["title"], box=box.ROUNDED, expand=False))
