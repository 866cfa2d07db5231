# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from taskcal.id_map import resolve_id
from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.service.comment import add_comment
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup
from taskcal.view.view.views import comment as comment_report

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    task_id: str,
    content: str,
    author: Annotated[Optional[str], typer.Option("--author")] = None,
) -> None:
    real_task_id = resolve_id("tasks", task_id)
    add_comment(real_task_id, content, author)

    comment_report.comments_view(
        SESSION_REPO.get_workspace_name(),
        COMMENT_REPO.get_comments_for_task(real_task_id),
    )


@app.command("list, ls")
def list_comments(task_id: str) -> None:
    comment_report.comments_view(
        SESSION_REPO.get_workspace_name(),
        COMMENT_REPO.get_comments_for_task(resolve_id("tasks", task_id)),
    )


@app.command("delete, del")
def delete(id: str) -> None:
    COMMENT_REPO.delete_comment(resolve_id("comments", id))
    Console().print("[green]Deleted comment[/green]")
