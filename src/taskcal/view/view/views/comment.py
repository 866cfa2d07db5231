# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from taskcal.model.comment import Comment
from taskcal.model.entity_id import EntityId
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.time import datetime_to_display_local_datetime_str
from taskcal.view.view.views.header import header


def comments_table(comments: list[Comment]) -> Table:
    table = Table(box=box.SIMPLE, title="comments")
    table.add_column("id")
    table.add_column("created")
    table.add_column("author")
    table.add_column("content")

    for comment in comments:
        table.add_row(
            str(ID_MAP_REPO.associate_id("comments", cast(EntityId, comment["id"]))),
            datetime_to_display_local_datetime_str(comment["created"]),
            comment["author"] or "",
            comment["content"],
        )
    return table


def comments_view(workspace_name: str, comments: list[Comment]) -> None:
    header(workspace_name, "comments")

    console = Console()
    if not comments:
        console.print("[dim]No comments[/dim]")
        return
    console.print(comments_table(comments))
