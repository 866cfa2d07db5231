# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from taskcal.view.state import get_show_header


def header(workspace_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with workspace information.

    Args:
        workspace_name: The name of the active workspace
        sub_header: Optional sub-header text to display
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    workspace_name = f"[plum1]{workspace_name}[/plum1]"

    print(Padding("[dark_orange]taskcal[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(workspace_name, (0, 1)))
