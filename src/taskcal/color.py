# SPDX-License-Identifier: MIT

import random
from typing import Optional

from taskcal.model.project import PROJECT_COLORS

# Style used for tasks without a project and for unknown color tags
DEFAULT_PROJECT_STYLE = "grey50"

COMPLETED_TASK_COLOR = "bright_black"

# Project color tags mapped to Rich styles
PROJECT_COLOR_STYLES = {
    "blue": "dodger_blue2",
    "green": "green3",
    "red": "red3",
    "yellow": "gold1",
    "purple": "medium_purple",
    "orange": "dark_orange",
    "pink": "hot_pink",
    "gray": DEFAULT_PROJECT_STYLE,
}

STATUS_STYLES = {
    "pending": "yellow",
    "in_progress": "cyan",
    "completed": "green",
}

PRIORITY_STYLES = {
    "high": "bold red",
    "medium": "dark_orange",
    "low": "green",
}

TODAY_STYLE = "bold black on bright_cyan"
SELECTED_STYLE = "bold white on dark_violet"
OTHER_MONTH_STYLE = "grey42"
OVERFLOW_STYLE = "dim"


def project_style(color: Optional[str]) -> str:
    if color is None:
        return DEFAULT_PROJECT_STYLE
    return PROJECT_COLOR_STYLES.get(color, DEFAULT_PROJECT_STYLE)


def get_random_project_color() -> str:
    """Return a random project color tag."""
    return random.choice(PROJECT_COLORS)
