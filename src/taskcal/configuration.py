# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "taskcal"

BACKEND_URL_ENV = "TASKCAL_BACKEND_URL"
BACKEND_ANON_KEY_ENV = "TASKCAL_BACKEND_ANON_KEY"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"
DATA_PROJECTS_DIR: Path = DATA_PATH / "projects"
DATA_COMMENTS_DIR: Path = DATA_PATH / "comments"
DATA_SESSION_PATH: Path = DATA_PATH / "session.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    log_level: str
    month_indicator_cap: int
    month_overflow_cap: int
    week_indicator_cap: int
    week_overflow_cap: int
    recent_tasks_limit: int
    backend_url: Optional[str]
    backend_anon_key: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "clear_ids_on_view": True,
        "log_level": "WARNING",
        "month_indicator_cap": 3,
        "month_overflow_cap": 2,
        "week_indicator_cap": 5,
        "week_overflow_cap": 3,
        "recent_tasks_limit": 10,
        "backend_url": None,
        "backend_anon_key": None,
    }


def set_data_path(data_path: Path) -> None:
    global \
        DATA_PATH, \
        DATA_TASKS_DIR, \
        DATA_PROJECTS_DIR, \
        DATA_COMMENTS_DIR, \
        DATA_SESSION_PATH, \
        DATA_ID_MAP_PATH

    DATA_PATH = data_path
    DATA_TASKS_DIR = DATA_PATH / "tasks"
    DATA_PROJECTS_DIR = DATA_PATH / "projects"
    DATA_COMMENTS_DIR = DATA_PATH / "comments"
    DATA_SESSION_PATH = DATA_PATH / "session.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))


def resolve_backend_settings(
    config: Configuration,
) -> tuple[Optional[str], Optional[str]]:
    """
    Return the backend url and anon key.

    Environment variables take precedence over the config file. Empty values
    count as unset.
    """
    url = os.environ.get(BACKEND_URL_ENV) or config.get("backend_url") or None
    anon_key = (
        os.environ.get(BACKEND_ANON_KEY_ENV) or config.get("backend_anon_key") or None
    )
    return url, anon_key
