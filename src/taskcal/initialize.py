# SPDX-License-Identifier: MIT

import logging

from taskcal import configuration
from taskcal import state as app_state
from taskcal.logger import configure_logging
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.service.sync import start_demo_session
from taskcal.view import state as view_state

logger = logging.getLogger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_data_dirs()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])
    app_state.set_clear_ids(config["clear_ids_on_view"])

    # First run: without a session everything lives in a local workspace
    if not SESSION_REPO.is_signed_in():
        start_demo_session()
        logger.info("started local workspace in %s", configuration.DATA_PATH)


def __ensure_data_dirs() -> None:
    configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)
    configuration.DATA_PROJECTS_DIR.mkdir(parents=True, exist_ok=True)
    configuration.DATA_COMMENTS_DIR.mkdir(parents=True, exist_ok=True)
