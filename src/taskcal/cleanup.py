# SPDX-License-Identifier: MIT

import atexit

from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()
    SESSION_REPO.flush()

    # Flush entity repositories
    PROJECT_REPO.flush()
    TASK_REPO.flush()
    COMMENT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_all)
