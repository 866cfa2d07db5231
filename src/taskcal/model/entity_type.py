# SPDX-License-Identifier: MIT


class EntityType:
    TASK = "task"
    PROJECT = "project"
    COMMENT = "comment"
