# SPDX-License-Identifier: MIT


class TaskcalError(Exception):
    """Base class for errors surfaced to the user."""


class EntityNotFoundError(TaskcalError):
    def __init__(self, entity_type: str, entity_id: str) -> None:
        super().__init__(f"{entity_type} not found: {entity_id}")
        self.entity_type = entity_type
        self.entity_id = entity_id


class BackendError(TaskcalError):
    pass


class AuthenticationError(BackendError):
    pass
