"""Errors raised by the services layer."""


class NotFoundError(Exception):
    """An id did not resolve to an existing record."""

    entity = "Record"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} not found with id: {entity_id}")


class TaskNotFoundError(NotFoundError):
    entity = "Task"


class UserNotFoundError(NotFoundError):
    entity = "User"
