"""Request bodies for the task and user endpoints.

Fields are exposed in camelCase (``assignedTo``, ``firstName``...) and also
accept their snake_case names. Validation messages are returned verbatim to
clients, so every rule raises a ``PydanticCustomError`` with a readable text.
"""

from typing import Annotated, Optional
from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from models import Task, TaskStatus, User
from services.clock import is_valid_zone

STATUS_VALUES = [status.value for status in TaskStatus]

# Ids are 64-bit integers in the database
MAX_ID = 2**63 - 1

RecordId = Annotated[int, Path(le=MAX_ID)]


def _require(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("not_blank", message)
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRef(CamelModel):
    id: int = Field(le=MAX_ID)


class TaskIn(CamelModel):
    title: Optional[str] = Field(None, validate_default=True)
    description: Optional[str] = None
    status: Optional[str] = None
    assigned_to: Optional[UserRef] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _require(value, "Title is mandatory")

    @field_validator("status")
    @classmethod
    def status_known(cls, value):
        if value is not None and value not in STATUS_VALUES:
            raise PydanticCustomError(
                "status_pattern",
                "Status must be 'Pending', 'In Progress', or 'Completed'"
            )
        return value

    def to_model(self) -> Task:
        return Task(
            title=self.title,
            description=self.description,
            status=self.status,
            assigned_to_id=self.assigned_to.id if self.assigned_to else None
        )


class UserIn(CamelModel):
    first_name: Optional[str] = Field(None, validate_default=True)
    last_name: Optional[str] = Field(None, validate_default=True)
    timezone: Optional[str] = Field(None, validate_default=True)
    is_active: Optional[bool] = None

    @field_validator("first_name")
    @classmethod
    def first_name_not_blank(cls, value):
        return _require(value, "First name is mandatory")

    @field_validator("last_name")
    @classmethod
    def last_name_not_blank(cls, value):
        return _require(value, "Last name is mandatory")

    @field_validator("timezone")
    @classmethod
    def timezone_known(cls, value):
        value = _require(value, "Timezone is mandatory")
        if not is_valid_zone(value):
            raise PydanticCustomError("timezone", "Timezone must be a valid time zone id")
        return value

    def to_model(self) -> User:
        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            timezone=self.timezone,
            is_active=self.is_active
        )
