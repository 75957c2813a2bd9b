"""Data models exchanged with the remote task service."""

from pydantic import BaseModel, ConfigDict, Field


TaskId = int | str
"""Opaque identifier assigned by the task service."""


class Task(BaseModel):
    """A single task item.

    The service names its fields `TaskID` and `Task`; both the wire names and
    the Python names are accepted on input.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: TaskId = Field(alias='TaskID')
    text: str = Field(alias='Task')

    def to_wire(self) -> dict[str, TaskId | str]:
        """Serializes the task using the service field names."""
        return self.model_dump(mode='json', by_alias=True)


class CreateTaskRequest(BaseModel):
    """Body of the create task request."""

    task_name: str = Field(min_length=1)
