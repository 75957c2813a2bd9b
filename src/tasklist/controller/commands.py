"""Commands issued by the interaction controller and their outcomes."""

from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from tasklist.client.errors import TaskClientError
from tasklist.types import TaskId


class BaseCommand(BaseModel):
    """A request to the task service, tracked until it settles."""

    model_config = ConfigDict(frozen=True)

    command_id: str = Field(default_factory=lambda: str(uuid4()))


class LoadTasks(BaseCommand):
    """Fetch the full task list."""

    kind: Literal['load'] = 'load'


class CreateTask(BaseCommand):
    """Create a task with already trimmed text."""

    kind: Literal['add'] = 'add'
    text: str = Field(min_length=1)


class DeleteTask(BaseCommand):
    """Delete a task by id."""

    kind: Literal['delete'] = 'delete'
    task_id: TaskId


Command = LoadTasks | CreateTask | DeleteTask
"""Type alias for every command the controller can emit."""


class Outcome:
    """The settled result of a command.

    Exactly one of `value` and `error` is meaningful: `error` is None on
    success.
    """

    def __init__(
        self,
        command: Command,
        value: Any = None,
        error: TaskClientError | None = None,
    ):
        self.command = command
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, command: Command, value: Any = None) -> 'Outcome':
        return cls(command, value=value)

    @classmethod
    def failure(cls, command: Command, error: TaskClientError) -> 'Outcome':
        return cls(command, error=error)

    def __repr__(self) -> str:
        status = 'ok' if self.ok else f'error={self.error!r}'
        return f'Outcome({self.command.kind} {self.command.command_id}, {status})'
