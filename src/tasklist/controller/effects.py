import logging

from tasklist.client import TaskClient, TaskClientError
from tasklist.controller.commands import (
    Command,
    CreateTask,
    DeleteTask,
    LoadTasks,
    Outcome,
)
from tasklist.utils.telemetry import trace_class


logger = logging.getLogger(__name__)


@trace_class()
class EffectRunner:
    """Executes controller commands against the task service.

    Client failures are captured in the returned `Outcome`; any other
    exception is a bug and propagates.
    """

    def __init__(self, client: TaskClient):
        self.client = client

    async def run(self, command: Command) -> Outcome:
        """Runs one command and returns its settled outcome."""
        logger.debug('Running command %r', command)
        try:
            if isinstance(command, LoadTasks):
                value = await self.client.list_tasks()
            elif isinstance(command, CreateTask):
                value = await self.client.create_task(command.text)
            elif isinstance(command, DeleteTask):
                value = await self.client.delete_task(command.task_id)
            else:
                raise TypeError(
                    f'Unknown command type: {type(command).__name__}'
                )
        except TaskClientError as e:
            logger.debug('Command %s failed: %s', command.command_id, e)
            return Outcome.failure(command, e)
        return Outcome.success(command, value)
