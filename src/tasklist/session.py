"""A task list session wiring the controller to the task service."""

import inspect
import logging

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import httpx

from tasklist.client import TaskClient
from tasklist.config import ClientSettings
from tasklist.controller import (
    Command,
    EffectRunner,
    InteractionController,
)
from tasklist.types import TaskId
from tasklist.view import ViewState


logger = logging.getLogger(__name__)

Confirm = bool | Callable[[], bool | Awaitable[bool]]
"""An answer to the delete confirmation, or a callable that asks for one."""


class TaskListSession:
    """One user's interaction with the task list.

    Each method runs a complete workflow: the controller decides, the
    effect runner calls the service, and the outcome is settled before
    the method returns a fresh `ViewState`. Workflow failures never raise;
    they show up as `ViewState.error_message`.
    """

    def __init__(
        self,
        client: TaskClient,
        controller: InteractionController | None = None,
    ):
        self.controller = controller or InteractionController()
        self.runner = EffectRunner(client)

    def view(self) -> ViewState:
        return self.controller.view()

    def set_draft(self, text: str) -> ViewState:
        self.controller.set_draft(text)
        return self.view()

    def dismiss_error(self) -> ViewState:
        self.controller.dismiss_error()
        return self.view()

    async def load(self) -> ViewState:
        """Runs the initial load of the task list."""
        return await self._execute(self.controller.start_load())

    async def add(self, text: str | None = None) -> ViewState:
        """Submits the draft, after replacing it with `text` when given."""
        if text is not None:
            self.controller.set_draft(text)
        return await self._execute(self.controller.submit())

    async def key_press(self, key: str) -> ViewState:
        return await self._execute(self.controller.key_press(key))

    async def delete(
        self, task_id: TaskId, confirm: Confirm = False
    ) -> ViewState:
        """Deletes a task once `confirm` says yes.

        Args:
            task_id: The id of the task to delete.
            confirm: Either the user's answer or a (sync or async) callable
                asking the user. Nothing happens when the answer is no.
        """
        confirmed = confirm() if callable(confirm) else confirm
        if inspect.isawaitable(confirmed):
            confirmed = await confirmed
        return await self._execute(
            self.controller.request_delete(task_id, bool(confirmed))
        )

    async def _execute(self, command: Command | None) -> ViewState:
        if command is not None:
            outcome = await self.runner.run(command)
            self.controller.settle(outcome)
        return self.view()


@asynccontextmanager
async def open_session(
    settings: ClientSettings | None = None,
    httpx_client: httpx.AsyncClient | None = None,
) -> AsyncIterator[TaskListSession]:
    """Opens a session against the configured task service.

    An `httpx.AsyncClient` is created, and closed on exit, unless one is
    passed in.
    """
    settings = settings or ClientSettings.from_env()
    logger.debug('Opening task list session against %s', settings.api_url)
    if httpx_client is not None:
        yield TaskListSession(TaskClient(httpx_client, settings.api_url))
        return
    async with httpx.AsyncClient() as owned_client:
        yield TaskListSession(TaskClient(owned_client, settings.api_url))
