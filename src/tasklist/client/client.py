import json
import logging

from typing import Any
from urllib.parse import quote

import httpx

from pydantic import TypeAdapter, ValidationError

from tasklist.client.errors import HttpStatusError, TransportError
from tasklist.types import CreateTaskRequest, Task, TaskId
from tasklist.utils.telemetry import SpanKind, trace_class


logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])
_JSON_HEADERS = {'Content-Type': 'application/json'}


@trace_class(kind=SpanKind.CLIENT)
class TaskClient:
    """Client for the remote task service.

    Each operation makes exactly one HTTP request. Failures are raised as
    `TransportError` or `HttpStatusError`; nothing is retried.
    """

    def __init__(self, httpx_client: httpx.AsyncClient, base_url: str):
        """Initializes the TaskClient.

        Args:
            httpx_client: An async HTTP client instance (e.g., httpx.AsyncClient).
            base_url: The base URL of the task service.
        """
        self.base_url = base_url.rstrip('/')
        self.httpx_client = httpx_client

    async def list_tasks(
        self, *, http_kwargs: dict[str, Any] | None = None
    ) -> list[Task]:
        """Fetches every task, in the order reported by the service.

        Args:
            http_kwargs: Optional dictionary of keyword arguments to pass to the
                underlying httpx request.

        Returns:
            The list of `Task` objects.

        Raises:
            HttpStatusError: If the service answers with a non-success status.
            TransportError: If the request fails or the body cannot be decoded.
        """
        payload = await self._send_request(
            'GET', '/allTasks', http_kwargs=http_kwargs
        )
        try:
            tasks = _TASK_LIST.validate_python(payload)
        except ValidationError as e:
            raise TransportError(f'Invalid task list payload: {e}') from e
        logger.debug('Fetched %d tasks', len(tasks))
        return tasks

    async def create_task(
        self, text: str, *, http_kwargs: dict[str, Any] | None = None
    ) -> Task:
        """Creates a task and returns it with its service-assigned id.

        Args:
            text: The task text. Must not be empty.
            http_kwargs: Optional dictionary of keyword arguments to pass to the
                underlying httpx request.

        Returns:
            The created `Task`.

        Raises:
            ValueError: If `text` is empty.
            HttpStatusError: If the service answers with a non-success status.
            TransportError: If the request fails or the body cannot be decoded.
        """
        if not text:
            raise ValueError('Task text must not be empty')
        body = CreateTaskRequest(task_name=text)
        payload = await self._send_request(
            'POST', '/task', body=body.model_dump(), http_kwargs=http_kwargs
        )
        try:
            task = Task.model_validate(payload)
        except ValidationError as e:
            raise TransportError(f'Invalid task payload: {e}') from e
        logger.debug('Created task %s', task.id)
        return task

    async def delete_task(
        self, task_id: TaskId, *, http_kwargs: dict[str, Any] | None = None
    ) -> None:
        """Deletes a task by id.

        Args:
            task_id: The service-assigned id of the task.
            http_kwargs: Optional dictionary of keyword arguments to pass to the
                underlying httpx request.

        Raises:
            HttpStatusError: If the service answers with a non-success status.
            TransportError: If the request could not be sent.
        """
        await self._send_request(
            'DELETE',
            f'/task/{quote(str(task_id), safe="")}',
            expect_body=False,
            http_kwargs=http_kwargs,
        )
        logger.debug('Deleted task %s', task_id)

    async def _send_request(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        expect_body: bool = True,
        http_kwargs: dict[str, Any] | None = None,
    ) -> Any:
        """Sends one request to the service.

        Returns:
            The decoded JSON body, or None when `expect_body` is False.

        Raises:
            HttpStatusError: If the response status is not 2xx.
            TransportError: If the request fails or the body is not JSON.
        """
        kwargs: dict[str, Any] = {
            'headers': _JSON_HEADERS,
            **(http_kwargs or {}),
        }
        if body is not None:
            kwargs['json'] = body
        try:
            response = await self.httpx_client.request(
                method, f'{self.base_url}{path}', **kwargs
            )
            response.raise_for_status()
            if not expect_body:
                return None
            return response.json()
        except httpx.HTTPStatusError as e:
            raise HttpStatusError(
                e.response.status_code, str(e), url=str(e.request.url)
            ) from e
        except json.JSONDecodeError as e:
            raise TransportError(f'Invalid JSON response: {e}') from e
        except httpx.RequestError as e:
            raise TransportError(f'Network communication error: {e}') from e
        except httpx.InvalidURL as e:
            raise TransportError(f'Invalid request URL: {e}') from e
