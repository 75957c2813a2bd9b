import asyncio
import json

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from tasklist.client import TaskClient
from tasklist.config import ClientSettings
from tasklist.controller import messages
from tasklist.session import TaskListSession, open_session
from tasklist.types import Task


BASE_URL = 'http://localhost:5000'


class FakeTaskService:
    """In-memory stand-in for the remote task service, served via MockTransport."""

    def __init__(self, tasks: list[dict[str, Any]] | None = None):
        self.tasks: list[dict[str, Any]] = list(tasks or [])
        self.next_id = max((t['TaskID'] for t in self.tasks), default=0) + 1
        self.requests: list[httpx.Request] = []
        self.fail_with: dict[str, int] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method = request.method
        if method in self.fail_with:
            return httpx.Response(self.fail_with[method])
        path = request.url.path
        if method == 'GET' and path == '/allTasks':
            return httpx.Response(200, json=self.tasks)
        if method == 'POST' and path == '/task':
            body = json.loads(request.content)
            task = {'TaskID': self.next_id, 'Task': body['task_name']}
            self.next_id += 1
            self.tasks.append(task)
            return httpx.Response(200, json=task)
        if method == 'DELETE' and path.startswith('/task/'):
            task_id = path.removeprefix('/task/')
            self.tasks = [
                t for t in self.tasks if str(t['TaskID']) != task_id
            ]
            return httpx.Response(200)
        return httpx.Response(404)

    def methods(self) -> list[str]:
        return [request.method for request in self.requests]


@pytest.fixture
def service() -> FakeTaskService:
    return FakeTaskService([{'TaskID': 1, 'Task': 'Buy milk'}])


@pytest.fixture
def session(service: FakeTaskService) -> TaskListSession:
    httpx_client = httpx.AsyncClient(transport=httpx.MockTransport(service))
    return TaskListSession(TaskClient(httpx_client, BASE_URL))


@pytest.mark.asyncio
async def test_initial_load_shows_server_tasks(session: TaskListSession):
    view = await session.load()

    assert view.tasks == (Task(id=1, text='Buy milk'),)
    assert view.counter_label == '1 task'
    assert not view.is_loading


@pytest.mark.asyncio
async def test_add_trims_draft_and_resets_it(
    session: TaskListSession, service: FakeTaskService
):
    await session.load()
    session.set_draft('  Write report  ')

    view = await session.add()

    assert json.loads(service.requests[-1].content) == {
        'task_name': 'Write report'
    }
    assert view.tasks[-1] == Task(id=2, text='Write report')
    assert view.draft_text == ''
    assert view.counter_label == '2 tasks'


@pytest.mark.asyncio
async def test_whitespace_draft_sends_nothing(
    session: TaskListSession, service: FakeTaskService
):
    await session.load()

    view = await session.add('    ')

    assert service.methods() == ['GET']
    assert view.error_message == messages.EMPTY_DRAFT


@pytest.mark.asyncio
async def test_enter_key_submits(session: TaskListSession):
    await session.load()
    session.set_draft('Call mom')

    view = await session.key_press('Enter')

    assert [task.text for task in view.tasks] == ['Buy milk', 'Call mom']


@pytest.mark.asyncio
async def test_confirmed_delete_removes_task(session: TaskListSession):
    await session.load()

    view = await session.delete(1, confirm=True)

    assert view.tasks == ()
    assert view.is_empty
    assert view.counter_label == ''


@pytest.mark.asyncio
async def test_declined_delete_sends_nothing(
    session: TaskListSession, service: FakeTaskService
):
    await session.load()
    confirm = MagicMock(return_value=False)

    view = await session.delete(1, confirm=confirm)

    confirm.assert_called_once_with()
    assert service.methods() == ['GET']
    assert len(view.tasks) == 1


@pytest.mark.asyncio
async def test_delete_accepts_async_confirmation(session: TaskListSession):
    await session.load()
    confirm = AsyncMock(return_value=True)

    view = await session.delete(1, confirm=confirm)

    confirm.assert_awaited_once()
    assert view.tasks == ()


@pytest.mark.asyncio
async def test_create_server_error_keeps_state(
    session: TaskListSession, service: FakeTaskService
):
    await session.load()
    service.fail_with['POST'] = 500
    before = session.view().tasks

    view = await session.add('Write report')

    assert view.tasks == before
    assert view.error_message == messages.ADD_FAILED
    assert view.draft_text == 'Write report'
    assert not view.is_loading


@pytest.mark.asyncio
async def test_load_failure_is_reported(
    session: TaskListSession, service: FakeTaskService
):
    service.fail_with['GET'] = 502

    view = await session.load()

    assert view.tasks == ()
    assert view.error_message == messages.LOAD_FAILED
    assert not view.is_loading


@pytest.mark.asyncio
async def test_delete_failure_keeps_collection(
    session: TaskListSession, service: FakeTaskService
):
    await session.load()
    service.fail_with['DELETE'] = 500

    view = await session.delete(1, confirm=True)

    assert len(view.tasks) == 1
    assert view.error_message == messages.DELETE_FAILED


@pytest.mark.asyncio
async def test_network_failure_never_escapes():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('Connection refused', request=request)

    httpx_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    session = TaskListSession(TaskClient(httpx_client, BASE_URL))

    assert (await session.load()).error_message == messages.LOAD_FAILED
    assert (await session.add('x')).error_message == messages.ADD_FAILED
    assert (
        await session.delete(1, confirm=True)
    ).error_message == messages.DELETE_FAILED


@pytest.mark.asyncio
async def test_dismiss_error(session: TaskListSession):
    await session.add('')
    assert session.dismiss_error().error_message is None


@pytest.mark.asyncio
async def test_loading_flag_during_interleaved_workflows():
    """An add in flight keeps the loading flag while a delete settles."""
    add_may_finish = asyncio.Event()
    mock_client = AsyncMock(spec=TaskClient)
    mock_client.list_tasks.return_value = [Task(id=1, text='Buy milk')]
    mock_client.delete_task.return_value = None

    async def slow_create(text: str) -> Task:
        await add_may_finish.wait()
        return Task(id=2, text=text)

    mock_client.create_task.side_effect = slow_create
    session = TaskListSession(mock_client)
    await session.load()

    add = asyncio.create_task(session.add('Write report'))
    await asyncio.sleep(0)
    assert session.view().is_loading

    view = await session.delete(1, confirm=True)
    assert view.is_loading
    assert view.tasks == ()

    add_may_finish.set()
    view = await add

    assert not view.is_loading
    assert view.tasks == (Task(id=2, text='Write report'),)


@pytest.mark.asyncio
async def test_open_session_uses_given_client(service: FakeTaskService):
    httpx_client = httpx.AsyncClient(transport=httpx.MockTransport(service))
    settings = ClientSettings('http://tasks.example.com/')

    async with open_session(settings, httpx_client=httpx_client) as session:
        await session.load()

    assert str(service.requests[0].url) == 'http://tasks.example.com/allTasks'
    assert not httpx_client.is_closed


@pytest.mark.asyncio
async def test_open_session_closes_owned_client():
    async with open_session(ClientSettings()) as session:
        httpx_client = session.runner.client.httpx_client
        assert session.runner.client.base_url == BASE_URL
    assert httpx_client.is_closed


@pytest.mark.asyncio
async def test_invalid_api_url_settles_workflow():
    service = FakeTaskService()
    httpx_client = httpx.AsyncClient(transport=httpx.MockTransport(service))
    session = TaskListSession(TaskClient(httpx_client, 'http://[::1'))

    view = await session.load()

    assert not view.is_loading
    assert view.error_message == messages.LOAD_FAILED
    assert session.controller.state.in_flight() == []
    assert service.requests == []


@pytest.mark.asyncio
async def test_delete_of_id_with_reserved_characters():
    service = FakeTaskService()
    service.tasks = [{'TaskID': 'a?b', 'Task': 'Buy milk'}]
    httpx_client = httpx.AsyncClient(transport=httpx.MockTransport(service))
    session = TaskListSession(TaskClient(httpx_client, BASE_URL))
    await session.load()

    view = await session.delete('a?b', confirm=True)

    request = service.requests[-1]
    assert request.method == 'DELETE'
    assert request.url.raw_path == b'/task/a%3Fb'
    assert view.tasks == ()
