"""Client-side task list synchronized with a remote task service."""

from tasklist.client import (
    HttpStatusError,
    TaskClient,
    TaskClientError,
    TransportError,
)
from tasklist.config import ClientSettings
from tasklist.controller import InteractionController
from tasklist.session import TaskListSession, open_session
from tasklist.store import TaskCollection
from tasklist.types import Task
from tasklist.view import ViewState


__all__ = [
    'ClientSettings',
    'HttpStatusError',
    'InteractionController',
    'Task',
    'TaskClient',
    'TaskClientError',
    'TaskCollection',
    'TaskListSession',
    'TransportError',
    'ViewState',
    'open_session',
]
