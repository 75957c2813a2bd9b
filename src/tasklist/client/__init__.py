"""Client-side components for talking to the remote task service."""

from tasklist.client.client import TaskClient
from tasklist.client.errors import (
    HttpStatusError,
    TaskClientError,
    TransportError,
)


__all__ = [
    'HttpStatusError',
    'TaskClient',
    'TaskClientError',
    'TransportError',
]
