"""Exceptions raised by the task service client.

Every failure of a request is a `TaskClientError`. The session turns them
into generic messages, so the attributes here exist for logging only.
"""


class TaskClientError(Exception):
    """Base exception for task service client errors."""


class TransportError(TaskClientError):
    """The request could not be sent, or its response could not be decoded."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f'Transport Error: {message}')


class HttpStatusError(TaskClientError):
    """The service answered with a status outside the 2xx range.

    Args:
        status_code: The HTTP status code of the response.
        message: A descriptive error message.
        url: The URL that was requested, when known.
    """

    def __init__(self, status_code: int, message: str, url: str | None = None):
        self.status_code = status_code
        self.message = message
        self.url = url
        super().__init__(f'HTTP Error {status_code}: {message}')
