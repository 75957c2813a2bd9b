"""Runtime settings for the task list client."""

import os


DEFAULT_API_URL = 'http://localhost:5000'
API_URL_ENV = 'TASKLIST_API_URL'


class ClientSettings:
    """Settings for reaching the task service."""

    def __init__(self, api_url: str | None = None):
        self.api_url = (api_url or DEFAULT_API_URL).rstrip('/')

    @classmethod
    def from_env(cls, api_url: str | None = None) -> 'ClientSettings':
        """Builds settings from the environment.

        An explicit `api_url` takes precedence over `TASKLIST_API_URL`.
        """
        return cls(api_url=api_url or os.getenv(API_URL_ENV))

    def __repr__(self) -> str:
        return f'ClientSettings(api_url={self.api_url!r})'
