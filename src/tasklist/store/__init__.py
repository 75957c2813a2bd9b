"""Local state holding the synchronized task list."""

from tasklist.store.task_collection import TaskCollection


__all__ = ['TaskCollection']
