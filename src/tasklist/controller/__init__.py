"""Decision logic for the task list workflows."""

from tasklist.controller.commands import (
    Command,
    CreateTask,
    DeleteTask,
    LoadTasks,
    Outcome,
)
from tasklist.controller.controller import InteractionController
from tasklist.controller.effects import EffectRunner
from tasklist.controller.state import SessionState


__all__ = [
    'Command',
    'CreateTask',
    'DeleteTask',
    'EffectRunner',
    'InteractionController',
    'LoadTasks',
    'Outcome',
    'SessionState',
]
