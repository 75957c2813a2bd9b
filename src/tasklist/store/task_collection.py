import logging

from collections.abc import Iterable, Iterator

from tasklist.types import Task, TaskId


logger = logging.getLogger(__name__)


class TaskCollection:
    """Local copy of the task list, in service order.

    Holds state only; callers apply changes after the service confirmed them.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)
        logger.debug('TaskCollection initialized with %d tasks', len(self))

    @property
    def tasks(self) -> tuple[Task, ...]:
        """An immutable snapshot of the current tasks."""
        return tuple(self._tasks)

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Replaces the whole collection with `tasks`. No merging."""
        self._tasks = list(tasks)
        logger.debug('Collection replaced, now holding %d tasks', len(self))

    def append(self, task: Task) -> None:
        """Adds `task` at the end. Duplicate ids are not checked."""
        self._tasks.append(task)
        logger.debug('Task %s appended', task.id)

    def remove(self, task_id: TaskId) -> bool:
        """Removes the first task with `task_id`.

        Returns:
            True if a task was removed, False if no task had that id.
        """
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                logger.debug('Task %s removed', task_id)
                return True
        logger.warning(
            'Attempted to remove task %s which is not in the collection',
            task_id,
        )
        return False

    def get(self, task_id: TaskId) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __len__(self) -> int:
        return len(self._tasks)
