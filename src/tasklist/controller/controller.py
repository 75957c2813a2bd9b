import logging

from tasklist.controller import messages
from tasklist.controller.commands import (
    Command,
    CreateTask,
    DeleteTask,
    LoadTasks,
    Outcome,
)
from tasklist.controller.state import SessionState
from tasklist.store import TaskCollection
from tasklist.types import Task, TaskId
from tasklist.utils.errors import TaskValidationError, validate_draft
from tasklist.view import ViewState


logger = logging.getLogger(__name__)


class InteractionController:
    """Decides what each user intent does to the task list.

    The controller never performs I/O. Intents return the `Command` to run
    (or None when nothing should be sent), and `settle` applies the
    `Outcome` of a command to the collection and the session state.
    """

    def __init__(
        self,
        collection: TaskCollection | None = None,
        state: SessionState | None = None,
    ):
        self.collection = (
            collection if collection is not None else TaskCollection()
        )
        self.state = state if state is not None else SessionState()

    def view(self) -> ViewState:
        """Returns a snapshot for the presentation layer."""
        return ViewState.compose(self.collection.tasks, self.state)

    def set_draft(self, text: str) -> None:
        self.state.draft_text = text

    def dismiss_error(self) -> None:
        self.state.clear_error()

    def start_load(self) -> LoadTasks:
        """Starts the initial load of the task list."""
        command = LoadTasks()
        self._begin(command)
        return command

    def submit(self) -> CreateTask | None:
        """Starts adding the current draft as a new task.

        Returns:
            The `CreateTask` command, or None when the draft is empty or
            whitespace only. In that case the validation message is shown
            and nothing is sent.
        """
        try:
            text = validate_draft(self.state.draft_text)
        except TaskValidationError as e:
            logger.info('Draft rejected: %s', e.message)
            self.state.set_error(messages.EMPTY_DRAFT)
            return None
        command = CreateTask(text=text)
        self._begin(command)
        return command

    def key_press(self, key: str) -> CreateTask | None:
        """Handles a key press in the draft input. Enter submits unless loading."""
        if key != 'Enter' or self.state.is_loading:
            return None
        return self.submit()

    def request_delete(
        self, task_id: TaskId, confirmed: bool
    ) -> DeleteTask | None:
        """Starts deleting a task once the user has confirmed.

        Declining leaves every piece of state untouched.
        """
        if not confirmed:
            logger.debug('Delete of task %s declined', task_id)
            return None
        command = DeleteTask(task_id=task_id)
        self._begin(command)
        return command

    def settle(self, outcome: Outcome) -> None:
        """Applies the outcome of a command issued by this controller."""
        command = outcome.command
        if not isinstance(command, LoadTasks | CreateTask | DeleteTask):
            raise TypeError(f'Unknown command type: {type(command).__name__}')
        self.state.finish(command)
        if isinstance(command, LoadTasks):
            self._settle_load(outcome)
        elif isinstance(command, CreateTask):
            self._settle_create(outcome)
        else:
            self._settle_delete(command, outcome)

    def _begin(self, command: Command) -> None:
        self.state.clear_error()
        self.state.begin(command)

    def _settle_load(self, outcome: Outcome) -> None:
        if not outcome.ok:
            logger.error('Error fetching tasks: %s', outcome.error)
            self.state.set_error(messages.LOAD_FAILED)
            return
        tasks: list[Task] = outcome.value
        self.collection.replace_all(tasks)
        logger.info('Loaded %d tasks', len(tasks))

    def _settle_create(self, outcome: Outcome) -> None:
        if not outcome.ok:
            logger.error('Error adding task: %s', outcome.error)
            self.state.set_error(messages.ADD_FAILED)
            return
        task: Task = outcome.value
        self.collection.append(task)
        self.state.draft_text = ''
        logger.info('Task %s added', task.id)

    def _settle_delete(self, command: DeleteTask, outcome: Outcome) -> None:
        if not outcome.ok:
            logger.error(
                'Error deleting task %s: %s', command.task_id, outcome.error
            )
            self.state.set_error(messages.DELETE_FAILED)
            return
        self.collection.remove(command.task_id)
        logger.info('Task %s deleted', command.task_id)
