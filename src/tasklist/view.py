"""Read-only state handed to the presentation layer."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from tasklist.types import Task


if TYPE_CHECKING:
    from tasklist.controller.state import SessionState


def counter_label(count: int) -> str:
    """Returns e.g. '1 task' or '3 tasks'; empty when there are none."""
    if count <= 0:
        return ''
    return f'{count} task{"" if count == 1 else "s"}'


class ViewState(BaseModel):
    """A snapshot of everything a view needs to render the task list."""

    model_config = ConfigDict(frozen=True)

    tasks: tuple[Task, ...] = ()
    draft_text: str = ''
    error_message: str | None = None
    is_loading: bool = False
    pending_deletes: int = 0

    @classmethod
    def compose(
        cls, tasks: tuple[Task, ...], state: 'SessionState'
    ) -> 'ViewState':
        return cls(
            tasks=tasks,
            draft_text=state.draft_text,
            error_message=state.error_message,
            is_loading=state.is_loading,
            pending_deletes=len(state.in_flight('delete')),
        )

    @property
    def can_submit(self) -> bool:
        """Whether the submit affordance is enabled."""
        return not self.is_loading and bool(self.draft_text.strip())

    @property
    def can_delete(self) -> bool:
        return not self.is_loading

    @property
    def show_loading_placeholder(self) -> bool:
        return self.is_loading and not self.tasks

    @property
    def is_empty(self) -> bool:
        return not self.tasks and not self.show_loading_placeholder

    @property
    def counter_label(self) -> str:
        return counter_label(len(self.tasks))
