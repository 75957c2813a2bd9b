import logging

from tasklist.controller.commands import Command


logger = logging.getLogger(__name__)

_LOADING_KINDS = frozenset({'load', 'add'})


class SessionState:
    """Ephemeral UI state of one task list session.

    Every issued command is tracked in flight by its id until it settles,
    so overlapping workflows never clear each other's loading status.
    """

    def __init__(self) -> None:
        self.draft_text = ''
        self.error_message: str | None = None
        self._in_flight: dict[str, Command] = {}

    def begin(self, command: Command) -> None:
        self._in_flight[command.command_id] = command
        logger.debug(
            'Command %s (%s) in flight', command.command_id, command.kind
        )

    def finish(self, command: Command) -> bool:
        """Stops tracking `command`. Returns False if it was not in flight."""
        if self._in_flight.pop(command.command_id, None) is None:
            logger.warning(
                'Command %s (%s) settled but was not in flight',
                command.command_id,
                command.kind,
            )
            return False
        logger.debug(
            'Command %s (%s) settled', command.command_id, command.kind
        )
        return True

    def in_flight(self, kind: str | None = None) -> list[Command]:
        """Commands still awaiting settlement, optionally of one kind."""
        return [
            command
            for command in self._in_flight.values()
            if kind is None or command.kind == kind
        ]

    @property
    def is_loading(self) -> bool:
        """True while a load or add command is in flight. Deletes never count."""
        return any(
            command.kind in _LOADING_KINDS
            for command in self._in_flight.values()
        )

    def set_error(self, message: str) -> None:
        if self.error_message and self.error_message != message:
            logger.debug('Replacing error message %r', self.error_message)
        self.error_message = message

    def clear_error(self) -> None:
        self.error_message = None
