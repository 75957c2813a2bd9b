"""Exceptions raised for locally detected input problems."""


class TaskValidationError(ValueError):
    """Raised when a draft cannot be submitted as a task."""

    def __init__(self, message: str, draft_text: str = ''):
        self.message = message
        self.draft_text = draft_text
        super().__init__(message)


def validate_draft(draft_text: str) -> str:
    """Returns the trimmed draft text.

    Raises:
        TaskValidationError: If the draft is empty or whitespace only.
    """
    text = draft_text.strip()
    if not text:
        raise TaskValidationError('Task text must not be empty', draft_text)
    return text
