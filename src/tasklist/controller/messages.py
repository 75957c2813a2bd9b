"""User-facing messages shown by the task list."""

LOAD_FAILED = 'Failed to load tasks. Please check your connection.'
EMPTY_DRAFT = 'Please enter a task name'
ADD_FAILED = 'Failed to add task. Please try again.'
DELETE_FAILED = 'Failed to delete task. Please try again.'

CONFIRM_DELETE = 'Are you sure you want to delete this task?'
EMPTY_LIST = 'No tasks yet. Add one to get started!'
LOADING = 'Loading tasks...'
