"""
WHATDO - Error Types
====================
All errors are recoverable: the engine leaves its state untouched when one
is raised, and the CLI reports it and carries on.
"""


class WhatdoError(Exception):
    """Base class for whatdo errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"whatdo had error: {self.message}"


class DuplicateTaskError(WhatdoError):
    """Raised by add() when the task is already a member"""

    def __init__(self, task: str):
        super().__init__(f'item "{task}" already on the list')
        self.task = task


class TaskNotFoundError(WhatdoError):
    """Raised by drop() when the task is not a member"""

    def __init__(self, task: str):
        super().__init__(f'item "{task}" not removed (item not found)')
        self.task = task


NotFoundError = TaskNotFoundError


class StoreError(WhatdoError):
    """List file could not be read, parsed or written"""
