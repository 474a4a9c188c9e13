# forum/core/errors.py
"""
Error kinds raised by the concepts.

Concepts raise these at the point of detection; they propagate unmodified to
the global exception handler in main.py, which maps each kind to an HTTP
status and returns {"error": message}.

    ForumError (base)
    ├── BadValuesError        → 400 (empty or invalid field)
    ├── UnauthenticatedError  → 401 (not logged in, wrong credentials)
    ├── NotAllowedError       → 403 (ownership or session-state mismatch)
    ├── NotFoundError         → 404 (referenced entity absent)
    └── ConflictError         → 409 (uniqueness / duplicate state)
"""
from typing import Any


class ForumError(Exception):
    """Base exception for all application errors."""

    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred", *args: Any):
        self.template = message
        self.values = args
        self.message = message.format(*args) if args else message
        super().__init__(self.message)

    def format_with(self, *args: Any) -> str:
        """
        Render the message template with display values.

        Errors that carry raw ids (e.g. "{0} is not the author of topic {1}!")
        are humanised by the router, which resolves the ids through the owning
        concepts and calls this with usernames or titles.
        """
        return self.template.format(*args)


class BadValuesError(ForumError):
    status_code = 400


class UnauthenticatedError(ForumError):
    status_code = 401


class NotAllowedError(ForumError):
    status_code = 403


class NotFoundError(ForumError):
    status_code = 404


class ConflictError(ForumError):
    status_code = 409
