# File: app/core/exceptions.py

"""
Exception types raised by the service.

Route functions translate "not found" into HTTPException themselves;
everything here is mapped to a response by the handlers registered in
app.core.middleware.
"""


class UsersAPIError(Exception):
    """Base class for service errors."""


class PersistenceError(UsersAPIError):
    """
    The database failed while serving a request.

    The original driver / SQLAlchemy error is kept as ``__cause__``.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Database error during {operation}")


class StartupError(UsersAPIError):
    """The service cannot start (missing configuration, unreachable store)."""
