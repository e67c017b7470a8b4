"""
Domain errors raised by the services.

Each error carries the HTTP status the transport layer answers with
and a human readable message.  Services raise them; handlers
registered in ``main.create_app`` translate them into the response
envelope.  Nothing here retries or rolls back.
"""


class KanbanError(Exception):
    """Base class for all errors the board service reports to callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(KanbanError):
    """Required input is missing or empty."""

    status_code = 400


class NotFoundError(KanbanError):
    """A referenced board, column or task does not exist."""

    status_code = 404


class PreconditionError(KanbanError):
    """The operation was refused because of the current state."""

    status_code = 400


class StoreFailure(KanbanError):
    """The underlying storage raised an error."""

    status_code = 500
