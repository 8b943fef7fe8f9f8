"""
Domain exceptions raised by services.

Exception handlers registered in create_app() render them as
``{"message": ...}`` responses.
"""


class RecordsError(Exception):
    """Base class for domain errors."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RecordNotFound(RecordsError):
    """Referenced record does not exist (or is archived/deleted)."""

    status_code = 404


class RecordConflict(RecordsError):
    """Write would violate a uniqueness rule."""

    status_code = 409


class InvalidRequest(RecordsError):
    """Request is well-formed but not acceptable."""

    status_code = 400
