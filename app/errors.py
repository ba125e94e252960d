"""Domain errors raised by the lecture workflow and its store."""


class LectureDeskError(Exception):
    """Base class for lecture workflow errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(LectureDeskError):
    """Missing or malformed input, e.g. no audio file uploaded."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(LectureDeskError):
    """Record absent, or not owned by the caller. The two cases are indistinguishable."""

    status_code = 404
    default_message = "Lecture summary not found"


class StoreError(LectureDeskError):
    """Persistence failure. Details are logged, never returned to the caller."""

    status_code = 500
    default_message = "Internal server error"
