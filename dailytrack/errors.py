"""Error taxonomy shared by the store, the gate and the screens."""


class TrackerError(Exception):
    """Base class for errors surfaced to the user as a flash message."""

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        return self.message


class ValidationError(TrackerError):
    """A form value was missing or malformed. Raised before any store call."""


class ReadError(TrackerError):
    """A list/read against the store failed."""


class WriteError(TrackerError):
    """An insert, update or delete was rejected by the store."""

    def __init__(self, message, conflict=False, not_found=False, **details):
        super().__init__(message, **details)
        self.conflict = conflict
        self.not_found = not_found


class AuthorizationError(TrackerError):
    """The signed-in user lacks the role a screen requires."""

