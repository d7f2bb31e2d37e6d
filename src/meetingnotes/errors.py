"""Error taxonomy shared by the services and the HTTP boundary."""


class MeetingNotesError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(MeetingNotesError):
    """Bad or missing client input."""

    status_code = 400


class PayloadTooLargeError(ValidationError):
    """Upload exceeds the configured size limit."""

    status_code = 413


class NotFoundError(MeetingNotesError):
    """Requested summary does not exist."""

    status_code = 404


class ConfigurationError(MeetingNotesError):
    """Required configuration (e.g. the LLM API key) is missing."""


class GenerationError(MeetingNotesError):
    """The LLM call failed or returned nothing usable."""
