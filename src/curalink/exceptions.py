"""Domain errors and the HTTP status each one maps to."""


class CuraLinkError(Exception):
    """Base for errors that carry a user-visible message and status code."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CuraLinkError):
    """Malformed or missing caller input."""

    status_code = 400


class ConflictError(CuraLinkError):
    """A unique key (email) is already taken."""

    status_code = 400


class NotFoundError(CuraLinkError):
    """No matching record, or the record has the wrong user type."""

    status_code = 404


class InvalidCredentialsError(CuraLinkError):
    status_code = 400


class UpstreamError(CuraLinkError):
    """A dependent external call failed."""

    status_code = 500


class ConfigurationError(CuraLinkError):
    """A required operational secret is missing."""

    status_code = 500
