"""
Error taxonomy shared by the services and the HTTP layer.

Every error the API reports to a client is an ``ApiError`` carrying the
HTTP status code and the message placed in the envelope's ``error``
field.  Services raise ``ValidationError`` for bad input; the
application's exception handlers translate any ``ApiError`` into an
envelope and turn everything else into an ``InternalError``.
"""


class ApiError(Exception):
    """Base class for errors that map onto an error envelope."""

    status_code: int = 500
    default_message: str = "Something went wrong on the server!"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """The client sent a payload that cannot be stored."""

    status_code = 400
    default_message = "Invalid request payload"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Route not found"


class InternalError(ApiError):
    """Unexpected failure.  The message is generic; details go to the log only."""

    status_code = 500
    default_message = "Something went wrong on the server!"
