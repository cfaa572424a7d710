"""Errors raised when a batch of log entries cannot be delivered."""


class LogSendError(Exception):
    """Base class for failures of a logger's send operation."""


class SerializationError(LogSendError):
    """The batch could not be encoded into the service's payload."""


class TransportError(LogSendError):
    """The HTTP exchange could not be completed (DNS, TLS, refused, timeout)."""


class DeliveryError(LogSendError):
    """The logging service answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the service.
        body: Leading excerpt of the response body, possibly empty.
    """

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        message = f"Logging Error: status:{status_code}"
        if body:
            message = f"{message} {body}"
        super().__init__(message)
