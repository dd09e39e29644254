"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Out-of-contract input.

    The message is safe to show to clients.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when credentials or a session are missing or invalid."""

    def __init__(self, message: str = "not authorized"):
        self.message = message
        super().__init__(message)


class InternalError(DomainError):
    """Unspecified failure.

    The message is logged server-side only; clients receive a fixed message.
    """

    pass
