"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class LimitExceededError(DomainError):
    """Raised when a user reaches a configured content limit."""

    def __init__(self, message: str):
        super().__init__(message)


class UnauthenticatedError(DomainError):
    """Raised when a session token is missing or invalid."""

    pass


class ConflictError(DomainError):
    """Raised when a resource with the same identifying fields already exists."""

    pass
