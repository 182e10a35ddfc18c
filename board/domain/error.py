"""Errors raised by the domain layer and mapped to HTTP by the interface."""


class DomainError(Exception):
    """Base class of every domain error."""

    pass


class ValidationError(DomainError):
    """A domain value or aggregate failed its invariants."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__("Not authorized")


class NotFoundError(DomainError):
    """A post, comment, reply or user does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConcurrentModificationError(DomainError):
    """Raised when an aggregate changed between load and save."""

    def __init__(self, resource: str, resource_id: str, expected_version: int):
        self.resource = resource
        self.resource_id = resource_id
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {resource_id} was modified concurrently "
            f"(expected version {expected_version})"
        )


class UserAlreadyExistsError(DomainError):
    """Raised when registering a username or email that is taken."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"A user with this {field} already exists")


class InvalidCredentialsError(DomainError):
    """Raised when a login attempt does not match a user."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")
