"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar
from uuid import UUID

from board.domain.error import NotFoundError

IdT = TypeVar("IdT")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, id_type: Callable[[UUID], IdT], resource: str) -> IdT:
    """Parse an id taken from a URL or token.

    A malformed id cannot name an existing resource, so it is reported as
    not found rather than as a bad request.

    Args:
        value: UUID string
        id_type: Identifier NewType to wrap the UUID in
        resource: Resource name used in the error message

    Raises:
        NotFoundError: If ``value`` is not a UUID
    """
    try:
        return id_type(UUID(value))
    except (TypeError, ValueError):
        raise NotFoundError(resource, value)
