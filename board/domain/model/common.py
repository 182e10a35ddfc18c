"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable; changes produce validated copies via ``evolve``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and validation re-run.

        Unlike ``model_copy(update=...)``, field constraints are checked
        against the new values.
        """
        return self.model_validate({**dict(self), **changes})
