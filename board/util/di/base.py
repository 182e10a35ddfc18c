"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base of all providers.

    A provider that declares ``__mock_component__`` is a mockable component:
    its subclasses are the implementations, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
