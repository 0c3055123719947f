"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Infrastructure components that have a mock provider for tests
Component = Literal["identity", "parser", "persistence"]
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    Concrete providers (config, domain, application) have no subclasses.
    Each mockable infrastructure component has one base naming the
    component and two subclasses, a production one and a mock one, told
    apart by __is_mock__.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is the mock implementation
        __depends_on__: Components that must be real whenever this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
