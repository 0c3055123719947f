"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from prep.util.di import COMPONENTS, PROVIDERS, Component
from prep.util.di.container import create_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Settings are loaded from environment variables like in production.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components or dependency violations

    Examples:
        # Unit and e2e tests - all mocks
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)
    return create_container(mocked=set(COMPONENTS - unmock))


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject unknown components and unmet __depends_on__ requirements.

    Raises:
        ValueError: If unknown components or dependency violations
    """
    unknown = unmock - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    for base in PROVIDERS:
        if base.__mock_component__ in unmock:
            missing = base.__depends_on__ - unmock
            if missing:
                raise ValueError(
                    f"Component '{base.__mock_component__}' requires {missing} "
                    "to be unmocked"
                )
