"""Infrastructure providers."""

# Import bases
from .identity import IdentityProvider
from .parser import ParserProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityProvider  # noqa: F401
from .parser import ProdParserProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "IdentityProvider",
    "ParserProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdParserProvider",
    "ProdPersistenceProvider",
]
