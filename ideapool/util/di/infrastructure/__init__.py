"""Infrastructure providers."""

# Importing the production class registers it as a subclass of its base
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
