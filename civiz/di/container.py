# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    GatewayProvider,
    StoreProvider,
    VisionProvider,
    SessionProvider,
    FundingProvider,
    StreetViewProvider,
)
from ..core.config import Settings, get_settings


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. External gateways and clients (GatewayProvider, StreetViewProvider)
    2. Vision store (StoreProvider) - depends on the generation gateway
    3. Use cases (VisionProvider, SessionProvider, FundingProvider) - depend on the store
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: gateways → store → use cases
        """
        # Step 1: External collaborators
        GatewayProvider.register(self)
        StreetViewProvider.register(self)
        
        # Step 2: The vision store (single owner of visions and ledger)
        StoreProvider.register(self)
        
        # Step 3: Use cases
        VisionProvider.register(self)
        SessionProvider.register(self)
        FundingProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next get_container() builds a fresh one."""
    global _container
    _container = None
