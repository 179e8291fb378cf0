# Standard library imports
import logging
from typing import Any, Callable, Dict, Hashable

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Minimal dependency registry.
    
    Dependencies are keyed by type (or a string name for plain values) and
    registered either as a singleton instance or as a factory called on every
    lookup.
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register (or replace) a shared instance."""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register (or replace) a factory creating a fresh instance per lookup."""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")
