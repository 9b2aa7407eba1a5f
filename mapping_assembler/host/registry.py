"""Process-wide prefix and extension registries.

The prefix registry maps short names to namespace URIs; the extension
registry maps a configuration type URI to the object that opens resources
of that type as graphs. Both are plain dicts behind a lock, exposed through
global singletons, and keyed so that re-registering the same entry never
duplicates it.
"""

import logging
import threading
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from rdflib import Graph, URIRef
from rdflib.term import Node

from ..orchestrator.errors import RegistrationFailed
from .models import BUILTIN_OPENERS

logger = logging.getLogger(__name__)


@runtime_checkable
class GraphOpener(Protocol):
    """Anything that can open a configuration resource as a graph."""

    def open(self, resolver: Any, root: Node) -> Graph: ...


class PrefixRegistry:
    """Registry of namespace prefix mappings (short name -> URI)."""

    def __init__(self) -> None:
        self._prefixes: dict[str, str] = {}
        self._lock = threading.Lock()

    def add_prefix_mapping(self, short_name: str, uri: str) -> None:
        """Register a prefix. Re-adding an identical mapping is a no-op."""
        with self._lock:
            current = self._prefixes.get(short_name)
            if current == uri:
                return
            if current is not None:
                logger.warning(f"Prefix '{short_name}' rebound from {current} to {uri}")
            self._prefixes[short_name] = uri
        logger.debug(f"Registered prefix {short_name}: <{uri}>")

    def get(self, short_name: str) -> Optional[str]:
        """Get the URI registered for a short name."""
        return self._prefixes.get(short_name)

    def mappings(self) -> dict[str, str]:
        """Snapshot of all registered mappings."""
        with self._lock:
            return dict(self._prefixes)

    def bind_to(self, graph: Graph) -> None:
        """Bind every registered prefix on a graph's namespace manager."""
        for short_name, uri in self.mappings().items():
            graph.bind(short_name, uri, override=False)

    def __len__(self) -> int:
        return len(self._prefixes)


class ExtensionRegistry:
    """Registry of graph openers keyed by configuration type URI."""

    def __init__(self, builtins: bool = True) -> None:
        self._implementations: dict[URIRef, GraphOpener] = {}
        self._lock = threading.Lock()
        if builtins:
            self._register_builtins()

    def _register_builtins(self) -> None:
        for type_uri, opener in BUILTIN_OPENERS.items():
            self.implement_with(type_uri, opener)

    def implement_with(self, type_uri: URIRef, implementation: GraphOpener) -> None:
        """Bind a type URI to its implementation.

        Raises:
            RegistrationFailed: If the type is already bound to a different
                implementation, or the implementation cannot open graphs.
        """
        if not isinstance(implementation, GraphOpener):
            raise RegistrationFailed(
                f"Implementation for {type_uri} has no open(resolver, root) method: "
                f"{implementation!r}"
            )

        type_uri = URIRef(type_uri)
        with self._lock:
            current = self._implementations.get(type_uri)
            if current is implementation:
                return
            if current is not None:
                raise RegistrationFailed(
                    f"Type {type_uri} is already implemented by {current!r}"
                )
            self._implementations[type_uri] = implementation
        logger.debug(f"Registered implementation for {type_uri}: {implementation!r}")

    def get(self, type_uri: URIRef) -> Optional[GraphOpener]:
        """Get the implementation bound to a type URI."""
        return self._implementations.get(URIRef(type_uri))

    def implementations_for(self, types: Iterable[Node]) -> dict[URIRef, GraphOpener]:
        """Implementations for whichever of the given types are registered."""
        found = {}
        for type_uri in types:
            implementation = self._implementations.get(type_uri)
            if implementation is not None:
                found[type_uri] = implementation
        return found

    def list_types(self) -> list[URIRef]:
        """List all registered type URIs."""
        return sorted(self._implementations.keys())

    def __len__(self) -> int:
        return len(self._implementations)


# Global singleton instances
_prefix_registry: Optional[PrefixRegistry] = None
_extension_registry: Optional[ExtensionRegistry] = None
_singleton_lock = threading.Lock()


def get_prefix_registry() -> PrefixRegistry:
    """Get the global PrefixRegistry singleton."""
    global _prefix_registry
    with _singleton_lock:
        if _prefix_registry is None:
            _prefix_registry = PrefixRegistry()
        return _prefix_registry


def get_extension_registry() -> ExtensionRegistry:
    """Get the global ExtensionRegistry singleton."""
    global _extension_registry
    with _singleton_lock:
        if _extension_registry is None:
            _extension_registry = ExtensionRegistry()
        return _extension_registry
