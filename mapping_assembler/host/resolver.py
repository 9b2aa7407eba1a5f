"""Resource resolution over a declarative configuration graph.

A ResourceResolver is one resolution session: it reads single-valued
properties off configuration resources and opens resources as graphs by
dispatching on their rdf:type through the extension registry. Graphs it
opens are cached for the lifetime of the session, so two references to the
same base model yield the same graph object.

A resolver is not meant to be shared between threads; concurrent
assemblies each use their own.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rdflib import RDF, Graph, Literal
from rdflib.term import Node

from ..registrar import ensure_registered
from ..vocabulary import MODEL_TYPE
from .errors import (
    AmbiguousTypeError,
    BadObjectError,
    CircularReferenceError,
    MultipleValuesError,
    NoImplementationError,
    ResolutionError,
)
from .registry import ExtensionRegistry, get_extension_registry

logger = logging.getLogger(__name__)


class ResourceResolver:
    """Reads configuration resources and opens them as graphs."""

    def __init__(
        self,
        config_graph: Graph,
        extensions: Optional[ExtensionRegistry] = None,
    ):
        """Initialize the resolver.

        Args:
            config_graph: Parsed configuration graph
            extensions: ExtensionRegistry instance (default: global singleton)
        """
        self.config_graph = config_graph
        self.extensions = extensions if extensions is not None else get_extension_registry()
        self._models: dict[Node, Graph] = {}
        self._opening: set[Node] = set()

    def _unique_value(self, root: Node, prop: Node) -> Optional[Node]:
        values = list(self.config_graph.objects(root, prop))
        if len(values) > 1:
            raise MultipleValuesError(root, prop, len(values))
        return values[0] if values else None

    def get_unique_resource(self, root: Node, prop: Node) -> Optional[Node]:
        """Get the single resource value of a property, or None.

        Raises:
            MultipleValuesError: If the property has more than one value
            BadObjectError: If the value is a literal
        """
        value = self._unique_value(root, prop)
        if isinstance(value, Literal):
            raise BadObjectError(root, prop, "resource")
        return value

    def get_unique_literal(self, root: Node, prop: Node) -> Optional[Literal]:
        """Get the single literal value of a property, or None.

        Raises:
            MultipleValuesError: If the property has more than one value
            BadObjectError: If the value is a resource
        """
        value = self._unique_value(root, prop)
        if value is not None and not isinstance(value, Literal):
            raise BadObjectError(root, prop, "literal")
        return value

    def open_model(self, resource: Node) -> Graph:
        """Open a configuration resource as a graph.

        Raises:
            NoImplementationError: If none of the resource's types is registered
            AmbiguousTypeError: If its types map to different implementations
            CircularReferenceError: If opening it requires opening itself
        """
        if resource in self._models:
            return self._models[resource]
        if resource in self._opening:
            raise CircularReferenceError(resource, "resource refers back to itself")

        types = list(self.config_graph.objects(resource, RDF.type))
        found = self.extensions.implementations_for(types)
        distinct = {id(impl): impl for impl in found.values()}
        if not distinct:
            raise NoImplementationError(
                resource, f"no implementation registered for types {[str(t) for t in types]}"
            )
        if len(distinct) > 1:
            raise AmbiguousTypeError(
                resource, f"types {[str(t) for t in found]} map to different implementations"
            )
        opener = next(iter(distinct.values()))

        self._opening.add(resource)
        try:
            graph = opener.open(self, resource)
        finally:
            self._opening.discard(resource)

        self._models[resource] = graph
        return graph

    def open_empty_model(self, resource: Node) -> Graph:
        """Open a resource as a graph; same as open_model()."""
        return self.open_model(resource)


def build(
    source: Union[Graph, Path, str],
    root: Optional[Node] = None,
    extensions: Optional[ExtensionRegistry] = None,
    format: Optional[str] = None,
) -> Graph:
    """Parse a configuration graph and open one of its resources.

    Args:
        source: Configuration graph, or a path/URL to parse
        root: Resource to open (default: the unique r2rml:Model resource)
        extensions: ExtensionRegistry instance (default: global singleton)
        format: rdflib parser format (default: guessed from the source)

    Returns:
        The opened graph

    Raises:
        ResolutionError: If no root is given and there is not exactly one
            r2rml:Model resource, or if resolution fails
    """
    ensure_registered()

    if isinstance(source, Graph):
        config_graph = source
    else:
        config_graph = Graph()
        config_graph.parse(str(source), format=format)
        logger.info(f"Parsed configuration {source} ({len(config_graph)} statements)")

    if root is None:
        candidates = list(set(config_graph.subjects(RDF.type, MODEL_TYPE)))
        if len(candidates) != 1:
            raise ResolutionError(
                None,
                f"expected exactly one resource of type {MODEL_TYPE}, found {len(candidates)}",
            )
        root = candidates[0]

    return ResourceResolver(config_graph, extensions).open_model(root)
