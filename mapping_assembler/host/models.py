"""Built-in base graph types.

ja:MemoryModel and ja:DefaultModel both open a fresh in-memory graph and
load every ja:externalContent document into it.
"""

import logging

from rdflib import Graph
from rdflib.plugins.stores.memory import Memory, SimpleMemory
from rdflib.term import Node

from ..vocabulary import DEFAULT_MODEL, EXTERNAL_CONTENT, MEMORY_MODEL

logger = logging.getLogger(__name__)

IN_MEMORY_STORES = (Memory, SimpleMemory)


def is_durable(graph: Graph) -> bool:
    """Whether writes to this graph may be persisted by its store."""
    return not isinstance(graph.store, IN_MEMORY_STORES)


class MemoryModelOpener:
    """Opens a ja:MemoryModel resource as an in-memory graph."""

    def open(self, resolver, root: Node) -> Graph:
        graph = Graph()
        for content in resolver.config_graph.objects(root, EXTERNAL_CONTENT):
            logger.debug(f"Loading external content {content} into {root}")
            graph.parse(str(content))
        logger.info(f"Opened in-memory model {root} ({len(graph)} statements)")
        return graph

    def __repr__(self) -> str:
        return "MemoryModelOpener()"


_memory_opener = MemoryModelOpener()

BUILTIN_OPENERS = {
    MEMORY_MODEL: _memory_opener,
    DEFAULT_MODEL: _memory_opener,
}
