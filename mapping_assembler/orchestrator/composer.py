"""Composition of engine output with the base graph.

Two policies, picked per request:

ISOLATED (default) builds a new in-memory graph, eagerly copies every base
graph statement into it, then adds the engine output. Cost is a full copy
of the base graph, in memory, on every request; in exchange the base graph
and any durable store behind it are never written.

MUTATING adds the engine output straight into the base graph and returns
that same object. Callers must make sure nothing else writes the base graph
while this runs.
"""

import logging
from typing import Optional

from rdflib import Graph

from ..host.models import is_durable
from ..host.registry import PrefixRegistry, get_prefix_registry
from .schemas import CompositionMode

logger = logging.getLogger(__name__)


def _copy_statements(target: Graph, source: Graph) -> int:
    count = 0
    for triple in source.triples((None, None, None)):
        target.add(triple)
        count += 1
    return count


def _bind_namespaces(target: Graph, source: Graph) -> None:
    for prefix, namespace in source.namespaces():
        target.bind(prefix, namespace, override=False)


def compose_isolated(
    base_graph: Graph,
    engine_graph: Graph,
    prefixes: Optional[PrefixRegistry] = None,
) -> Graph:
    """Return a new graph holding base graph and engine statements."""
    composed = Graph()
    if prefixes is None:
        prefixes = get_prefix_registry()
    prefixes.bind_to(composed)
    _bind_namespaces(composed, base_graph)
    _bind_namespaces(composed, engine_graph)

    copied = _copy_statements(composed, base_graph)
    added = _copy_statements(composed, engine_graph)
    logger.info(
        f"Composed isolated graph: {copied} base + {added} engine statements "
        f"-> {len(composed)}"
    )
    return composed


def compose_mutating(base_graph: Graph, engine_graph: Graph) -> Graph:
    """Add engine statements into the base graph and return it."""
    if is_durable(base_graph):
        logger.warning(
            f"Mutating mode writes engine output through to durable store "
            f"{type(base_graph.store).__name__}"
        )
    before = len(base_graph)
    added = _copy_statements(base_graph, engine_graph)
    logger.info(
        f"Composed into base graph: {added} engine statements, "
        f"{before} -> {len(base_graph)}"
    )
    return base_graph


def compose(
    base_graph: Graph,
    engine_graph: Graph,
    mode: CompositionMode = CompositionMode.ISOLATED,
    prefixes: Optional[PrefixRegistry] = None,
) -> Graph:
    """Compose engine output with the base graph under the given mode."""
    if mode == CompositionMode.MUTATING:
        return compose_mutating(base_graph, engine_graph)
    return compose_isolated(base_graph, engine_graph, prefixes)
