"""Mapping engine protocol.

An engine is created from an EngineConfiguration by an engine factory
(usually the engine class itself), executed exactly once, and then asked
for the graph it produced.
"""

from typing import Callable, Protocol, runtime_checkable

from rdflib import Graph

from ..orchestrator.schemas import EngineConfiguration


@runtime_checkable
class MappingEngine(Protocol):
    """Protocol for relational-to-graph mapping engines."""

    def execute(self) -> None:
        """Run the mapping. May be slow (database I/O) and may raise."""
        ...

    def get_result_graph(self) -> Graph:
        """Graph produced by execute(). Only valid after it succeeded."""
        ...


EngineFactory = Callable[[EngineConfiguration], MappingEngine]
