"""Mapping assembler - relational-to-graph mapping assembly.

Plugs a relational-to-graph mapping engine into a declarative
configuration graph: a resource typed r2rml:Model names a base graph, a
mapping file and a database connection; opening it runs the engine once and
returns the engine output composed with the base graph.

- vocabulary.py   - r2rml: and ja: terms
- config.py       - AssemblySettings (env + optional YAML)
- host/           - prefix/extension registries, ResourceResolver, build()
- engine/         - MappingEngine protocol, factory resolution, invocation
- orchestrator/   - MappingAssembler, composition modes, error taxonomy
- registrar/      - ensure_registered() one-shot initializer
"""

__version__ = "0.1.0"

from .engine.backends import MappingEngine
from .engine.factory import set_engine_factory
from .host.resolver import ResourceResolver, build
from .orchestrator.assembler import MappingAssembler
from .orchestrator.errors import (
    AmbiguousParameter,
    AssemblyError,
    BaseGraphUnavailable,
    EngineExecutionFailed,
    InvalidParameter,
    MissingParameter,
    RegistrationFailed,
)
from .orchestrator.schemas import AssemblyRequest, CompositionMode, EngineConfiguration
from .registrar import ensure_registered

ensure_registered()

__all__ = [
    "AmbiguousParameter",
    "AssemblyError",
    "AssemblyRequest",
    "BaseGraphUnavailable",
    "CompositionMode",
    "EngineConfiguration",
    "EngineExecutionFailed",
    "InvalidParameter",
    "MappingAssembler",
    "MappingEngine",
    "MissingParameter",
    "RegistrationFailed",
    "ResourceResolver",
    "build",
    "ensure_registered",
    "set_engine_factory",
]
