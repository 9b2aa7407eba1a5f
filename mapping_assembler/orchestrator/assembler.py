"""Mapping assembler: the orchestrator registered for r2rml:Model.

Flow for one request:
1. Resolve and validate every parameter of the r2rml:Model resource
   (no I/O happens before all of them check out)
2. Open the base graph referenced by r2rml:baseModel
3. Run the mapping engine exactly once
4. Compose engine output with the base graph (isolated or mutating)
"""

import logging
from typing import Any, Optional, Union

from rdflib import Graph, Literal
from rdflib.term import Node

from .. import config
from ..engine.backends import EngineFactory
from ..engine.runner import run_mapping
from ..host.errors import BadObjectError, MultipleValuesError
from ..host.registry import PrefixRegistry
from ..vocabulary import (
    BASE_MODEL,
    COMPOSITION_MODE,
    CONNECTION_URL,
    MAPPING_FILE,
    PASSWORD,
    USER,
)
from .composer import compose
from .errors import (
    AmbiguousParameter,
    BaseGraphUnavailable,
    InvalidParameter,
    MissingParameter,
)
from .schemas import AssemblyRequest, CompositionMode

logger = logging.getLogger(__name__)


def parse_mode(value: Union[CompositionMode, str], root: Optional[Node] = None) -> CompositionMode:
    """Normalize a composition mode given by a caller or a request.

    Raises:
        InvalidParameter: If the value names no known mode
    """
    if isinstance(value, CompositionMode):
        return value
    try:
        return CompositionMode(str(value).strip().lower())
    except ValueError:
        allowed = [m.value for m in CompositionMode]
        raise InvalidParameter(
            "compositionMode", root, f"'{value}' is not one of {allowed}"
        ) from None


class MappingAssembler:
    """Opens r2rml:Model resources as composed graphs.

    Usage:
        assembler = MappingAssembler(engine_factory=MyEngine)
        graph = assembler.assemble(root, ResourceResolver(config_graph))

    The instance holds no per-request state; one instance serves any number
    of concurrent requests as long as each uses its own resolver.
    """

    def __init__(
        self,
        mode: Optional[Union[CompositionMode, str]] = None,
        engine_factory: Optional[EngineFactory] = None,
        prefixes: Optional[PrefixRegistry] = None,
    ):
        """Initialize the assembler.

        Args:
            mode: Default composition mode (default: settings default_mode)
            engine_factory: Mapping engine factory (default: get_engine_factory())
            prefixes: PrefixRegistry bound on isolated graphs (default: global singleton)
        """
        self._mode = parse_mode(mode) if mode is not None else None
        self.engine_factory = engine_factory
        self.prefixes = prefixes

    @property
    def mode(self) -> CompositionMode:
        """Composition mode used when neither caller nor request picks one."""
        if self._mode is not None:
            return self._mode
        return config.get_settings().default_mode

    def __repr__(self) -> str:
        return f"MappingAssembler(mode={self._mode.value if self._mode else 'default'})"

    # -- host extension contract --

    def open(self, resolver: Any, root: Node) -> Graph:
        """Open an r2rml:Model resource. Called by ResourceResolver.open_model()."""
        return self.assemble(root, resolver)

    # -- parameter resolution --

    @staticmethod
    def _unique(resolver: Any, getter: str, root: Node, prop: Node, name: str) -> Optional[Node]:
        try:
            value = getattr(resolver, getter)(root, prop)
        except MultipleValuesError as e:
            raise AmbiguousParameter(name, root) from e
        except BadObjectError as e:
            raise InvalidParameter(name, root, f"expected a {e.expected}") from e

        # Resolvers that hand back every value instead of raising
        if isinstance(value, (list, tuple, set, frozenset)):
            if len(value) > 1:
                raise AmbiguousParameter(name, root)
            value = next(iter(value), None)

        logger.debug(f"Resolved r2rml:{name} on {root}: {'present' if value is not None else 'absent'}")
        return value

    def _required_literal(self, resolver: Any, root: Node, prop: Node, name: str) -> str:
        value = self._unique(resolver, "get_unique_literal", root, prop, name)
        if value is None:
            raise MissingParameter(name, root)
        return str(value)

    def _optional_literal(self, resolver: Any, root: Node, prop: Node, name: str) -> Optional[str]:
        value = self._unique(resolver, "get_unique_literal", root, prop, name)
        return str(value) if value is not None else None

    def resolve_request(self, root: Node, resolver: Any) -> AssemblyRequest:
        """Resolve and validate all parameters of an r2rml:Model resource.

        Raises:
            MissingParameter: If baseModel, mappingFile or connectionURL is absent
            AmbiguousParameter: If any single-valued parameter has several values
            InvalidParameter: If a value has the wrong kind or an unknown mode
        """
        base_model_ref = self._unique(resolver, "get_unique_resource", root, BASE_MODEL, "baseModel")
        if base_model_ref is None:
            raise MissingParameter("baseModel", root)
        if isinstance(base_model_ref, Literal):
            raise InvalidParameter("baseModel", root, "expected a resource")

        mapping_file = self._required_literal(resolver, root, MAPPING_FILE, "mappingFile")
        connection_url = self._required_literal(resolver, root, CONNECTION_URL, "connectionURL")
        user = self._optional_literal(resolver, root, USER, "user")
        password = self._optional_literal(resolver, root, PASSWORD, "password")

        mode = None
        mode_value = self._optional_literal(resolver, root, COMPOSITION_MODE, "compositionMode")
        if mode_value is not None:
            mode = parse_mode(mode_value, root)

        return AssemblyRequest(
            root=root,
            base_model_ref=base_model_ref,
            mapping_file=mapping_file,
            connection_url=connection_url,
            user=user,
            password=password,
            mode=mode,
        )

    def select_mode(
        self,
        request: AssemblyRequest,
        mode: Optional[Union[CompositionMode, str]] = None,
    ) -> CompositionMode:
        """Pick the active mode: caller > request > assembler > settings."""
        if mode is not None:
            return parse_mode(mode, request.root)
        if request.mode is not None:
            return request.mode
        return self.mode

    # -- orchestration --

    def assemble(
        self,
        root: Node,
        resolver: Any,
        mode: Optional[Union[CompositionMode, str]] = None,
    ) -> Graph:
        """Run one mapping assembly request end to end.

        Args:
            root: The r2rml:Model configuration resource
            resolver: ResourceResolver for the configuration graph
            mode: Composition mode overriding request and defaults

        Returns:
            The composed graph: a new graph in isolated mode, the base graph
            itself in mutating mode

        Raises:
            MissingParameter, AmbiguousParameter, InvalidParameter: Before any I/O
            BaseGraphUnavailable: If the base graph cannot be opened
            EngineExecutionFailed: If the mapping engine fails
        """
        logger.info(f"Processing mapping assembly {root}")
        request = self.resolve_request(root, resolver)
        active_mode = self.select_mode(request, mode)
        logger.info(f"Assembling {root} in {active_mode.value} mode")

        try:
            base_graph = resolver.open_model(request.base_model_ref)
        except Exception as e:
            raise BaseGraphUnavailable(root, request.base_model_ref, e) from e

        engine_graph = run_mapping(
            request.engine_configuration(),
            factory=self.engine_factory,
            root=root,
        )
        return compose(base_graph, engine_graph, active_mode, self.prefixes)
