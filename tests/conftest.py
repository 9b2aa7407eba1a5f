import pytest
from rdflib import Graph, Literal

import mapping_assembler.registrar.registrar as registrar_module
from mapping_assembler import config
from mapping_assembler.config import AssemblySettings
from mapping_assembler.engine import factory as factory_module
from mapping_assembler.host import registry as registry_module
from mapping_assembler.host.registry import ExtensionRegistry, PrefixRegistry
from mapping_assembler.host.resolver import ResourceResolver

from .helpers import DATA, ENGINE_STATEMENTS, FIXTURE_MODEL, FixedGraphOpener, SpyEngineFactory, parse_config


# Fresh registries, settings and engine factory for every test
@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    monkeypatch.setattr(registry_module, "_prefix_registry", PrefixRegistry())
    monkeypatch.setattr(registry_module, "_extension_registry", ExtensionRegistry())
    monkeypatch.setattr(registrar_module, "_initialized", False)
    monkeypatch.setattr(config, "_settings", AssemblySettings())
    monkeypatch.setattr(factory_module, "_engine_factory", None)


@pytest.fixture
def extensions():
    return registry_module.get_extension_registry()


@pytest.fixture
def spy_engine():
    return SpyEngineFactory(ENGINE_STATEMENTS)


@pytest.fixture
def base_graph():
    graph = Graph()
    graph.add((DATA["person/3"], DATA.name, Literal("Carol")))
    graph.add((DATA["person/3"], DATA.knows, DATA["person/1"]))
    return graph


# Registers :FixtureModel so configs can point r2rml:baseModel at base_graph
@pytest.fixture
def fixture_opener(extensions, base_graph):
    opener = FixedGraphOpener(base_graph)
    extensions.implement_with(FIXTURE_MODEL, opener)
    return opener


@pytest.fixture
def make_resolver(extensions):
    def _make(body: str) -> ResourceResolver:
        return ResourceResolver(parse_config(body), extensions)

    return _make
