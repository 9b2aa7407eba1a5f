"""Shared test data, configuration snippets and engine spies."""

from rdflib import Graph, Literal, Namespace

EX = Namespace("http://example.org/config#")
DATA = Namespace("http://example.org/data/")

ASSEMBLY = EX.assembly
BASE = EX.base
FIXTURE_MODEL = EX.FixtureModel

PREFIXES = """
@prefix : <http://example.org/config#> .
@prefix r2rml: <http://r2rml#> .
@prefix ja: <http://jena.hpl.hp.com/2005/11/Assembler#> .
"""

# Base model is an empty in-memory graph
WELL_FORMED = """
:assembly a r2rml:Model ;
    r2rml:baseModel :base ;
    r2rml:mappingFile "map.ttl" ;
    r2rml:connectionURL "jdbc:sqlite:test.db" .
:base a ja:MemoryModel .
"""

# Base model is the base_graph fixture
FIXTURE_BASE = """
:assembly a r2rml:Model ;
    r2rml:baseModel :base ;
    r2rml:mappingFile "map.ttl" ;
    r2rml:connectionURL "jdbc:sqlite:test.db" .
:base a :FixtureModel .
"""

ENGINE_STATEMENTS = [
    (DATA["person/1"], DATA.name, Literal("Alice")),
    (DATA["person/2"], DATA.name, Literal("Bob")),
    (DATA["person/1"], DATA.knows, DATA["person/2"]),
]


def parse_config(body: str) -> Graph:
    """Parse a Turtle configuration snippet with the shared prefixes."""
    graph = Graph()
    graph.parse(data=PREFIXES + body, format="turtle")
    return graph


class SpyEngineFactory:
    """Engine factory that records every configuration and execute() call."""

    def __init__(self, statements=(), error=None):
        self.statements = list(statements)
        self.error = error
        self.configurations = []
        self.execute_calls = 0

    def __call__(self, configuration):
        self.configurations.append(configuration)
        return SpyEngine(self)

    @property
    def calls(self):
        return len(self.configurations)


class SpyEngine:
    def __init__(self, spy):
        self.spy = spy
        self._graph = None

    def execute(self):
        self.spy.execute_calls += 1
        if self.spy.error is not None:
            raise self.spy.error
        graph = Graph()
        graph.bind("data", DATA)
        for triple in self.spy.statements:
            graph.add(triple)
        self._graph = graph

    def get_result_graph(self):
        if self._graph is None:
            raise RuntimeError("execute() has not run")
        return self._graph


class FixedGraphOpener:
    """Opens any resource as one pre-built graph."""

    def __init__(self, graph):
        self.graph = graph
        self.opened = []

    def open(self, resolver, root):
        self.opened.append(root)
        return self.graph
