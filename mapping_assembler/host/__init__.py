"""Host configuration framework.

A small rdflib-based stand-in for the declarative assembler framework the
orchestrator plugs into:
- registry.py  - process-wide prefix and extension registries
- resolver.py  - ResourceResolver over a configuration graph, build()
- models.py    - built-in base graph types (ja:MemoryModel, ja:DefaultModel)
- errors.py    - resolution error hierarchy
"""
