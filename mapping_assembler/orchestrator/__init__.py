"""Mapping assembly orchestration.

Resolves one r2rml:Model request, runs the mapping engine once and
composes its output with the request's base graph:
- schemas.py    - AssemblyRequest, EngineConfiguration, CompositionMode
- errors.py     - AssemblyError taxonomy
- assembler.py  - MappingAssembler (parameter resolution, invocation)
- composer.py   - isolated and mutating composition
"""
