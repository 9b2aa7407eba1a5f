"""Errors raised while resolving a configuration graph."""

from typing import Optional

from rdflib.term import Node


class ResolutionError(Exception):
    """Base exception for configuration graph resolution."""

    def __init__(self, root: Optional[Node], message: str):
        self.root = root
        super().__init__(f"{root}: {message}" if root is not None else message)


class MultipleValuesError(ResolutionError):
    """A single-valued property carries more than one value."""

    def __init__(self, root: Node, prop: Node, count: int):
        self.property = prop
        self.count = count
        super().__init__(root, f"expected at most one value for {prop}, found {count}")


class BadObjectError(ResolutionError):
    """A property value has the wrong kind (literal vs resource)."""

    def __init__(self, root: Node, prop: Node, expected: str):
        self.property = prop
        self.expected = expected
        super().__init__(root, f"value of {prop} must be a {expected}")


class NoImplementationError(ResolutionError):
    """None of a resource's types has a registered implementation."""


class AmbiguousTypeError(ResolutionError):
    """A resource's types map to more than one implementation."""


class CircularReferenceError(ResolutionError):
    """A resource (transitively) requires itself to be opened."""
