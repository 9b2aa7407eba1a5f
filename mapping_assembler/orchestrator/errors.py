"""Assembly exception hierarchy.

Every AssemblyError names the configuration resource it was raised for and
the exact parameter or stage that failed.
"""

from typing import Optional

from rdflib.term import Node


class AssemblyError(Exception):
    """Base exception for mapping assembly."""

    def __init__(self, root: Optional[Node], message: str):
        self.root = root
        super().__init__(f"{root}: {message}" if root is not None else message)


class MissingParameter(AssemblyError):
    """A required request parameter has no value."""

    def __init__(self, name: str, root: Optional[Node] = None):
        self.name = name
        super().__init__(root, f"No r2rml:{name} specified!")


class AmbiguousParameter(AssemblyError):
    """A single-valued request parameter has more than one value."""

    def __init__(self, name: str, root: Optional[Node] = None):
        self.name = name
        super().__init__(root, f"r2rml:{name} must have exactly one value")


class InvalidParameter(AssemblyError):
    """A request parameter has a value of the wrong kind."""

    def __init__(self, name: str, root: Optional[Node] = None, reason: str = ""):
        self.name = name
        self.reason = reason
        message = f"Invalid r2rml:{name}"
        super().__init__(root, f"{message}: {reason}" if reason else message)


class BaseGraphUnavailable(AssemblyError):
    """The base graph referenced by r2rml:baseModel could not be opened."""

    def __init__(self, root: Optional[Node], base_model_ref: Node, cause: Exception):
        self.base_model_ref = base_model_ref
        self.cause = cause
        super().__init__(root, f"Cannot open base model {base_model_ref}: {cause}")


class EngineExecutionFailed(AssemblyError):
    """The mapping engine could not be created or failed while executing."""

    def __init__(self, root: Optional[Node], mapping_file: str, cause: Exception):
        self.mapping_file = mapping_file
        self.cause = cause
        super().__init__(root, f"Mapping engine failed for {mapping_file}: {cause}")


class RegistrationFailed(Exception):
    """A registry refused an entry. Logged by the registrar, never raised to callers."""
