"""Schemas for one mapping assembly request."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from rdflib.term import Node


class CompositionMode(str, Enum):
    """How engine output is composed with the base graph.

    ISOLATED returns a new in-memory graph holding a copy of the base graph
    plus the engine output; the base graph is never written. MUTATING adds
    the engine output to the base graph itself and returns it, writing
    through to whatever store backs it.
    """

    ISOLATED = "isolated"
    MUTATING = "mutating"


class EngineConfiguration(BaseModel):
    """Resolved parameters handed verbatim to the mapping engine."""

    mapping_file: str = Field(description="Path or URL of the mapping document")
    connection_url: str = Field(
        description="Database connection URL",
        examples=["jdbc:sqlite:test.db", "postgresql://localhost/db"],
    )
    user: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)


class AssemblyRequest(BaseModel):
    """Parameters resolved from one r2rml:Model configuration resource."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    root: Node = Field(description="The r2rml:Model resource being opened")
    base_model_ref: Node = Field(description="Resource referenced by r2rml:baseModel")
    mapping_file: str
    connection_url: str
    user: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    mode: Optional[CompositionMode] = Field(
        default=None,
        description="Mode requested by r2rml:compositionMode, if any",
    )

    def engine_configuration(self) -> EngineConfiguration:
        """Build a fresh EngineConfiguration for one engine invocation."""
        return EngineConfiguration(
            mapping_file=self.mapping_file,
            connection_url=self.connection_url,
            user=self.user,
            password=self.password,
        )
