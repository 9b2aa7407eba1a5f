"""One-time registration of the mapping assembler with the host registries."""

from .registrar import ensure_registered, is_registered

__all__ = ["ensure_registered", "is_registered"]
