"""Mapping engine factory resolution.

Resolves the callable that builds a MappingEngine from an
EngineConfiguration: an explicitly installed factory wins, otherwise the
dotted path from settings (engine_factory / ASSEMBLY_ENGINE_FACTORY).
"""

import importlib
import logging
import threading
from typing import Optional

from .. import config
from .backends import EngineFactory

logger = logging.getLogger(__name__)

_engine_factory: Optional[EngineFactory] = None
_factory_lock = threading.Lock()


def set_engine_factory(factory: Optional[EngineFactory]) -> None:
    """Install the process-wide engine factory (None to clear it)."""
    global _engine_factory
    with _factory_lock:
        _engine_factory = factory
    if factory is not None:
        logger.info(f"Mapping engine factory set to {factory!r}")


def load_factory(path: str) -> EngineFactory:
    """Import a factory from a 'package.module:attribute' path.

    Raises:
        ValueError: If the path is malformed or does not name a callable
        ImportError: If the module cannot be imported
    """
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(
            f"Invalid engine factory path: '{path}'. "
            f"Expected 'package.module:attribute'."
        )

    target = importlib.import_module(module_name)
    for part in attribute.split("."):
        target = getattr(target, part, None)
        if target is None:
            raise ValueError(f"Engine factory not found: '{path}'")

    if not callable(target):
        raise ValueError(f"Engine factory is not callable: '{path}'")
    return target


def get_engine_factory() -> EngineFactory:
    """Get the engine factory to use for the next invocation.

    Raises:
        ValueError: If no factory is installed or configured
    """
    with _factory_lock:
        installed = _engine_factory
    if installed is not None:
        return installed

    path = config.get_settings().engine_factory
    if not path:
        raise ValueError(
            "No mapping engine configured. Set ASSEMBLY_ENGINE_FACTORY "
            "or call set_engine_factory()."
        )
    return load_factory(path)
