"""Registrar for the r2rml:Model assembler.

ensure_registered() binds the r2rml prefix in the process-wide prefix
registry and the r2rml:Model type to a MappingAssembler in the extension
registry. It runs at package import and may be called again any number of
times, from any thread; only the first successful call touches the
registries.

Registration is best-effort: a registry refusing an entry is logged and the
next call tries again.
"""

import logging
import threading

from ..host.registry import get_extension_registry, get_prefix_registry
from ..orchestrator.assembler import MappingAssembler
from ..orchestrator.errors import RegistrationFailed
from ..vocabulary import MODEL_TYPE, R2RML_PREFIX, R2RML_URI

logger = logging.getLogger(__name__)

_initialized = False
_init_lock = threading.Lock()


def ensure_registered() -> None:
    """Register the assembler once per process. Safe to call concurrently."""
    global _initialized
    if _initialized:
        return

    with _init_lock:
        if _initialized:
            return

        logger.info("Initializing R2RML assembler ...")
        try:
            get_prefix_registry().add_prefix_mapping(R2RML_PREFIX, R2RML_URI)
            get_extension_registry().implement_with(MODEL_TYPE, MappingAssembler())
        except Exception as e:
            failure = e if isinstance(e, RegistrationFailed) else RegistrationFailed(str(e))
            logger.error(f"Failed to register assembler for {MODEL_TYPE}: {failure}")
            return

        _initialized = True
        logger.info(f"Registered assembler model: {MODEL_TYPE}")


def is_registered() -> bool:
    """Whether registration has completed in this process."""
    return _initialized
