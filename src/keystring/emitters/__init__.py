# topmark:header:start
#
#   file         : __init__.py
#   file_relpath : src/keystring/emitters/__init__.py
#   project      : Keystring
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all emitter modules in the current package."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from keystring.config.logging import get_logger
from keystring.emitters.base import KeyEmitter
from keystring.emitters.registry import get_emitter, get_emitter_registry

logger = get_logger(__name__)


def register_all_emitters() -> None:
    """Import all emitter modules in the current package."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            # Import the module to ensure it registers its emitter
            importlib.import_module(f"{__name__}.{module_info.name}")


def resolve_emitter(name: str) -> KeyEmitter:
    """Return the emitter for target ``name`` after making sure all emitters are registered."""
    register_all_emitters()
    logger.trace("Registered targets: %s", ", ".join(sorted(get_emitter_registry())))
    return get_emitter(name)


__all__ = [
    "KeyEmitter",
    "get_emitter_registry",
    "register_all_emitters",
    "resolve_emitter",
]
