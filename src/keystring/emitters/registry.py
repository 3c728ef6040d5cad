# topmark:header:start
#
#   project      : Keystring
#   file         : registry.py
#   file_relpath : src/keystring/emitters/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of emitter targets.

Emitters register themselves with the `register_target` class decorator when
their module is imported; `keystring.emitters.register_all_emitters` imports
every module of the package so the registry is complete before lookups.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from keystring.config.logging import get_logger
from keystring.core.errors import UnknownTargetError

if TYPE_CHECKING:
    from collections.abc import Callable

    from keystring.config.logging import KeystringLogger
    from keystring.emitters.base import KeyEmitter

logger: KeystringLogger = get_logger(__name__)


_registry: dict[str, KeyEmitter] = {}


def register_target(
    name: str,
) -> Callable[[type[KeyEmitter]], type[KeyEmitter]]:
    """Class decorator to register a KeyEmitter under a target name.

    Args:
        name (str): Target name used in configuration and on the command line.

    Returns:
        Callable[[type[KeyEmitter]], type[KeyEmitter]]: A decorator that
            instantiates and registers the class.

    Raises:
        ValueError: If the target name is already registered.
    """

    def decorator(cls: type[KeyEmitter]) -> type[KeyEmitter]:
        logger.debug("Registering emitter %s for target: %s", cls.__name__, name)
        if name in _registry:
            raise ValueError(f"Target '{name}' already has a registered emitter.")
        if cls.name != name:
            raise ValueError(f"Emitter {cls.__name__} declares name {cls.name!r}, not {name!r}.")
        _registry[name] = cls()
        return cls

    return decorator


def get_emitter_registry() -> dict[str, KeyEmitter]:
    """Return the registry of target names to KeyEmitter instances."""
    return _registry


def get_emitter(name: str) -> KeyEmitter:
    """Return the emitter registered for ``name``.

    Raises:
        UnknownTargetError: If no emitter is registered under ``name``.
    """
    emitter: KeyEmitter | None = _registry.get(name)
    if emitter is None:
        raise UnknownTargetError(name, tuple(sorted(_registry)))
    return emitter
