# topmark:header:start
#
#   project      : Keystring
#   file         : compiler.py
#   file_relpath : src/keystring/keys/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text-in, text-out key compiler.

`compile_keys` runs the whole engine in memory: normalize → build → validate →
emit. It performs no I/O, so any failure leaves nothing behind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from keystring.config.logging import get_logger
from keystring.constants import DEFAULT_SEPARATOR, DEFAULT_TARGET
from keystring.core.errors import ConfigurationError, EmptyInputError
from keystring.emitters import resolve_emitter
from keystring.keys.lines import normalize_lines
from keystring.keys.tree import build_forest
from keystring.keys.validator import validate_forest

if TYPE_CHECKING:
    from keystring.config.logging import KeystringLogger
    from keystring.emitters.base import KeyEmitter
    from keystring.keys.lines import NormalizedLine
    from keystring.keys.tree import Forest
    from keystring.keys.validator import Violation

logger: KeystringLogger = get_logger(__name__)


def build_validated_forest(text: str, emitter: KeyEmitter) -> Forest:
    """Parse ``text`` and validate the resulting forest for ``emitter``.

    Raises:
        EmptyInputError: If ``text`` has no usable lines.
        InvalidIdentifierError: If a segment is not a legal identifier.
        ReservedNameConflictError: If a segment equals the self-path constant name.
    """
    lines: list[NormalizedLine] = normalize_lines(text)
    if not lines:
        raise EmptyInputError()
    logger.debug("Normalized %d usable line(s)", len(lines))

    forest: Forest = build_forest(lines)
    violation: Violation | None = validate_forest(
        forest,
        reserved_name=emitter.self_path_name,
        keywords=emitter.keywords,
        name_check=emitter.name_problem,
    )
    if violation is not None:
        raise violation.to_error()
    return forest


def compile_keys(
    text: str,
    *,
    target: str = DEFAULT_TARGET,
    separator: str = DEFAULT_SEPARATOR,
    enable_warnings: bool = False,
) -> str:
    """Compile a key catalogue into generated source text.

    Args:
        text (str): The raw catalogue.
        target (str): Registered emitter name (``"rust"``, ``"python"``).
        separator (str): String joining segments in the emitted values.
        enable_warnings (bool): Omit the lint suppression directives when True.

    Returns:
        str: The complete generated file content.

    Raises:
        ConfigurationError: If ``target`` is unknown or ``separator`` is empty.
        EmptyInputError: If ``text`` has no usable lines.
        InvalidIdentifierError: If a segment is not a legal identifier.
        ReservedNameConflictError: If a segment equals the self-path constant name.
    """
    if not separator:
        raise ConfigurationError("The value separator must not be empty.")
    emitter: KeyEmitter = resolve_emitter(target)
    forest: Forest = build_validated_forest(text, emitter)
    return emitter.render(forest, separator=separator, enable_warnings=enable_warnings)
