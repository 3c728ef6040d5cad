# topmark:header:start
#
#   project      : Keystring
#   file         : validator.py
#   file_relpath : src/keystring/keys/validator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass validation of a built forest.

`validate_forest` visits every node once (pre-order, forest order, then
insertion order among siblings) and returns the *first* violation it finds, or
``None`` when the forest can be emitted. It never raises: callers turn a
`Violation` into the matching `keystring.core.errors.KeystringError` through
`Violation.to_error`.

Rules:
    - A segment must match ``[A-Za-z_][A-Za-z0-9_]*`` and must not be a
      keyword of the target language (`ErrorKind.INVALID_IDENTIFIER`).
    - A target may refuse further names through ``name_check``, e.g. Python
      names that class bodies would mangle (`ErrorKind.INVALID_IDENTIFIER`).
    - A segment must not equal the reserved self-path constant name
      (`ErrorKind.RESERVED_NAME_CONFLICT`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from keystring.config.logging import get_logger
from keystring.core.errors import (
    ErrorKind,
    InvalidIdentifierError,
    KeystringError,
    ReservedNameConflictError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from keystring.config.logging import KeystringLogger
    from keystring.keys.tree import Forest

logger: KeystringLogger = get_logger(__name__)

IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True)
class Violation:
    """First rule violation found in a forest.

    Attributes:
        kind (ErrorKind): Either ``INVALID_IDENTIFIER`` or ``RESERVED_NAME_CONFLICT``.
        full_path (str): Dotted path of the offending node.
        segment (str): The offending segment.
        message (str): Human-readable description.
    """

    kind: ErrorKind
    full_path: str
    segment: str
    message: str

    def to_error(self) -> KeystringError:
        """Return the exception matching this violation."""
        if self.kind == ErrorKind.RESERVED_NAME_CONFLICT:
            return ReservedNameConflictError(self.full_path, self.message)
        return InvalidIdentifierError(self.full_path, self.message)


def is_identifier(name: str) -> bool:
    """Return whether ``name`` is syntactically a legal identifier."""
    return IDENTIFIER_RE.fullmatch(name) is not None


def check_segment(
    segment: str,
    full_path: str,
    *,
    reserved_name: str,
    keywords: Collection[str] = (),
    name_check: Callable[[str], str | None] | None = None,
) -> Violation | None:
    """Check a single segment against the identifier and reserved-name rules.

    ``name_check`` returns a reason when the target cannot declare the name as
    written (see `KeyEmitter.name_problem`).
    """
    if not is_identifier(segment):
        return Violation(
            kind=ErrorKind.INVALID_IDENTIFIER,
            full_path=full_path,
            segment=segment,
            message=(
                f'Invalid identifier "{segment}" in key path "{full_path}": '
                "segments must start with a letter or underscore and contain only "
                "letters, digits or underscores."
            ),
        )
    if segment in keywords:
        return Violation(
            kind=ErrorKind.INVALID_IDENTIFIER,
            full_path=full_path,
            segment=segment,
            message=(
                f'Invalid identifier "{segment}" in key path "{full_path}": '
                "it is a reserved keyword of the target language."
            ),
        )
    reason: str | None = name_check(segment) if name_check is not None else None
    if reason is not None:
        return Violation(
            kind=ErrorKind.INVALID_IDENTIFIER,
            full_path=full_path,
            segment=segment,
            message=f'Invalid identifier "{segment}" in key path "{full_path}": {reason}.',
        )
    if segment == reserved_name:
        return Violation(
            kind=ErrorKind.RESERVED_NAME_CONFLICT,
            full_path=full_path,
            segment=segment,
            message=(
                f'Key path "{full_path}" uses the reserved name "{reserved_name}", '
                "which holds the path of every grouping."
            ),
        )
    return None


def validate_forest(
    forest: Forest,
    *,
    reserved_name: str,
    keywords: Collection[str] = (),
    name_check: Callable[[str], str | None] | None = None,
) -> Violation | None:
    """Return the first violation in ``forest`` or ``None`` if it is valid.

    Args:
        forest (Forest): The fully built forest.
        reserved_name (str): Name of the per-grouping self-path constant.
        keywords (Collection[str]): Keywords of the target language.
        name_check (Callable[[str], str | None] | None): Target-specific name rule.

    Returns:
        Violation | None: The first violation in pre-order, or ``None``.
    """
    for segments, node in forest.walk():
        violation: Violation | None = check_segment(
            node.name,
            ".".join(segments),
            reserved_name=reserved_name,
            keywords=keywords,
            name_check=name_check,
        )
        if violation is not None:
            logger.debug("Validation failed: %s", violation.message)
            return violation
    return None
