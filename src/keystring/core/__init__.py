# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across Keystring.

The ``keystring.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (CLI, config, API, tests) without pulling
in rendering or user-interface concerns.

Included modules:

- ``errors``
  The error taxonomy (empty input, invalid identifier, reserved name conflict,
  I/O failure, invalid configuration) raised by the API.
"""

from __future__ import annotations
