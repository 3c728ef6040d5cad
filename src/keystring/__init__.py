# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keystring package.

Keystring turns a small catalogue of dotted key paths (``a.b.c``) into source
code that declares those paths as nested, typo-proof string constants. It is
meant to run at build time and exposes both a CLI and a small typed API.
"""

from __future__ import annotations
