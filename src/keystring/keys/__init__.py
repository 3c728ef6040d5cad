# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/keys/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Key catalogue parsing.

Data flows one way through this package:

- ``lines``: raw text → normalized lines (indentation width + segments)
- ``tree``: normalized lines → ordered forest of key nodes
- ``validator``: forest → first violation (or ``None``)
- ``compiler``: glues the stages together with an emitter

None of these modules perform I/O.
"""

from __future__ import annotations
