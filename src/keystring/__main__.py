# topmark:header:start
#
#   project      : Keystring
#   file         : __main__.py
#   file_relpath : src/keystring/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Keystring via ``python -m keystring``.

It delegates directly to :func:`keystring.cli.main.cli`, so there is a single
authoritative CLI entry point regardless of how Keystring is launched.

Examples:
    Generate the default constants file::

        python -m keystring generate keys/input.keys
"""

from __future__ import annotations

from keystring.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
