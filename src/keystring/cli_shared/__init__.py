# topmark:header:start
#
#   project      : Keystring
#   file         : __init__.py
#   file_relpath : src/keystring/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic pieces shared by command-line front ends."""
