# topmark:header:start
#
#   project      : Keystring
#   file         : python.py
#   file_relpath : src/keystring/emitters/python.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python emitter.

Groupings become plain classes used as namespaces and constants become class
(or module) attributes, so ``keys.app.start`` reads ``"app.start"``.
"""

from __future__ import annotations

import keyword
from typing import ClassVar

from keystring.emitters.base import KeyEmitter
from keystring.emitters.registry import register_target


@register_target("python")
class PythonEmitter(KeyEmitter):
    """Emit nested ``class`` namespaces holding ``str`` attributes."""

    name: ClassVar[str] = "python"
    description: ClassVar[str] = "Python module with nested namespace classes"
    file_extension: ClassVar[str] = ".py"
    keywords: ClassVar[frozenset[str]] = frozenset(keyword.kwlist)
    suppression_directives: ClassVar[tuple[str, ...]] = (
        "# pylint: disable=unused-variable",
        "# pylint: disable=invalid-name",
    )

    def open_grouping(self, name: str) -> str:
        return f"class {name}:"

    def constant(self, name: str, value: str) -> str:
        return f"{name} = {self.quote(value)}"

    def name_problem(self, name: str) -> str | None:
        # Inside a class body `__x` is mangled to `_<class>__x`, and dunder names
        # such as `__slots__` change how the class itself is built.
        if name.startswith("__"):
            return (
                "names starting with a double underscore are mangled or special "
                "inside Python classes"
            )
        return None
