"""Symbols, their types, and a scoped symbol table."""

from __future__ import annotations

import dataclasses
import enum
import sys
from dataclasses import dataclass
from typing import TextIO

_RULE = "*" * 47


class TypeName(enum.Enum):
    """The types a symbol can have."""

    INT = enum.auto()
    CHAR = enum.auto()
    BOOL = enum.auto()
    STR_LIT = enum.auto()
    ERR = enum.auto()


@dataclass
class Sym:
    """A named symbol with an optional type."""

    name: str
    type: TypeName | None = None


class SymTab:
    """A stack of scopes, each mapping names to symbols.

    The table starts with a single, empty global scope.
    """

    def __init__(self) -> None:
        self._scopes: list[dict[str, Sym]] = [{}]

    def _current(self) -> dict[str, Sym]:
        if not self._scopes:
            raise IndexError("symbol table has no open scope")
        return self._scopes[-1]

    def add_sym(self, sym: Sym) -> None:
        """Add a symbol to the innermost scope; an existing name is kept."""
        self._current().setdefault(sym.name, dataclasses.replace(sym))

    def add_scope(self) -> None:
        """Open a new, empty innermost scope."""
        self._scopes.append({})

    def rm_scope(self) -> None:
        """Close the innermost scope and drop its symbols."""
        if not self._scopes:
            raise IndexError("no scope to remove")
        self._scopes.pop()

    def lookup_local(self, name: str) -> Sym | None:
        """Return a copy of the symbol in the innermost scope, or None."""
        found = self._current().get(name)
        return dataclasses.replace(found) if found is not None else None

    def lookup_global(self, name: str) -> Sym | None:
        """Return a copy of the symbol from the outermost scope holding it, or None."""
        for scope in self._scopes:
            if name in scope:
                return dataclasses.replace(scope[name])
        return None

    def dump(self, file: TextIO | None = None) -> None:
        """Write every scope and its entries, for debugging."""
        out = sys.stdout if file is None else file
        print("SYMBOL TABLE", file=out)
        print(_RULE, file=out)
        for scope in self._scopes:
            print("start scope XXX", file=out)
            for key, sym in scope.items():
                print(f"{key} : {sym.name}", file=out)
            print("end scope XXX", file=out)
        print(_RULE, file=out)