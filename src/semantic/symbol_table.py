from __future__ import annotations  # Permite las anotaciones de tipo en el mismo archivo antes de Python 3.10.
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .errors import DuplicateDeclarationError
from .symbols import Symbol

# Tipo de alcance: 'GLOBAL', 'FUNCTION' o 'BLOCK'.
ScopeKind = str

# Un alcance con sus símbolos en orden de declaración.
# eq=False: dos alcances son el mismo solo si son el mismo objeto, aunque compartan nombre.
@dataclass(eq=False)
class Scope:
    name: str
    kind: ScopeKind
    symbols: List[Symbol] = field(default_factory=list)

    # Único punto de control de duplicados; la posición solo viaja en la excepción.
    def define(self, sym: Symbol, line: Optional[int] = None, col: Optional[int] = None):
        if self.lookup(sym.name) is not None:
            raise DuplicateDeclarationError(sym.name, line, col)
        self.symbols.append(sym)

    def lookup(self, name: str) -> Optional[Symbol]:
        for sym in self.symbols:
            if sym.name == name:
                return sym
        return None

    def is_empty(self) -> bool:
        return not self.symbols

# Colección ordenada de alcances de todo el programa.
# Solo se agregan alcances al final; un bloque vacío se descarta al cerrarse.
class SymbolTable:
    def __init__(self):
        self._scopes: List[Scope] = []

    def add(self, name: str, kind: ScopeKind) -> Scope:
        scope = Scope(name=name, kind=kind)
        self._scopes.append(scope)
        return scope

    # Quita un alcance concreto (por identidad, no por nombre).
    def discard(self, scope: Scope):
        self._scopes.remove(scope)

    # Primer alcance con ese nombre, o None.
    def get(self, name: str) -> Optional[Scope]:
        for scope in self._scopes:
            if scope.name == name:
                return scope
        return None

    def names(self) -> List[str]:
        return [scope.name for scope in self._scopes]

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[Scope]:
        return iter(self._scopes)

    def __len__(self) -> int:
        return len(self._scopes)

    # Vista tabular de todos los alcances (incluye GLOBAL y funciones), usada por el IDE.
    def dump(self) -> list:
        out = []
        for s in self._scopes:
            out.append({
                "scope": s.name,
                "kind": s.kind,
                "entries": [
                    {"name": sym.name, "type": sym.type, "value": sym.value}
                    for sym in s.symbols
                ],
            })
        return out
