"""
Listado de la tabla de símbolos.

Solo aparecen los bloques (``BLOCK <n>``), ordenados como cadenas, y al final el
alcance ``main`` si existe. GLOBAL y las demás funciones nunca se listan.
"""
from __future__ import annotations
import sys
from typing import List, Optional, TextIO

from .scope_builder import BLOCK_PREFIX, MAIN
from .symbol_table import Scope, SymbolTable


def _append_scope(lines: List[str], scope: Scope):
    lines.append(f"Symbol table {scope.name}\n")
    for sym in scope.symbols:
        lines.append(f"{sym}\n")
    lines.append("\n")


def format_symbol_table(table: SymbolTable) -> str:
    lines: List[str] = []
    # Orden lexicográfico: "BLOCK 10" va antes que "BLOCK 2"
    for name in sorted(table.names()):
        if name.startswith(BLOCK_PREFIX):
            _append_scope(lines, table.get(name))

    main = table.get(MAIN)
    if main is not None:
        _append_scope(lines, main)
    return "".join(lines)


def print_symbol_table(table: SymbolTable, stream: Optional[TextIO] = None):
    (stream or sys.stdout).write(format_symbol_table(table))
