"""
Pase semántico de alcances para Little.
Exporta la función principal 'analyze', el listener que construye la tabla y el reporte.
"""

from .checker import analyze
from .errors import SemanticError, DuplicateDeclarationError
from .symbols import Symbol
from .symbol_table import SymbolTable, Scope
from .scope_builder import ScopeBuilder, GLOBAL, MAIN, BLOCK_PREFIX
from .report import format_symbol_table, print_symbol_table

__all__ = [
    # Función principal
    'analyze',

    # Listener
    'ScopeBuilder',
    'GLOBAL',
    'MAIN',
    'BLOCK_PREFIX',

    # Símbolos y tabla
    'Symbol',
    'SymbolTable',
    'Scope',

    # Errores
    'SemanticError',
    'DuplicateDeclarationError',

    # Reporte
    'format_symbol_table',
    'print_symbol_table',
]
