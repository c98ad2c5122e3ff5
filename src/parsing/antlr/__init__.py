"""
Lexer, parser y listener de Little generados por ANTLR desde Little.g4, más la
construcción del árbol con recolección de errores.
"""

from .LittleLexer import LittleLexer
from .LittleParser import LittleParser
from .LittleListener import LittleListener
from .parser_builder import ParseResult, build_from_text, build_from_file, build_parse_tree

__all__ = [
    'LittleLexer',
    'LittleParser',
    'LittleListener',
    'ParseResult',
    'build_from_text',
    'build_from_file',
    'build_parse_tree',
]
