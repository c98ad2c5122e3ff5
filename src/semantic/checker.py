# semantic/checker.py
from __future__ import annotations

from antlr4 import ParserRuleContext, ParseTreeWalker

from .scope_builder import ScopeBuilder
from .symbol_table import SymbolTable


def analyze(tree: ParserRuleContext) -> SymbolTable:
    """
    Recorre el árbol con un ``ScopeBuilder`` nuevo y devuelve la tabla resultante.

    Una declaración duplicada interrumpe el recorrido con ``DuplicateDeclarationError``;
    en ese caso no hay tabla parcial.
    """
    builder = ScopeBuilder()
    ParseTreeWalker.DEFAULT.walk(builder, tree)
    return builder.symbol_table
