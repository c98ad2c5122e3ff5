from __future__ import annotations  # Anotaciones de tipo como cadenas
from dataclasses import dataclass  # Decorador para clases con atributos automáticos
from typing import Optional, Tuple, Union  # Tipos para las anotaciones
from pathlib import Path  # Rutas de archivo

# Flujos de entrada y de tokens del runtime de ANTLR
from antlr4 import InputStream, FileStream, CommonTokenStream, ParserRuleContext

# Listener de errores propio y clases generadas desde Little.g4
from .error_listener import CollectingErrorListener, SyntaxDiagnostic
from .LittleLexer import LittleLexer  # Lexer generado por ANTLR para Little
from .LittleParser import LittleParser  # Parser generado por ANTLR para Little

# Resultado de un análisis sintáctico
@dataclass
class ParseResult:
    """Árbol, parser, tokens y errores de sintaxis."""
    tree: ParserRuleContext  # Árbol de la regla de entrada (existe aunque haya errores)
    parser: LittleParser  # Parser usado, necesario para toStringTree
    tokens: CommonTokenStream  # Flujo de tokens producido por el lexer
    errors: list[SyntaxDiagnostic]  # Errores léxicos y sintácticos en orden

    # True si el análisis terminó sin errores
    def ok(self) -> bool:
        return not self.errors

# Configura lexer, flujo de tokens y parser con un único listener de errores
def _configure(input_stream) -> Tuple[LittleLexer, LittleParser, CommonTokenStream, CollectingErrorListener]:
    lexer = LittleLexer(input_stream)  # Lexer sobre el flujo de caracteres
    tokens = CommonTokenStream(lexer)  # Flujo de tokens del canal por defecto
    parser = LittleParser(tokens)  # Parser sobre el flujo de tokens

    err = CollectingErrorListener()  # Recolecta los errores en vez de imprimirlos
    lexer.removeErrorListeners()  # Quita el ConsoleErrorListener del lexer
    lexer.addErrorListener(err)  # Errores léxicos al recolector
    parser.removeErrorListeners()  # Quita el ConsoleErrorListener del parser
    parser.addErrorListener(err)  # Errores sintácticos al mismo recolector

    return lexer, parser, tokens, err

# Ejecuta la regla de entrada sobre un flujo ya configurado
def _parse(input_stream, entry_rule: str, raise_on_error: bool) -> ParseResult:
    _, parser, tokens, err = _configure(input_stream)

    # La regla de entrada debe existir en el parser generado
    if not hasattr(parser, entry_rule):
        raise AttributeError(f"Entry rule '{entry_rule}' no existe en LittleParser.")

    rule_fn = getattr(parser, entry_rule)  # Método de la regla, p. ej. parser.program
    tree = rule_fn()  # La estrategia de errores por defecto reporta y se recupera

    errors = err.errors  # Errores registrados por el lexer y el parser
    if raise_on_error and errors:
        raise SyntaxError("\n".join(str(e) for e in errors))

    return ParseResult(tree=tree, parser=parser, tokens=tokens, errors=errors)

# Construye el árbol a partir de código fuente en texto
def build_from_text(
    code: str,  # Programa Little completo o fragmento de la regla de entrada
    *,
    entry_rule: str = "program",  # Regla de la gramática por la que se empieza
    raise_on_error: bool = False,  # Si True, lanza SyntaxError ante cualquier error
) -> ParseResult:
    input_stream = InputStream(code)  # Flujo de caracteres en memoria
    return _parse(input_stream, entry_rule, raise_on_error)

# Construye el árbol a partir de un archivo
def build_from_file(
    path: Union[str, Path],  # Ruta al archivo fuente
    *,
    entry_rule: str = "program",
    encoding: Optional[str] = "utf-8",  # Codificación del archivo
    raise_on_error: bool = False,
) -> ParseResult:
    input_stream = FileStream(str(path), encoding=encoding)  # Flujo de caracteres desde disco
    return _parse(input_stream, entry_rule, raise_on_error)

# Construye el árbol desde un archivo si la ruta existe; si no, trata la fuente como texto
def build_parse_tree(source: Union[str, Path]):
    p = Path(str(source))
    res = build_from_file(p) if _is_file(p) else build_from_text(str(source))
    return (res.tree, res.tokens, res.parser)  # Árbol, tokens y parser

def _is_file(p: Path) -> bool:
    try:
        return p.is_file()
    except (OSError, ValueError):
        # Un programa completo pasado como texto puede no ser una ruta válida
        return False
