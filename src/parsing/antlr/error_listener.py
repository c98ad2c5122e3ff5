from antlr4 import Lexer  # Clase base de los lexers generados por ANTLR
from antlr4.error.ErrorListener import ErrorListener  # Clase base de ANTLR para recibir errores
from antlr4.error.Errors import LexerNoViableAltException  # Error del lexer ante un carácter que no reconoce
from dataclasses import dataclass  # Decorador para clases de datos simples

# Recolecta los errores léxicos y sintácticos en lugar de imprimirlos en consola
class CollectingErrorListener(ErrorListener):
    def __init__(self):
        super().__init__()  # Constructor de la clase base ErrorListener
        self.errors = []  # SyntaxDiagnostic en orden de aparición

    # Método sobrescrito que ANTLR llama por cada error del lexer o del parser
    def syntaxError(self, recognizer, offendingSymbol, line, column, msg, e):
        if isinstance(recognizer, Lexer):
            # El lexer no entrega token: el texto se toma del flujo de caracteres
            phase = "Léxico"
            text = _lexer_text(e)
        else:
            phase = "Sintáctico"
            text = getattr(offendingSymbol, 'text', '<EOF>')  # Texto del token que causó el error
        self.errors.append(SyntaxDiagnostic(line, column, text, msg, phase))

    # True si se registró al menos un error
    def has_errors(self):
        return len(self.errors) > 0

    # Reporte de todos los errores, uno por línea
    def report(self):
        return "\n".join(str(e) for e in self.errors)

# Caracteres que el lexer no pudo convertir en token
def _lexer_text(e):
    if isinstance(e, LexerNoViableAltException):
        return e.input.getText(e.startIndex, e.input.index)
    return ""

@dataclass
class SyntaxDiagnostic:
    """Contenedor para los detalles de un error de sintaxis."""
    line: int  # Línea donde ocurrió el error (base 1)
    column: int  # Columna donde ocurrió el error (base 0)
    text: str  # Texto que causó el error
    msg: str  # Mensaje de ANTLR
    phase: str = "Sintáctico"  # "Léxico" o "Sintáctico"

    def __str__(self):
        return f"[{self.phase}] línea {self.line}, col {self.column}: cerca de '{self.text}' → {self.msg}"
