from __future__ import annotations  # Anotaciones de tipo como cadenas
import logging  # Trazas de apertura y cierre de alcances
from typing import List, Optional  # Tipos para las anotaciones

from antlr4 import ParserRuleContext  # Nodo base del árbol generado por ANTLR

from parsing.antlr.LittleListener import LittleListener  # Listener generado desde Little.g4
from parsing.antlr.LittleParser import LittleParser  # Contextos de cada regla de la gramática

from .errors import DuplicateDeclarationError  # Error fatal de doble declaración
from .symbol_table import Scope, SymbolTable  # Alcances y tabla ordenada
from .symbols import Symbol  # Entrada nombre/tipo/valor

logger = logging.getLogger(__name__)

GLOBAL = "GLOBAL"  # Nombre del alcance raíz
MAIN = "main"  # Nombre de la función principal
BLOCK_PREFIX = "BLOCK"  # Prefijo de los bloques numerados

# Contextos que abren su propio bloque y cubren la lista de sentencias interna
_CONTROL_CONTEXTS = (
    LittleParser.If_stmtContext,
    LittleParser.Else_stmtContext,
    LittleParser.While_stmtContext,
)


# Línea y columna del primer token del nodo, o (None, None)
def _pos(ctx: ParserRuleContext) -> tuple:
    t = getattr(ctx, "start", None)  # Token inicial de la regla
    if not t:
        return (None, None)
    return (getattr(t, "line", None), getattr(t, "column", None))


def in_control_construct(ctx: ParserRuleContext) -> bool:
    """True si algún ancestro del nodo es un IF, ELSE o WHILE."""
    current = ctx.parentCtx  # Se empieza por el padre, no por el propio nodo
    while current is not None:
        if isinstance(current, _CONTROL_CONTEXTS):
            return True
        current = current.parentCtx  # Sube un nivel en el árbol
    return False


class ScopeBuilder(LittleListener):
    """
    Construye la tabla de símbolos anidada mientras ``ParseTreeWalker`` recorre el árbol.

    Reglas de alcance:
      • GLOBAL se crea una sola vez al inicio y recibe las declaraciones de nivel superior
      • Cada función abre un alcance con su propio nombre (``main`` incluido)
      • IF, ELSE y WHILE abren siempre un bloque ``BLOCK <n>``
      • Una lista de sentencias abre otro bloque salvo que tenga un IF/ELSE/WHILE como ancestro
      • Al cerrar cualquier alcance el alcance actual vuelve a ser GLOBAL
      • Un bloque que se cierra sin símbolos se descarta de la tabla

    El contador de bloques es único para todo el programa y nunca retrocede.
    """

    def __init__(self) -> None:
        self.symbol_table = SymbolTable()  # Tabla ordenada de alcances
        self.global_scope = self.symbol_table.add(GLOBAL, "GLOBAL")  # GLOBAL existe desde el inicio
        self.current_scope: Scope = self.global_scope  # Alcance que recibe las declaraciones
        self.block_counter = 1  # Número del próximo BLOCK; solo avanza
        self._open: List[Scope] = []  # alcances abiertos, en orden de anidamiento

    # -----------------------------------------------------------------
    # Utilidades
    # -----------------------------------------------------------------

    def declare(self, symbol: Symbol, ctx: Optional[ParserRuleContext] = None):
        line, col = _pos(ctx) if ctx is not None else (None, None)  # Posición para el error
        try:
            # Scope.define es quien detecta el duplicado
            self.current_scope.define(symbol, line, col)
        except DuplicateDeclarationError:
            logger.debug("declaración duplicada de %s en %s", symbol.name, self.current_scope.name)
            raise
        logger.debug("%s: %s", self.current_scope.name, symbol)

    def _open_scope(self, name: str, kind: str) -> Scope:
        scope = self.symbol_table.add(name, kind)  # Se registra en orden de apertura
        self._open.append(scope)  # Pasa a ser el alcance más interno
        self.current_scope = scope
        logger.debug("abre alcance %s", name)
        return scope

    def _open_block(self) -> Scope:
        name = f"{BLOCK_PREFIX} {self.block_counter}"  # p. ej. "BLOCK 3"
        self.block_counter += 1  # Ningún otro bloque reutiliza este número
        return self._open_scope(name, "BLOCK")

    def _close_scope(self) -> Scope:
        scope = self._open.pop()  # Alcance más interno
        if scope.kind == "BLOCK" and scope.is_empty():
            self.symbol_table.discard(scope)  # Bloques vacíos no se reportan
            logger.debug("descarta bloque vacío %s", scope.name)
        else:
            logger.debug("cierra alcance %s", scope.name)
        # Salir de cualquier construcción devuelve el control a GLOBAL, no al padre
        self.current_scope = self.global_scope
        return scope

    # -----------------------------------------------------------------
    # Funciones
    # -----------------------------------------------------------------

    def enterFunc_decl(self, ctx: LittleParser.Func_declContext):
        self._open_scope(ctx.id_().getText(), "FUNCTION")  # Alcance con el nombre de la función

    def exitFunc_body(self, ctx: LittleParser.Func_bodyContext):
        self._close_scope()

    def enterParam_decl_list(self, ctx: LittleParser.Param_decl_listContext):
        # Los parámetros viven en el alcance de la función
        for param in ctx.param_decl():
            self.declare(Symbol(param.id_().getText(), param.var_type().getText()), param)

    # -----------------------------------------------------------------
    # Declaraciones
    # -----------------------------------------------------------------

    def enterVar_decl(self, ctx: LittleParser.Var_declContext):
        declared = ctx.var_type().getText()  # INT o FLOAT, común a toda la lista
        for ident in ctx.id_list().id_():
            self.declare(Symbol(ident.getText(), declared), ident)

    def enterString_decl(self, ctx: LittleParser.String_declContext):
        # STRING guarda además el literal con sus comillas
        self.declare(Symbol(ctx.id_().getText(), "STRING", ctx.str_().getText()), ctx.id_())

    # -----------------------------------------------------------------
    # Bloques
    # -----------------------------------------------------------------

    def enterStmt_list(self, ctx: LittleParser.Stmt_listContext):
        # El IF/ELSE/WHILE que la contiene ya abrió el bloque de esta lista
        if in_control_construct(ctx):
            return
        self._open_block()

    def exitStmt_list(self, ctx: LittleParser.Stmt_listContext):
        if in_control_construct(ctx):
            return
        self._close_scope()  # El contador no se rebobina al cerrar

    def enterIf_stmt(self, ctx: LittleParser.If_stmtContext):
        self._open_block()

    def exitIf_stmt(self, ctx: LittleParser.If_stmtContext):
        self._close_scope()

    def enterElse_stmt(self, ctx: LittleParser.Else_stmtContext):
        self._open_block()

    def exitElse_stmt(self, ctx: LittleParser.Else_stmtContext):
        self._close_scope()

    def enterWhile_stmt(self, ctx: LittleParser.While_stmtContext):
        self._open_block()

    def exitWhile_stmt(self, ctx: LittleParser.While_stmtContext):
        self._close_scope()
