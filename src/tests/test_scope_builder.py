"""
Tests del listener que construye los alcances.
Cada test parte de código Little, lo recorre con ScopeBuilder y revisa la tabla resultante.
"""

import pytest
from antlr4 import ParseTreeWalker

from parsing.antlr.parser_builder import build_from_text
from semantic.checker import analyze
from semantic.errors import DuplicateDeclarationError
from semantic.report import format_symbol_table
from semantic.scope_builder import ScopeBuilder, in_control_construct
from semantic.symbol_table import Scope
from semantic.symbols import Symbol


def parse(code: str):
    return build_from_text(code, raise_on_error=True).tree


def walk(code: str, builder=None):
    """Helper: recorre el programa y devuelve el builder para inspeccionar su estado."""
    builder = builder or ScopeBuilder()
    ParseTreeWalker.DEFAULT.walk(builder, parse(code))
    return builder


def program(*functions: str, globals_: str = "") -> str:
    return "PROGRAM t\nBEGIN\n" + globals_ + "\n" + "\n".join(functions) + "\nEND\n"


def function(name: str, body: str, params: str = "", ret: str = "VOID") -> str:
    return f"FUNCTION {ret} {name}({params})\nBEGIN\n{body}\nEND"


class RecordingBuilder(ScopeBuilder):
    """Anota el alcance actual justo después de entrar a cada lista de sentencias."""

    def __init__(self):
        super().__init__()
        self.stmt_list_scopes = []

    def enterStmt_list(self, ctx):
        super().enterStmt_list(ctx)
        self.stmt_list_scopes.append(self.current_scope.name)


class TestDeclarations:
    """Declaraciones de variables, strings y parámetros."""

    def test_var_decl_keeps_order_and_type(self):
        table = analyze(parse(program(function("main", "FLOAT c, a, b;"))))
        main = table.get("main")
        assert [s.name for s in main.symbols] == ["c", "a", "b"]
        assert {s.type for s in main.symbols} == {"FLOAT"}
        assert all(s.value is None for s in main.symbols)

    def test_string_decl_keeps_quotes(self):
        table = analyze(parse(program(function("main", 'STRING s := "hi";'))))
        sym = table.get("main").lookup("s")
        assert sym.type == "STRING"
        assert sym.value == '"hi"'
        assert str(sym) == 'name s type STRING value "hi"'

    def test_params_go_to_function_scope_in_order(self):
        table = analyze(parse(program(function("foo", "INT c;", params="INT a, FLOAT b", ret="INT"))))
        foo = table.get("foo")
        assert [(s.name, s.type) for s in foo.symbols] == [("a", "INT"), ("b", "FLOAT"), ("c", "INT")]

    def test_top_level_declarations_go_to_global(self):
        table = analyze(parse(program(globals_='INT g; STRING banner := "x";')))
        assert table.names() == ["GLOBAL"]
        assert [s.name for s in table.get("GLOBAL").symbols] == ["g", "banner"]


class TestDuplicates:
    """Una declaración repetida en el mismo alcance es fatal."""

    def test_duplicate_in_same_list(self):
        with pytest.raises(DuplicateDeclarationError) as info:
            analyze(parse(program(function("main", "INT a, b, a;"))))
        assert info.value.name == "a"
        assert str(info.value) == "DECLARATION ERROR a"

    def test_duplicate_reports_position(self):
        code = program(function("main", "INT a;\nFLOAT a;"))
        with pytest.raises(DuplicateDeclarationError) as info:
            analyze(parse(code))
        assert info.value.line is not None
        assert info.value.col is not None

    def test_duplicate_is_checked_once(self, monkeypatch):
        calls = []
        original = Scope.lookup

        def counting_lookup(scope, name):
            calls.append(name)
            return original(scope, name)

        monkeypatch.setattr(Scope, "lookup", counting_lookup)
        builder = ScopeBuilder()
        builder.declare(Symbol("a", "INT"))
        with pytest.raises(DuplicateDeclarationError):
            builder.declare(Symbol("a", "FLOAT"))
        # Una consulta por declaración: solo Scope.define revisa duplicados
        assert calls == ["a", "a"]
        assert [s.type for s in builder.global_scope.symbols] == ["INT"]

    def test_duplicate_position_comes_from_the_identifier(self):
        code = program(function("main", "INT a;\nFLOAT b, a;"))
        with pytest.raises(DuplicateDeclarationError) as info:
            analyze(parse(code))
        # Línea 7 del programa generado; la segunda 'a' empieza en la columna 9
        assert (info.value.line, info.value.col) == (7, 9)

    def test_param_and_local_clash(self):
        with pytest.raises(DuplicateDeclarationError) as info:
            analyze(parse(program(function("f", "INT a;", params="INT a"))))
        assert info.value.name == "a"

    def test_duplicate_global(self):
        with pytest.raises(DuplicateDeclarationError) as info:
            analyze(parse(program(globals_='INT g; STRING g := "s";')))
        assert info.value.name == "g"

    def test_same_name_in_different_scopes_is_fine(self):
        body = "INT x;\nIF (x = 1)\nINT x;\nELSE\nINT x;\nENDIF"
        table = analyze(parse(program(function("foo", "INT x;"), function("main", body), globals_="INT x;")))
        assert sorted(table.names()) == ["BLOCK 3", "BLOCK 4", "GLOBAL", "foo", "main"]

    def test_duplicate_stops_the_walk(self):
        builder = ScopeBuilder()
        code = program(function("main", "INT a, a;\nIF (a = 1)\nINT late;\nENDIF"))
        with pytest.raises(DuplicateDeclarationError):
            walk(code, builder)
        assert "BLOCK 2" not in builder.symbol_table


class TestScopeNaming:
    """Nombres de alcance y contador global de bloques."""

    def test_function_scopes_use_function_name(self):
        table = analyze(parse(program(function("foo", "INT a;"), function("main", "INT b;"))))
        assert table.names() == ["GLOBAL", "foo", "main"]

    def test_function_body_opens_its_own_block(self):
        builder = walk(program(function("main", "INT a;\na := 1;")), RecordingBuilder())
        assert builder.stmt_list_scopes == ["BLOCK 1"]
        # El bloque del cuerpo quedó vacío y se descartó
        assert "BLOCK 1" not in builder.symbol_table
        assert builder.block_counter == 2

    def test_if_body_does_not_open_a_second_block(self):
        body = "IF (a = 1)\nINT b;\nb := 2;\nENDIF"
        builder = walk(program(function("main", body)), RecordingBuilder())
        # La lista del IF reutiliza el bloque que abrió el propio IF
        assert builder.stmt_list_scopes == ["BLOCK 1", "BLOCK 2"]
        assert builder.block_counter == 3
        assert [s.name for s in builder.symbol_table.get("BLOCK 2").symbols] == ["b"]

    def test_nested_control_lists_are_suppressed(self):
        body = "IF (a = 1)\nIF (a = 2)\nINT inner;\nENDIF\nENDIF"
        builder = walk(program(function("main", body)), RecordingBuilder())
        assert builder.stmt_list_scopes == ["BLOCK 1", "BLOCK 2", "BLOCK 3"]
        assert builder.symbol_table.get("BLOCK 3").lookup("inner") is not None
        assert "BLOCK 2" not in builder.symbol_table

    def test_counter_is_shared_across_functions(self):
        foo = function("foo", "IF (a = 1)\nINT p;\nENDIF")
        main = function("main", "IF (a = 1)\nINT q;\nENDIF")
        table = analyze(parse(program(foo, main)))
        blocks = {s.name: [sym.name for sym in s.symbols] for s in table if s.kind == "BLOCK"}
        assert blocks == {"BLOCK 2": ["p"], "BLOCK 4": ["q"]}

    def test_counter_never_goes_back(self):
        body = "WHILE (a < 1)\nINT w;\nENDWHILE\nIF (a = 1)\nINT i;\nELSE\nINT e;\nENDIF"
        builder = walk(program(function("main", body), function("after", "IF (a = 1)\nINT z;\nENDIF")))
        names = [s.name for s in builder.symbol_table if s.kind == "BLOCK"]
        assert names == ["BLOCK 2", "BLOCK 3", "BLOCK 4", "BLOCK 6"]
        assert len(set(names)) == len(names)

    def test_counter_keeps_advancing_after_a_body_block(self):
        body = "IF (a = 1)\nINT x;\nENDIF"
        builder = walk(program(function("foo", body), function("main", body)), RecordingBuilder())
        # Cuerpo de foo = 1, IF = 2, cuerpo de main = 3, IF = 4
        assert builder.stmt_list_scopes == ["BLOCK 1", "BLOCK 2", "BLOCK 3", "BLOCK 4"]
        assert builder.block_counter == 5

    def test_else_gets_its_own_block(self):
        body = "IF (a = 1)\nINT t;\nELSE\nINT t;\nENDIF"
        table = analyze(parse(program(function("main", body))))
        assert table.get("BLOCK 2").lookup("t") is not None
        assert table.get("BLOCK 3").lookup("t") is not None

    def test_empty_blocks_leave_no_trace(self):
        body = "IF (a = 1)\na := 2;\nELSE\na := 3;\nENDIF\nWHILE (a < 3)\na := a + 1;\nENDWHILE"
        table = analyze(parse(program(function("main", body))))
        assert table.names() == ["GLOBAL", "main"]
        assert format_symbol_table(table) == "Symbol table main\n\n"


class TestCurrentScope:
    """El alcance actual tras cerrar construcciones."""

    def test_walk_ends_in_global(self):
        builder = walk(program(function("main", "IF (a = 1)\nINT b;\nENDIF")))
        assert builder.current_scope is builder.global_scope
        assert builder._open == []

    def test_exiting_a_construct_returns_to_global(self):
        builder = ScopeBuilder()
        tree = parse(program(function("main", "IF (a = 1)\nINT b;\nENDIF")))
        func = tree.pgm_body().func_declarations().func_decl()[0]
        if_stmt = func.func_body().stmt_list().stmt()[0].if_stmt()

        builder.enterFunc_decl(func)
        builder.enterStmt_list(func.func_body().stmt_list())
        builder.enterIf_stmt(if_stmt)
        assert builder.current_scope.name == "BLOCK 2"
        builder.exitIf_stmt(if_stmt)
        assert builder.current_scope is builder.global_scope

    def test_in_control_construct_walks_all_ancestors(self):
        tree = parse(program(function("main", "IF (a = 1)\nWHILE (a < 2)\na := 1;\nENDWHILE\nENDIF")))
        body_list = tree.pgm_body().func_declarations().func_decl()[0].func_body().stmt_list()
        if_stmt = body_list.stmt()[0].if_stmt()
        while_list = if_stmt.stmt_list().stmt()[0].while_stmt().stmt_list()
        assert not in_control_construct(body_list)
        assert in_control_construct(if_stmt.stmt_list())
        assert in_control_construct(while_list)
