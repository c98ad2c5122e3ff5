"""
Tests del lexer y del parser generados desde Little.g4.
"""

import pytest
from antlr4 import CommonTokenStream, InputStream
from antlr4.Token import Token

from parsing.antlr.LittleLexer import LittleLexer as T
from parsing.antlr.LittleParser import LittleParser
from parsing.antlr.parser_builder import build_from_file, build_from_text, build_parse_tree


def lex(text: str):
    stream = CommonTokenStream(T(InputStream(text)))
    stream.fill()  # Carga todos los tokens, EOF incluido
    return stream.tokens


def types_of(text: str):
    return [t.type for t in lex(text)]


class TestLexer:
    def test_keywords_identifiers_and_operators(self):
        assert types_of("INT x := y <= 3;") == [
            T.INT, T.IDENTIFIER, T.ASSIGN, T.IDENTIFIER, T.LE, T.INTLITERAL, T.SEMI, Token.EOF,
        ]

    def test_literals(self):
        tokens = lex('3 .5 2.25 "a b"')
        assert [t.type for t in tokens[:-1]] == [T.INTLITERAL, T.FLOATLITERAL, T.FLOATLITERAL, T.STRINGLITERAL]
        assert tokens[3].text == '"a b"'
        assert [t.column for t in tokens[:-1]] == [0, 2, 5, 10]

    def test_comments_and_whitespace_are_skipped(self):
        assert types_of("-- comentario\n  WRITE -- otro\n") == [T.WRITE, Token.EOF]

    def test_keywords_are_case_sensitive(self):
        assert types_of("begin BEGIN") == [T.IDENTIFIER, T.BEGIN, Token.EOF]

    def test_positions(self):
        tokens = lex("PROGRAM p\n  BEGIN")
        assert (tokens[0].line, tokens[0].column) == (1, 0)
        assert (tokens[1].line, tokens[1].column) == (1, 8)
        assert (tokens[2].line, tokens[2].column) == (2, 2)


SOURCE = """
PROGRAM p
BEGIN
  INT g;
  FUNCTION INT f(INT a, FLOAT b)
  BEGIN
    FLOAT c;
    c := f(a, b) * (a + 2.5);
    IF (a != b)
      INT d;
      WRITE(d);
    ELSE
      READ(a);
    ENDIF
    WHILE (a >= 1)
      a := a - 1;
    ENDWHILE
    RETURN c;
  END
END
"""


class TestParser:
    def test_builds_program_tree(self):
        res = build_from_text(SOURCE)
        assert res.ok()
        assert isinstance(res.tree, LittleParser.ProgramContext)
        assert res.tree.id_().getText() == "p"
        assert res.tokens.tokens[-1].type == Token.EOF

    def test_function_shape(self):
        tree = build_from_text(SOURCE, raise_on_error=True).tree
        func = tree.pgm_body().func_declarations().func_decl()[0]
        assert func.id_().getText() == "f"
        assert func.any_type().getText() == "INT"
        params = func.param_decl_list().param_decl()
        assert [(p.var_type().getText(), p.id_().getText()) for p in params] == [("INT", "a"), ("FLOAT", "b")]
        # Una sola lista plana con las cuatro sentencias del cuerpo
        body = func.func_body().stmt_list()
        assert len(body.stmt()) == 4

    def test_else_hangs_from_if(self):
        tree = build_from_text(SOURCE, raise_on_error=True).tree
        body = tree.pgm_body().func_declarations().func_decl()[0].func_body().stmt_list()
        if_stmt = body.stmt()[1].if_stmt()
        assert isinstance(if_stmt, LittleParser.If_stmtContext)
        else_stmt = if_stmt.else_stmt()
        assert isinstance(else_stmt, LittleParser.Else_stmtContext)
        assert else_stmt.parentCtx is if_stmt
        assert isinstance(else_stmt.stmt_list(), LittleParser.Stmt_listContext)
        assert [v.getText() for v in if_stmt.decl().var_decl()] == ["INTd;"]

    def test_if_without_else_has_no_else_node(self):
        code = "PROGRAM p BEGIN FUNCTION VOID main() BEGIN IF (a = 1) ENDIF END END"
        tree = build_from_text(code, raise_on_error=True).tree
        if_stmt = tree.pgm_body().func_declarations().func_decl()[0].func_body().stmt_list().stmt()[0].if_stmt()
        assert if_stmt.else_stmt() is None

    def test_to_string_tree(self):
        res = build_from_text("PROGRAM p BEGIN END")
        assert res.tree.toStringTree(recog=res.parser) == (
            "(program PROGRAM (id p) BEGIN (pgm_body decl func_declarations) END <EOF>)"
        )

    def test_syntax_error_is_collected(self):
        res = build_from_text("PROGRAM p BEGIN INT ; END")
        assert not res.ok()
        assert res.tree is not None  # La recuperación de ANTLR devuelve el árbol igualmente
        error = res.errors[0]
        assert (error.line, error.column, error.text) == (1, 20, ";")
        assert error.msg == "missing IDENTIFIER at ';'"
        assert error.phase == "Sintáctico"

    def test_trailing_input_is_an_error(self):
        res = build_from_text("PROGRAM p BEGIN END extra")
        assert not res.ok()
        assert res.errors[0].text == "extra"
        assert res.errors[0].msg == "extraneous input 'extra' expecting <EOF>"

    def test_lexer_error_is_collected(self):
        res = build_from_text("PROGRAM p BEGIN INT x$; END")
        assert len(res.errors) == 1
        error = res.errors[0]
        assert "token recognition error at: '$'" in error.msg
        assert (error.phase, error.text, error.column) == ("Léxico", "$", 21)
        assert str(error).startswith("[Léxico] línea 1, col 21")

    def test_raise_on_error(self):
        with pytest.raises(SyntaxError):
            build_from_text("PROGRAM BEGIN END", raise_on_error=True)

    def test_unknown_entry_rule(self):
        with pytest.raises(AttributeError):
            build_from_text("PROGRAM p BEGIN END", entry_rule="nope")

    def test_decl_entry_rule(self):
        res = build_from_text("INT a;", entry_rule="decl")
        assert res.ok()
        assert isinstance(res.tree, LittleParser.DeclContext)
        assert res.tree.toStringTree(recog=res.parser) == "(decl (var_decl (var_type INT) (id_list (id a)) ;))"

    def test_stmt_list_entry_rule(self):
        res = build_from_text("a := 1; WRITE(a);", entry_rule="stmt_list")
        assert res.ok()
        assert len(res.tree.stmt()) == 2

    def test_build_from_file_and_parse_tree(self, tmp_path):
        path = tmp_path / "p.little"
        path.write_text("PROGRAM p BEGIN INT x; END", encoding="utf-8")
        assert build_from_file(path).ok()
        tree, tokens, parser = build_parse_tree(path)
        assert tree.pgm_body().decl().var_decl()[0].id_list().getText() == "x"
        tree, _, _ = build_parse_tree("PROGRAM q BEGIN END")
        assert tree.id_().getText() == "q"
