"""
Tests de la tabla de símbolos y del reporte, sin pasar por el parser.
"""

import io

import pytest

from semantic.errors import DuplicateDeclarationError, SemanticError
from semantic.report import format_symbol_table, print_symbol_table
from semantic.symbol_table import Scope, SymbolTable
from semantic.symbols import Symbol


class TestScope:
    def test_define_keeps_insertion_order(self):
        scope = Scope(name="main", kind="FUNCTION")
        for name in ("z", "a", "m"):
            scope.define(Symbol(name, "INT"))
        assert [s.name for s in scope.symbols] == ["z", "a", "m"]

    def test_define_rejects_duplicates(self):
        scope = Scope(name="BLOCK 1", kind="BLOCK")
        scope.define(Symbol("x", "INT"))
        with pytest.raises(DuplicateDeclarationError) as info:
            scope.define(Symbol("x", "FLOAT"))
        assert isinstance(info.value, SemanticError)
        assert str(info.value) == "DECLARATION ERROR x"
        # El símbolo original no se reemplaza
        assert scope.lookup("x").type == "INT"

    def test_define_carries_position(self):
        scope = Scope(name="main", kind="FUNCTION")
        scope.define(Symbol("x", "INT"), 3, 4)
        with pytest.raises(DuplicateDeclarationError) as info:
            scope.define(Symbol("x", "INT"), 5, 8)
        assert (info.value.name, info.value.line, info.value.col) == ("x", 5, 8)
        # La posición no forma parte del mensaje
        assert str(info.value) == "DECLARATION ERROR x"

    def test_lookup_and_is_empty(self):
        scope = Scope(name="foo", kind="FUNCTION")
        assert scope.is_empty()
        assert scope.lookup("x") is None
        scope.define(Symbol("x", "INT"))
        assert not scope.is_empty()


class TestSymbolTable:
    def test_get_returns_first_match(self):
        table = SymbolTable()
        first = table.add("dup", "BLOCK")
        table.add("dup", "BLOCK")
        assert table.get("dup") is first
        assert table.get("missing") is None

    def test_discard_is_by_identity(self):
        table = SymbolTable()
        first = table.add("dup", "BLOCK")
        second = table.add("dup", "BLOCK")
        first.define(Symbol("a", "INT"))
        table.discard(second)
        assert len(table) == 1
        assert table.get("dup") is first

    def test_names_contains_and_dump(self):
        table = SymbolTable()
        table.add("GLOBAL", "GLOBAL").define(Symbol("s", "STRING", '"v"'))
        assert table.names() == ["GLOBAL"]
        assert "GLOBAL" in table
        assert "main" not in table
        assert table.dump() == [{
            "scope": "GLOBAL",
            "kind": "GLOBAL",
            "entries": [{"name": "s", "type": "STRING", "value": '"v"'}],
        }]


class TestSymbol:
    def test_str_without_value(self):
        assert str(Symbol("x", "INT")) == "name x type INT"

    def test_str_with_value(self):
        assert str(Symbol("s", "STRING", '"hello"')) == 'name s type STRING value "hello"'


def _table(*scopes):
    table = SymbolTable()
    for name, kind, symbols in scopes:
        scope = table.add(name, kind)
        for sym in symbols:
            scope.define(sym)
    return table


class TestReport:
    def test_exact_format(self):
        table = _table(
            ("GLOBAL", "GLOBAL", [Symbol("g", "INT")]),
            ("main", "FUNCTION", [Symbol("s", "STRING", '"hello"')]),
            ("BLOCK 1", "BLOCK", [Symbol("x", "INT"), Symbol("y", "FLOAT")]),
        )
        assert format_symbol_table(table) == (
            "Symbol table BLOCK 1\n"
            "name x type INT\n"
            "name y type FLOAT\n"
            "\n"
            "Symbol table main\n"
            'name s type STRING value "hello"\n'
            "\n"
        )

    def test_blocks_sort_as_strings(self):
        table = _table(
            ("BLOCK 2", "BLOCK", [Symbol("a", "INT")]),
            ("BLOCK 10", "BLOCK", [Symbol("b", "INT")]),
            ("BLOCK 1", "BLOCK", [Symbol("c", "INT")]),
        )
        headers = [l for l in format_symbol_table(table).splitlines() if l.startswith("Symbol table")]
        assert headers == ["Symbol table BLOCK 1", "Symbol table BLOCK 10", "Symbol table BLOCK 2"]

    def test_symbols_keep_declaration_order(self):
        table = _table(("BLOCK 3", "BLOCK", [Symbol("zeta", "INT"), Symbol("alpha", "INT")]))
        assert format_symbol_table(table).splitlines()[1:3] == ["name zeta type INT", "name alpha type INT"]

    def test_main_goes_last_and_others_are_hidden(self):
        table = _table(
            ("GLOBAL", "GLOBAL", [Symbol("g", "INT")]),
            ("foo", "FUNCTION", [Symbol("p", "INT")]),
            ("main", "FUNCTION", []),
            ("BLOCK 7", "BLOCK", [Symbol("b", "FLOAT")]),
        )
        out = format_symbol_table(table)
        assert out == "Symbol table BLOCK 7\nname b type FLOAT\n\nSymbol table main\n\n"
        assert "GLOBAL" not in out
        assert "foo" not in out

    def test_without_main_or_blocks_prints_nothing(self):
        table = _table(("GLOBAL", "GLOBAL", [Symbol("g", "INT")]), ("foo", "FUNCTION", []))
        assert format_symbol_table(table) == ""

    def test_print_writes_to_stream(self):
        table = _table(("main", "FUNCTION", [Symbol("x", "INT")]))
        buf = io.StringIO()
        print_symbol_table(table, buf)
        assert buf.getvalue() == "Symbol table main\nname x type INT\n\n"
