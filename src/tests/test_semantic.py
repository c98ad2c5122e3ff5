# src/tests/test_semantic.py
import os

import pytest

from parsing.antlr.parser_builder import build_from_file
from semantic.checker import analyze
from semantic.errors import DuplicateDeclarationError
from semantic.report import format_symbol_table

BASE = os.path.join(os.path.dirname(__file__), "programs")

# Programa -> reporte esperado (.out al lado del .little)
OK = [
    "demo.little",      # funciones, IF/ELSE, WHILE y declaraciones globales
    "nested.little",    # bloques anidados y contador compartido entre funciones
]
# Programa -> nombre que debe reportarse como duplicado
FAIL = [
    ("duplicate.little", "count"),
]

def compile_file(path):
    res = build_from_file(path, raise_on_error=True)
    return analyze(res.tree)

@pytest.mark.parametrize("fname", OK)
def test_examples_ok(fname):
    path = os.path.join(BASE, fname)
    assert os.path.exists(path), f"No existe {path}"
    table = compile_file(path)
    expected_path = os.path.splitext(path)[0] + ".out"
    with open(expected_path, encoding="utf-8") as fh:
        expected = fh.read()
    assert format_symbol_table(table) == expected

@pytest.mark.parametrize("fname, name", FAIL)
def test_examples_fail(fname, name):
    path = os.path.join(BASE, fname)
    assert os.path.exists(path), f"No existe {path}"
    with pytest.raises(DuplicateDeclarationError) as info:
        compile_file(path)
    assert info.value.name == name
    assert str(info.value) == f"DECLARATION ERROR {name}"
