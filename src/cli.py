# src/cli.py
import argparse
import logging
import sys
from pathlib import Path

from parsing.antlr.parser_builder import build_from_text
from semantic.checker import analyze
from semantic.errors import DuplicateDeclarationError
from semantic.report import print_symbol_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECLARATION_ERROR = 1
EXIT_SYNTAX_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="little-scopes",
        description="Construye la tabla de símbolos de un programa Little e imprime sus bloques y main.",
    )
    parser.add_argument("file", nargs="?", default="-",
                        help="archivo fuente Little; '-' o vacío lee de la entrada estándar")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="traza de apertura y cierre de alcances en stderr")
    return parser


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv=None) -> int:
    """
    Ejecuta el pase completo: lectura, análisis sintáctico, alcances y reporte.

    La salida estándar recibe únicamente el reporte o la línea ``DECLARATION ERROR <name>``;
    los diagnósticos y la traza van a stderr.
    """
    args = build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)s %(name)s: %(message)s")

    try:
        code = read_source(args.file)
    except OSError as ex:
        print(f"No se pudo leer {args.file}: {ex}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    result = build_from_text(code)
    if not result.ok():
        for error in result.errors:
            print(error, file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    try:
        table = analyze(result.tree)
    except DuplicateDeclarationError as ex:
        logger.debug("análisis interrumpido en línea %s", ex.line)
        print(ex)
        return EXIT_DECLARATION_ERROR

    print_symbol_table(table)
    return EXIT_OK


def execute_cli():
    sys.exit(main())


if __name__ == "__main__":
    execute_cli()
