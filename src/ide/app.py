from __future__ import annotations
import sys
import contextlib
from pathlib import Path
from typing import Any

import streamlit as st

# --- Rutas/paths base ---
# repo_root/
#   ├─ src/
#   │   ├─ ide/app.py (este archivo)
#   │   ├─ parsing/
#   │   ├─ semantic/
#   │   └─ tests/

SRC_DIR = Path(__file__).resolve().parent.parent  # .../src

# `streamlit run src/ide/app.py` no instala el paquete: src debe estar en el path
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from parsing.antlr.parser_builder import build_from_text, ParseResult
from semantic.checker import analyze
from semantic.errors import DuplicateDeclarationError
from semantic.report import format_symbol_table

try:
    from streamlit_ace import st_ace
    HAS_ACE = True
except ImportError:
    HAS_ACE = False


# ------------------ Utilidades núcleo ------------------
@st.cache_data(show_spinner=False)
def discover_samples() -> dict[str, str]:
    """Escanea los programas de prueba y devuelve {ruta_visible: contenido}."""
    root = SRC_DIR / "tests" / "programs"
    out: dict[str, str] = {}
    if root.exists():
        for p in sorted(root.glob("*.little")):
            with contextlib.suppress(OSError, UnicodeDecodeError):
                out[p.name] = p.read_text(encoding="utf-8")
    return out


def scope_rows(payload: list) -> list[dict[str, Any]]:
    """Aplana SymbolTable.dump() a filas tabulares (todos los alcances, no solo los del reporte)."""
    rows: list[dict[str, Any]] = []
    for sc in payload:
        for e in sc["entries"]:
            rows.append({
                "scope": sc["scope"],
                "kind": sc["kind"],
                "name": e["name"],
                "type": e["type"],
                "value": e["value"] or "",
            })
    return rows


# ------------------ Estado y configuración ------------------
DEFAULT_SNIPPET = (
    "PROGRAM demo\n"
    "BEGIN\n"
    "  FUNCTION VOID main()\n"
    "  BEGIN\n"
    "    INT x, y;\n"
    "    IF (x < y)\n"
    "      STRING s := \"hello\";\n"
    "    ENDIF\n"
    "  END\n"
    "END\n"
)

st.set_page_config(page_title="Little IDE", page_icon="🧪", layout="wide")

st.session_state.setdefault("code", DEFAULT_SNIPPET)
st.session_state.setdefault("console", "")
st.session_state.setdefault("ace_key", 0)
st.session_state.setdefault("last_result", None)
st.session_state.setdefault("table", None)

# ------------------ Sidebar ------------------
with st.sidebar:
    st.markdown("### 📁 Proyecto")
    samples = discover_samples()
    choice = st.selectbox("Ejemplos", ["(ninguno)"] + sorted(samples.keys()))
    if choice != "(ninguno)" and st.session_state.get("_example_name") != choice:
        st.session_state.code = samples[choice]
        st.session_state.console += f"📦 Ejemplo cargado: {choice}\n"
        st.session_state.ace_key += 1
        st.session_state["_example_name"] = choice
    show_tree = st.checkbox("Ver árbol (texto)", value=False)

# ------------------ Editor ------------------
st.markdown("## 📝 Editor")
if HAS_ACE:
    code = st_ace(value=st.session_state.code, language="text", theme="monokai",
                  height=360, key=f"ace_{st.session_state.ace_key}")
else:
    code = st.text_area("Código fuente", value=st.session_state.code, height=320)
st.session_state.code = code

col1, col2, _ = st.columns([1, 1, 6])
run_now = col1.button("▶️ Analizar", use_container_width=True)
if col2.button("🧹 Limpiar salida", use_container_width=True):
    st.session_state.console = ""

# ------------------ Pipeline: parse + alcances ------------------
if run_now:
    res = build_from_text(st.session_state.code)
    st.session_state.last_result = res
    st.session_state.table = None
    if not res.ok():
        st.session_state.console += f"❌ Errores de sintaxis: {len(res.errors)}\n"
        for e in res.errors:
            st.session_state.console += f"{e}\n"
    else:
        try:
            table = analyze(res.tree)
        except DuplicateDeclarationError as ex:
            st.session_state.console += f"{ex}\n"
        else:
            st.session_state.table = table
            st.session_state.console += format_symbol_table(table)

# ------------------ Consola ------------------
st.markdown("## 🖥️ Salida")
st.code(st.session_state.console or "// La salida aparecerá aquí...", language="text")

# ------------------ Resultados ------------------
res: ParseResult | None = st.session_state.last_result
table = st.session_state.table
if table is not None:
    with st.expander("📚 Todos los alcances", expanded=True):
        st.dataframe(scope_rows(table.dump()), use_container_width=True, hide_index=True)
if show_tree and res is not None and res.tree is not None:
    st.code(res.tree.toStringTree(recog=res.parser), language="text")
