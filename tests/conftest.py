from __future__ import annotations
import random
import sys
import types
from pathlib import Path

import pytest

from docbr.utils.config import reset_settings

# ---------- DOCUMENTOS CONHECIDOS ----------

@pytest.fixture
def valid_cpf() -> str:
    return "111.444.777-35"

@pytest.fixture
def valid_cnpj() -> str:
    return "11.222.333/0001-81"

@pytest.fixture
def rng() -> random.Random:
    # semente fixa: fixtures geradas ficam reprodutíveis
    return random.Random(20250829)

@pytest.fixture
def tmpdir_path(tmp_path: Path) -> Path:
    return tmp_path

# ---------- CONFIG ISOLADA POR TESTE ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for k in ("DOCBR_LOG_LEVEL", "DOCBR_GENERATOR_SEED", "DOCBR_MIN_INPUT_DIGITS", "DOCBR_DOCUMENT_COLUMN"):
        monkeypatch.delenv(k, raising=False)
    reset_settings()
    yield
    reset_settings()

# ---------- UTIL: MOCK STREAMLIT PARA TESTES DE COMPONENTE ----------

@pytest.fixture
def mock_streamlit(monkeypatch):
    """
    Injeta um módulo 'streamlit' mínimo em sys.modules para importar componentes sem rodar Streamlit.
    `st.typed` controla o que o text_input devolve; `st.calls` registra as mensagens.
    """
    st = types.SimpleNamespace()
    st.typed = ""
    st.calls = []
    def _record(kind):
        return lambda *a, **k: st.calls.append((kind, a[0] if a else None))
    def _text_input(label, value="", **k):
        st.calls.append(("text_input", label))
        st.input_kwargs = k
        return st.typed if st.typed is not None else value
    st.text_input = _text_input
    st.success = _record("success")
    st.error = _record("error")
    st.caption = _record("caption")
    st.write = _record("write")
    st.session_state = {}
    monkeypatch.setitem(sys.modules, "streamlit", st)
    return st
