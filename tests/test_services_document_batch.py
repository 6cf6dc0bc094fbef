from __future__ import annotations
import pandas as pd
import pytest

from docbr.services import validate_column, split_valid_invalid, summarize

@pytest.fixture
def cadastros_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"nome": "Loja A", "documento": "11.222.333/0001-81"},   # CNPJ válido
        {"nome": "Fulano", "documento": "111.444.777-35"},       # CPF válido
        {"nome": "Ciclano", "documento": "111.444.777-36"},      # 2º DV errado
        {"nome": "Vazio", "documento": None},                    # ignora => unknown
    ])

def test_validate_column_adds_result_columns(cadastros_df):
    out = validate_column(cadastros_df, "documento")
    assert list(out["doc_type"]) == ["cnpj", "cpf", "cpf", "unknown"]
    assert list(out["doc_valid"]) == [True, True, False, False]
    assert out.loc[2, "doc_errors"] == "CPF second check digit invalid"
    assert out.loc[1, "doc_digits"] == "11144477735"
    assert out.loc[3, "doc_formatted"] == ""
    # original intacto
    assert "doc_valid" not in cadastros_df.columns

def test_missing_column_raises(cadastros_df):
    with pytest.raises(KeyError):
        validate_column(cadastros_df, "cpf")

def test_split_and_summarize(cadastros_df):
    ok, bad = split_valid_invalid(cadastros_df, "documento")
    assert list(ok["nome"]) == ["Loja A", "Fulano"]
    assert list(bad["nome"]) == ["Ciclano", "Vazio"]

    s = summarize(validate_column(cadastros_df, "documento"))
    assert s == {"total": 4, "valid": 2, "invalid": 2, "by_type": {"cnpj": 1, "cpf": 2, "unknown": 1}}

def test_empty_frame():
    out = validate_column(pd.DataFrame({"documento": []}), "documento")
    assert out.empty
    assert summarize(out)["total"] == 0
