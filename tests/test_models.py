from __future__ import annotations
import pytest
from pydantic import ValidationError

from docbr.models import DocumentType, ValidationResult

def test_document_type_values_and_labels():
    assert DocumentType("cpf") is DocumentType.CPF
    assert DocumentType.CNPJ.value == "cnpj"
    assert DocumentType.CPF.label == "Pessoa Física (CPF)"
    assert DocumentType.CNPJ.label == "Pessoa Jurídica (CNPJ)"

def test_errors_are_distinct_and_ordered():
    r = ValidationResult(is_valid=False, kind="cpf", formatted="1", errors=["b", "a", "b", " a "])
    assert r.errors == ["b", "a"]
    assert r.kind == DocumentType.CPF

def test_validity_must_match_errors():
    with pytest.raises(ValidationError):
        ValidationResult(is_valid=True, errors=["x"])
    with pytest.raises(ValidationError):
        ValidationResult(is_valid=False, errors=[])

def test_result_is_immutable():
    r = ValidationResult(is_valid=True, kind=DocumentType.CPF, formatted="111.444.777-35")
    with pytest.raises(ValidationError):
        r.is_valid = False

def test_summary_and_as_dict():
    ok = ValidationResult(is_valid=True, kind=DocumentType.CNPJ, formatted="11.222.333/0001-81")
    assert ok.summary() == "CNPJ válido: 11.222.333/0001-81"
    bad = ValidationResult(is_valid=False, kind=DocumentType.CPF, formatted="123", errors=["x", "y"])
    assert bad.summary() == "x; y"
    assert bad.as_dict() == {"is_valid": False, "kind": "cpf", "formatted": "123", "errors": ["x", "y"]}
