"""Validação e formatação de CPF/CNPJ.

Uso:
    from docbr import validate, format_document
    validate("111.444.777-35").is_valid  # True
"""
from .models import DocumentType, ValidationResult
from .utils import (
    clean_document,
    get_document_type,
    validate,
    validate_cpf,
    validate_cnpj,
    is_valid_document,
    format_cpf,
    format_cnpj,
    format_document,
    generate_valid_cpf,
    generate_valid_cnpj,
)

__all__ = [
    "DocumentType",
    "ValidationResult",
    "clean_document",
    "get_document_type",
    "validate",
    "validate_cpf",
    "validate_cnpj",
    "is_valid_document",
    "format_cpf",
    "format_cnpj",
    "format_document",
    "generate_valid_cpf",
    "generate_valid_cnpj",
]
