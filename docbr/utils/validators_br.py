from __future__ import annotations
import logging
from typing import List, Sequence

from docbr.models.document import DocumentType, ValidationResult
from .formatters_br import format_cpf, format_cnpj
from .text import only_digits, is_repeated_digit

log = logging.getLogger(__name__)

CPF_LENGTH = 11
CNPJ_LENGTH = 14

CPF_WEIGHTS_1 = list(range(10, 1, -1))       # 10..2
CPF_WEIGHTS_2 = list(range(11, 1, -1))       # 11..2
CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
CNPJ_WEIGHTS_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

UNKNOWN_LENGTH_ERROR = "Document must have 11 digits (CPF) or 14 digits (CNPJ)"

def clean_document(document: str) -> str:
    """Remove tudo que não for dígito (pontos, traços, barras, espaços, letras)."""
    return only_digits(document)

def detect_type(digits: str) -> DocumentType:
    """Classificação apenas pelo tamanho; não olha os valores."""
    if len(digits) == CPF_LENGTH:
        return DocumentType.CPF
    if len(digits) == CNPJ_LENGTH:
        return DocumentType.CNPJ
    return DocumentType.UNKNOWN

def get_document_type(document: str) -> DocumentType:
    return detect_type(clean_document(document))

# ---------------- Dígitos verificadores ----------------

def check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Módulo 11: resto < 2 => 0, senão 11 - resto."""
    r = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if r < 2 else 11 - r

def cpf_check_digits(base: Sequence[int]) -> tuple[int, int]:
    """Calcula os dois DVs de um CPF a partir dos 9 primeiros dígitos."""
    d1 = check_digit(base[:9], CPF_WEIGHTS_1)
    d2 = check_digit(list(base[:9]) + [d1], CPF_WEIGHTS_2)
    return d1, d2

def cnpj_check_digits(base: Sequence[int]) -> tuple[int, int]:
    """Calcula os dois DVs de um CNPJ a partir dos 12 primeiros dígitos."""
    d1 = check_digit(base[:12], CNPJ_WEIGHTS_1)
    d2 = check_digit(list(base[:12]) + [d1], CNPJ_WEIGHTS_2)
    return d1, d2

def _checksum_errors(n: str, label: str, weights_1: Sequence[int], weights_2: Sequence[int]) -> List[str]:
    # o 2º DV usa o 1º dígito observado, não o calculado
    nums = [int(c) for c in n]
    size = len(weights_1)
    errors: List[str] = []
    if check_digit(nums[:size], weights_1) != nums[size]:
        errors.append(f"{label} first check digit invalid")
    if check_digit(nums[:size + 1], weights_2) != nums[size + 1]:
        errors.append(f"{label} second check digit invalid")
    return errors

def _check(n: str, kind: DocumentType, length: int, weights_1: Sequence[int], weights_2: Sequence[int]) -> List[str]:
    label = kind.value.upper()
    if len(n) != length:
        return [f"{label} must have exactly {length} digits"]
    errors: List[str] = []
    if is_repeated_digit(n):
        errors.append(f"{label} cannot be all identical digits")
    errors.extend(_checksum_errors(n, label, weights_1, weights_2))
    return errors

# ---------------- CPF ----------------

def validate_cpf(cpf: str) -> ValidationResult:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara. Todos os erros aplicáveis são reportados juntos.
    """
    n = clean_document(cpf)
    errors = _check(n, DocumentType.CPF, CPF_LENGTH, CPF_WEIGHTS_1, CPF_WEIGHTS_2)
    return ValidationResult(is_valid=not errors, kind=DocumentType.CPF, formatted=format_cpf(n), errors=errors)

# ---------------- CNPJ ----------------

def validate_cnpj(cnpj: str) -> ValidationResult:
    """
    Valida CNPJ com dígitos verificadores.
    """
    n = clean_document(cnpj)
    errors = _check(n, DocumentType.CNPJ, CNPJ_LENGTH, CNPJ_WEIGHTS_1, CNPJ_WEIGHTS_2)
    return ValidationResult(is_valid=not errors, kind=DocumentType.CNPJ, formatted=format_cnpj(n), errors=errors)

# ---------------- Automático ----------------

def validate(document: str) -> ValidationResult:
    """
    Normaliza, detecta o tipo pelo tamanho e despacha para o verificador.
    Tamanho diferente de 11/14 => UNKNOWN, sem máscara aplicada.
    """
    n = clean_document(document)
    kind = detect_type(n)
    if kind is DocumentType.CPF:
        result = validate_cpf(n)
    elif kind is DocumentType.CNPJ:
        result = validate_cnpj(n)
    else:
        result = ValidationResult(is_valid=False, kind=kind, formatted=n, errors=[UNKNOWN_LENGTH_ERROR])
    log.debug("documento %s com %d dígitos: %d erro(s)", kind.value, len(n), len(result.errors))
    return result

def is_valid_document(document: str) -> bool:
    return validate(document).is_valid
