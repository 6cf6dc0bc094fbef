from .config import settings, set_settings, reset_settings, setting, setting_int
from .text import only_digits, is_repeated_digit
from .formatters_br import format_cpf, format_cnpj, format_document
from .validators_br import (
    clean_document,
    detect_type,
    get_document_type,
    validate,
    validate_cpf,
    validate_cnpj,
    is_valid_document,
)
from .generators_br import generate_valid_cpf, generate_valid_cnpj, default_rng

__all__ = [
    "settings", "set_settings", "reset_settings", "setting", "setting_int",
    "only_digits", "is_repeated_digit",
    "format_cpf", "format_cnpj", "format_document",
    "clean_document", "detect_type", "get_document_type",
    "validate", "validate_cpf", "validate_cnpj", "is_valid_document",
    "generate_valid_cpf", "generate_valid_cnpj", "default_rng",
]
