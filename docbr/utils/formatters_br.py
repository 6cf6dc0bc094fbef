from __future__ import annotations

from .text import only_digits

def format_cpf(cpf: str) -> str:
    n = only_digits(cpf)
    if len(n) != 11:
        return cpf
    return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"

def format_cnpj(cnpj: str) -> str:
    n = only_digits(cnpj)
    if len(n) != 14:
        return cnpj
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"

def format_document(document: str) -> str:
    """
    Máscara automática: até 11 dígitos usa a de CPF, acima disso a de CNPJ.
    Tamanhos que não fecham (ex.: 10 ou 13 dígitos) voltam só com os dígitos.
    """
    n = only_digits(document)
    if len(n) <= 11:
        return format_cpf(n)
    return format_cnpj(n)
