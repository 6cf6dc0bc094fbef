from __future__ import annotations
import random
from typing import List, Optional

from .config import setting_int
from .formatters_br import format_cpf, format_cnpj
from .validators_br import cpf_check_digits, cnpj_check_digits

HEAD_OFFICE_BRANCH = [0, 0, 0, 1]

def default_rng() -> random.Random:
    """
    Fonte aleatória padrão dos geradores.
    Com DOCBR_GENERATOR_SEED definido, a sequência é reprodutível.
    """
    seed = setting_int("DOCBR_GENERATOR_SEED")
    return random.Random(seed) if seed is not None else random.Random()

def _digits(rng: random.Random, k: int) -> List[int]:
    return [rng.randrange(10) for _ in range(k)]

def generate_valid_cpf(rng: Optional[random.Random] = None, formatted: bool = False) -> str:
    """Gera CPF válido para fixtures: 9 dígitos aleatórios + 2 DVs."""
    rng = rng or default_rng()
    base = _digits(rng, 9)
    while len(set(base)) == 1:  # 111111111 geraria 11111111111, recusado pelo validador
        base = _digits(rng, 9)
    base.extend(cpf_check_digits(base))
    n = "".join(map(str, base))
    return format_cpf(n) if formatted else n

def generate_valid_cnpj(rng: Optional[random.Random] = None, formatted: bool = False) -> str:
    """Gera CNPJ válido (matriz, filial 0001) para fixtures."""
    base = _digits(rng or default_rng(), 8) + HEAD_OFFICE_BRANCH
    base.extend(cnpj_check_digits(base))
    n = "".join(map(str, base))
    return format_cnpj(n) if formatted else n
