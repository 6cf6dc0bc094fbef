from __future__ import annotations
import re
from typing import Optional

_NON_DIGIT = re.compile(r"[^0-9]")

def only_digits(s: Optional[str]) -> str:
    """Mantém apenas os dígitos 0-9, na ordem original. None vira ''."""
    if s is None:
        return ""
    return _NON_DIGIT.sub("", str(s))

def is_repeated_digit(s: str) -> bool:
    """True para sequências como '00000000000' (um único dígito repetido)."""
    return bool(s) and s == s[0] * len(s)
