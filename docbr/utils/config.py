from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Logging (ferramentas de linha de comando)
    "DOCBR_LOG_LEVEL": "INFO",
    # Gerador de fixtures: vazio => sem semente
    "DOCBR_GENERATOR_SEED": "",
    # Componente de formulário: dígitos mínimos antes de validar
    "DOCBR_MIN_INPUT_DIGITS": "11",
    # Coluna padrão nas planilhas de cadastro
    "DOCBR_DOCUMENT_COLUMN": "documento",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. DOCBR_LOG_LEVEL)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = env_val.strip()
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)

def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    _runtime_overrides.update({k: str(v).strip() for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]

def reset_settings() -> None:
    """Descarta overrides e o cache (volta a ENV + defaults)."""
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' inexistente. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]

def setting_int(key: str, default: int | None = None) -> int | None:
    raw = setting(key)
    if raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Configuração '{key}' deve ser inteira, recebido {raw!r}") from None
