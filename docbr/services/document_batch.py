from __future__ import annotations
from typing import Any, Dict, Tuple

import pandas as pd

from docbr.utils.validators_br import clean_document, validate

RESULT_COLUMNS = ["doc_digits", "doc_type", "doc_valid", "doc_formatted", "doc_errors"]

def _cell_to_text(v: Any) -> str:
    if v is None:
        return ""
    try:
        if pd.isna(v):
            return ""
    except (TypeError, ValueError):
        pass
    return str(v)

def validate_column(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """
    Valida uma coluna de CPF/CNPJ de um DataFrame de cadastros.
    Retorna uma cópia com as colunas doc_digits, doc_type, doc_valid, doc_formatted, doc_errors.
    """
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas disponíveis: {', '.join(map(str, df.columns))}")

    out = df.copy()
    texts = [_cell_to_text(v) for v in out[column].tolist()]
    results = [validate(t) for t in texts]
    out["doc_digits"] = [clean_document(t) for t in texts]
    out["doc_type"] = [r.kind.value for r in results]
    out["doc_valid"] = pd.Series([r.is_valid for r in results], index=out.index, dtype=bool)
    out["doc_formatted"] = [r.formatted for r in results]
    out["doc_errors"] = ["; ".join(r.errors) for r in results]
    return out

def split_valid_invalid(df: pd.DataFrame, column: str) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Separa (válidos, inválidos) após validate_column."""
    checked = validate_column(df, column)
    mask = checked["doc_valid"]
    return checked[mask].copy(), checked[~mask].copy()

def summarize(checked: pd.DataFrame) -> Dict[str, Any]:
    """Contagens para relatório: total, válidos, inválidos e por tipo."""
    if checked.empty or "doc_valid" not in checked.columns:
        return {"total": 0, "valid": 0, "invalid": 0, "by_type": {}}
    valid = int(checked["doc_valid"].sum())
    by_type = {str(k): int(v) for k, v in checked["doc_type"].value_counts().sort_index().items()}
    return {
        "total": int(len(checked)),
        "valid": valid,
        "invalid": int(len(checked)) - valid,
        "by_type": by_type,
    }
