from __future__ import annotations
import logging, sys
from pathlib import Path

import pandas as pd

from docbr.utils.config import setting

# ----------------- logging -----------------
def get_logger(name: str = "etl", level: int | str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    if level is None:
        level = setting("DOCBR_LOG_LEVEL")
    if isinstance(level, str):
        # nome desconhecido (ex.: "verbose") => INFO
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger

# ----------------- paths -----------------
def ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

# ----------------- io helpers -----------------
def read_table(path: Path, sheet: int | str = 0, sep: str = ",") -> pd.DataFrame:
    """CSV ou Excel, sempre como texto (CPF/CNPJ perdem zeros à esquerda como número)."""
    if path.suffix.lower() in (".xlsx", ".xlsm"):
        df = pd.read_excel(path, sheet_name=sheet, engine="openpyxl", dtype=str)
    else:
        df = pd.read_csv(path, dtype=str, sep=sep)
    df.columns = [str(c).strip() for c in df.columns]
    return df

def write_csv(df: pd.DataFrame, path: Path) -> None:
    ensure_parent(path)
    df.to_csv(path, index=False)
