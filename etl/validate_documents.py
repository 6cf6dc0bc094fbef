from __future__ import annotations
import argparse
import sys
import zipfile
from pathlib import Path

from docbr.services.document_batch import validate_column, summarize
from docbr.utils.config import setting
from etl.common import get_logger, read_table, write_csv

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_INPUT = 2

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Valida a coluna de CPF/CNPJ de uma planilha de cadastros.")
    ap.add_argument("--src", required=True, help="Arquivo .csv ou .xlsx")
    ap.add_argument("--column", default=None, help="Coluna com os documentos (padrão: DOCBR_DOCUMENT_COLUMN)")
    ap.add_argument("--sheet", default=0, help="Aba do Excel (nome ou índice)")
    ap.add_argument("--sep", default=",", help="Separador do CSV")
    ap.add_argument("--out", default=None, help="CSV de saída com o resultado por linha")
    return ap

def _sheet(v):
    return int(v) if isinstance(v, str) and v.isdigit() else v

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    log = get_logger("validate_documents")
    column = args.column or setting("DOCBR_DOCUMENT_COLUMN")

    src = Path(args.src)
    if not src.exists():
        log.error(f"Faltando: {src}")
        return EXIT_INPUT

    try:
        df = read_table(src, sheet=_sheet(args.sheet), sep=args.sep)
    except (ValueError, OSError, zipfile.BadZipFile) as e:
        log.error(f"Não foi possível ler {src}: {e}")
        return EXIT_INPUT

    try:
        checked = validate_column(df, column)
    except KeyError as e:
        log.error(e.args[0])
        return EXIT_INPUT

    if args.out:
        out = Path(args.out)
        write_csv(checked, out)
        log.info(f"Relatório salvo em {out}")

    s = summarize(checked)
    log.info(f"{s['total']} linha(s): {s['valid']} válida(s), {s['invalid']} inválida(s) {s['by_type']}")
    for idx, row in checked[~checked["doc_valid"]].iterrows():
        log.warning(f"linha {idx}: {row['doc_errors']}")

    if s["invalid"]:
        return EXIT_INVALID
    log.info("✅ Todos os documentos são válidos.")
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
