# etl/__init__.py
"""Rotinas em lote do docbr.

Use como módulo:
    python -m etl.validate_documents --src cadastros.csv --column documento --out relatorio.csv
"""
__all__ = []
