from .document_batch import (
    validate_column,
    split_valid_invalid,
    summarize,
)

__all__ = [
    "validate_column",
    "split_valid_invalid",
    "summarize",
]
