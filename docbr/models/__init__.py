from .document import DocumentType, ValidationResult

__all__ = [
    "DocumentType",
    "ValidationResult",
]
