from __future__ import annotations
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator


class DocumentType(str, Enum):
    """Tipos de documento reconhecidos pelo motor (classificação só por tamanho)."""
    CPF = "cpf"            # pessoa física, 11 dígitos
    CNPJ = "cnpj"          # pessoa jurídica, 14 dígitos
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    DocumentType.CPF: "Pessoa Física (CPF)",
    DocumentType.CNPJ: "Pessoa Jurídica (CNPJ)",
    DocumentType.UNKNOWN: "Documento desconhecido",
}


class ValidationResult(BaseModel):
    """
    Resultado uniforme de toda validação de CPF/CNPJ.
    - `formatted` é sempre derivado dos dígitos normalizados (melhor esforço).
    - `errors` vazio se e somente se `is_valid`.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    is_valid: bool
    kind: DocumentType = Field(default=DocumentType.UNKNOWN)
    formatted: str = Field(default="", description="Forma pontuada para exibição")
    errors: list[str] = Field(default_factory=list, description="Mensagens distintas, em ordem")

    @field_validator("errors", mode="before")
    @classmethod
    def _distinct(cls, v: Any):
        if v is None:
            return []
        seen: list[str] = []
        for msg in v:
            s = str(msg).strip()
            if s and s not in seen:
                seen.append(s)
        return seen

    @model_validator(mode="after")
    def _check_consistency(self):
        if self.is_valid == bool(self.errors):
            raise ValueError("is_valid deve ser True exatamente quando não há erros")
        return self

    # ---------------- Conveniências ----------------

    def summary(self) -> str:
        """Linha única para UI/relatórios."""
        if self.is_valid:
            return f"{self.kind.value.upper()} válido: {self.formatted}"
        return "; ".join(self.errors)

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
