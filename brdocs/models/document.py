from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, model_validator


class ValidationMode(str, Enum):
    """Rigor na contagem de dígitos de CPF/CNPJ."""
    STRICT = "strict"      # exatamente 11/14 dígitos após limpar a máscara
    LENIENT = "lenient"    # completa com zeros à esquerda; acima do tamanho é inválido


class DocumentType(str, Enum):
    INVALID = "invalid"
    CPF = "cpf"
    CNPJ = "cnpj"


DIGIT_COUNT = {DocumentType.CPF: 11, DocumentType.CNPJ: 14}


class DocumentResult(BaseModel):
    """
    Resultado de validators_br.document().
    - INVALID nunca carrega dígitos.
    - CPF/CNPJ carregam a string normalizada, só dígitos, no tamanho do tipo.
    """
    model_config = ConfigDict(frozen=True)

    type: DocumentType = Field(default=DocumentType.INVALID)
    digits: Optional[str] = Field(default=None, description="Documento normalizado (só dígitos)")

    @model_validator(mode="after")
    def _check_digits(self) -> "DocumentResult":
        if self.type is DocumentType.INVALID:
            if self.digits is not None:
                raise ValueError("Documento inválido não carrega dígitos")
            return self
        size = DIGIT_COUNT[self.type]
        if self.digits is None or len(self.digits) != size or not self.digits.isascii() or not self.digits.isdigit():
            raise ValueError(f"{self.type.value.upper()} deve ter exatamente {size} dígitos")
        return self

    @classmethod
    def invalid(cls) -> "DocumentResult":
        return cls()

    @property
    def valid(self) -> bool:
        return self.type is not DocumentType.INVALID

    @property
    def label(self) -> str | None:
        """'CPF' / 'CNPJ', ou None se inválido."""
        return self.type.value.upper() if self.valid else None
