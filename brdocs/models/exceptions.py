from __future__ import annotations
from typing import Iterable

from brdocs.utils.text import natural_language_join


class RecordError(Exception):
    """Base dos erros de registros imutáveis."""


class SchemaViolation(RecordError):
    """Chaves fora do schema foram fornecidas na construção."""

    def __init__(self, record: str, keys: Iterable[str]) -> None:
        self.record = record
        self.keys = tuple(keys)
        super().__init__(
            f"{record} não aceita a(s) chave(s): {', '.join(repr(k) for k in self.keys)}"
        )


class TypeViolation(RecordError, TypeError):
    """Valor de uma chave conhecida com tipo não aceito pelo schema."""

    def __init__(self, record: str, key: str, expected: Iterable[str], actual: str) -> None:
        self.record = record
        self.key = key
        self.expected = tuple(expected)
        self.actual = actual
        super().__init__(
            f"{record}: '{key}' deve ser {natural_language_join(self.expected, last='ou')}, "
            f"recebido {actual}"
        )


class UnknownKeyError(RecordError, KeyError):
    """Leitura de chave que não existe nem é opcional."""

    def __init__(self, record: str, key: str) -> None:
        self.record = record
        self.key = key
        super().__init__(f"{record} não possui '{key}'")

    def __str__(self) -> str:
        # KeyError usaria repr() da mensagem
        return str(self.args[0])


class ReadOnlyViolation(RecordError):
    """Tentativa de alterar um registro somente leitura."""

    def __init__(self, record: str) -> None:
        self.record = record
        super().__init__(f"{record} é somente leitura")
