"""
brdocs: validação e formatação de documentos brasileiros (CPF, CNPJ, CEP,
telefone, número de endereço) e registros imutáveis com schema.
"""
from .models import (
    DocumentResult, DocumentType, ValidationMode,
    RecordError, SchemaViolation, TypeViolation, UnknownKeyError, ReadOnlyViolation,
    RecordSchema, TypedImmutableRecord, TypeTag,
)
from .utils import (
    cpf, cnpj, document, address_number, cep, postal_code, phone,
    format_cpf, format_cnpj, format_document,
    luhn, mod11, mod11_pre,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentResult", "DocumentType", "ValidationMode",
    "RecordError", "SchemaViolation", "TypeViolation", "UnknownKeyError", "ReadOnlyViolation",
    "RecordSchema", "TypedImmutableRecord", "TypeTag",
    "cpf", "cnpj", "document", "address_number", "cep", "postal_code", "phone",
    "format_cpf", "format_cnpj", "format_document",
    "luhn", "mod11", "mod11_pre",
]
