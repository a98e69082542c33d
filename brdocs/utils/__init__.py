from .config import settings, set_settings, reset_settings, setting, default_mode
from .log import get_logger
from .text import only_digits, natural_language_join, sanitize_input, sanitize_mapping
from .checksum import luhn, mod11, mod11_pre
from .validators_br import (
    cpf, cnpj, document, is_valid_cpf, is_valid_cnpj, is_valid_document,
    address_number, cep, postal_code, phone, tel, date, date_time,
)
from .format_br import (
    format_cpf, format_cnpj, format_document, format_date, format_date_range, format_money,
    DAYS_OF_WEEK, MONTHS,
)

__all__ = [
    "settings", "set_settings", "reset_settings", "setting", "default_mode",
    "get_logger",
    "only_digits", "natural_language_join", "sanitize_input", "sanitize_mapping",
    "luhn", "mod11", "mod11_pre",
    "cpf", "cnpj", "document", "is_valid_cpf", "is_valid_cnpj", "is_valid_document",
    "address_number", "cep", "postal_code", "phone", "tel", "date", "date_time",
    "format_cpf", "format_cnpj", "format_document", "format_date", "format_date_range", "format_money",
    "DAYS_OF_WEEK", "MONTHS",
]
