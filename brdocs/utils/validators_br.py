from __future__ import annotations
import re
from datetime import datetime
from typing import Any, Optional, Union

from brdocs.models.document import DocumentResult, DocumentType, ValidationMode
from .checksum import mod11
from .config import default_mode
from .log import get_logger
from .text import only_digits

log = get_logger(__name__)

Mode = Union[ValidationMode, str, None]

def _resolve_mode(mode: Mode) -> ValidationMode:
    if mode is None:
        return default_mode()
    return ValidationMode(mode.lower() if isinstance(mode, str) else mode)

def _fit_length(value: Any, size: int, mode: Mode) -> Optional[str]:
    """
    Extrai os dígitos e aplica a regra de tamanho do modo.
    STRICT exige exatamente `size`; LENIENT completa com zeros à esquerda.
    """
    n = only_digits(value)
    if len(n) > size:
        return None
    if _resolve_mode(mode) is ValidationMode.LENIENT:
        return n.zfill(size)
    return n if len(n) == size else None

# ---------------- CPF ----------------

def cpf(value: Any, mode: Mode = None) -> Optional[str]:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara.
    Retorna os 11 dígitos normalizados ou None.
    """
    n = _fit_length(value, 11, mode)
    if n is None:
        log.debug("CPF rejeitado: quantidade de dígitos")
        return None
    if n == n[0] * 11:
        log.debug("CPF rejeitado: dígitos repetidos")
        return None

    # 1º e 2º DV
    for t in (9, 10):
        s = sum(int(n[c]) * ((t + 1) - c) for c in range(t))
        if int(n[t]) != (10 * s) % 11 % 10:
            log.debug("CPF rejeitado: dígito verificador")
            return None
    return n

def is_valid_cpf(value: Any, mode: Mode = None) -> bool:
    return cpf(value, mode) is not None

# ---------------- CNPJ ----------------

def _cnpj_dv(num: str) -> int:
    d = 11 - mod11(num)
    return 0 if d >= 10 else d

def cnpj(value: Any, mode: Mode = None) -> Optional[str]:
    """
    Valida CNPJ com dígitos verificadores.
    Retorna os 14 dígitos normalizados ou None.
    """
    n = _fit_length(value, 14, mode)
    if n is None:
        log.debug("CNPJ rejeitado: quantidade de dígitos")
        return None
    if n == n[0] * 14:
        log.debug("CNPJ rejeitado: dígitos repetidos")
        return None

    d1 = _cnpj_dv(n[:12])
    d2 = _cnpj_dv(n[:12] + str(d1))
    if n[-2:] != f"{d1}{d2}":
        log.debug("CNPJ rejeitado: dígito verificador")
        return None
    return n

def is_valid_cnpj(value: Any, mode: Mode = None) -> bool:
    return cnpj(value, mode) is not None

# ---------------- CPF ou CNPJ ----------------

def document(value: Any, mode: Mode = None) -> DocumentResult:
    """Tenta CPF e depois CNPJ."""
    n = cpf(value, mode)
    if n is not None:
        return DocumentResult(type=DocumentType.CPF, digits=n)
    n = cnpj(value, mode)
    if n is not None:
        return DocumentResult(type=DocumentType.CNPJ, digits=n)
    return DocumentResult.invalid()

def is_valid_document(value: Any, mode: Mode = None) -> bool:
    return document(value, mode).valid

# ---------------- Padrões ----------------

def _text(value: Any) -> str:
    return "" if value is None else str(value)

_ADDRESS_NUMBER = re.compile(r"\d{1,5}([\s\-]?[A-Z0-9]+|)", re.IGNORECASE | re.ASCII)
_NO_NUMBER = re.compile(r"s\.?[\s/]?n\.?", re.IGNORECASE | re.ASCII)
_CEP = re.compile(r"(\d{2})[\s.]?(\d{3})[\s\-]?(\d{3})", re.ASCII)
_PHONE = re.compile(r"(\+\d{2}|)\s?(\(?0?\d{2}\)?|)\s?(9?)\s?(\d{4})[\s\-]?(\d{4})", re.ASCII)

def address_number(value: Any) -> Optional[str]:
    """
    Número de endereço: '00000-w' (pontuação opcional, 'w' letra ou dígito)
    ou o literal 's/n' para endereço sem número.
    """
    s = _text(value)
    if _ADDRESS_NUMBER.fullmatch(s):
        return s.upper()
    if _NO_NUMBER.fullmatch(s):
        return "s/n"
    return None

def cep(value: Any) -> Optional[str]:
    """CEP '00.000-000', pontuação opcional. Retorna '00000-000'."""
    m = _CEP.fullmatch(_text(value))
    if not m:
        return None
    return f"{m.group(1)}{m.group(2)}-{m.group(3)}"

postal_code = cep

def phone(value: Any) -> Optional[str]:
    """
    Telefone fixo/celular, formato máximo '+00 (000) 90000-0000'.
    Retorna '+CC DDD 9NNNN-NNNN' omitindo as partes ausentes.
    """
    m = _PHONE.fullmatch(_text(value))
    if not m:
        return None
    country, area, marker, first, last = m.groups()
    out = f"{country} " if country else ""
    if area:
        out += area.replace("(", "").replace(")", "") + " "
    return f"{out}{marker}{first}-{last}"

tel = phone

# ---------------- Datas ----------------

def date(value: Any, fmt: str = "%Y-%m-%d") -> bool:
    """True se `value` está no formato `fmt` e representa uma data real."""
    if not isinstance(value, str) or not value:
        return False
    try:
        d = datetime.strptime(value, fmt)
    except ValueError:
        return False
    return d.strftime(fmt) == value

def date_time(value: Any, fmt: str = "%Y-%m-%d %H:%M:%S") -> bool:
    return date(value, fmt)
