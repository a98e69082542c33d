from __future__ import annotations
from datetime import date as _date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

import pandas as pd

from brdocs.models.document import DocumentType
from .validators_br import Mode, document

DateLike = Union[str, _date, datetime, pd.Timestamp]

DAYS_OF_WEEK = (
    "Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado",
)

MONTHS = (
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
)

# (símbolo, separador de milhar, separador decimal)
_MONEY = {
    "BR": ("R$", ".", ","),
    "US": ("US$", ",", "."),
}

# ---------------- Documentos ----------------

def format_cpf(digits: str) -> str:
    """'52998224725' -> '529.982.247-25'. Não valida: passe dígitos já validados."""
    return f"{digits[0:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:11]}"

def format_cnpj(digits: str) -> str:
    """'11222333000181' -> '11.222.333/0001-81'. Não valida."""
    return f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:14]}"

def format_document(value: str, mode: Mode = None, prepend: bool = False) -> str:
    """
    Formata CPF ou CNPJ conforme o tipo detectado.
    Com prepend=True prefixa 'CPF: ' / 'CNPJ: '.
    Documento inválido volta como veio.
    """
    result = document(value, mode)
    if result.type is DocumentType.CPF:
        return ("CPF: " if prepend else "") + format_cpf(result.digits)
    if result.type is DocumentType.CNPJ:
        return ("CNPJ: " if prepend else "") + format_cnpj(result.digits)
    return value

# ---------------- Datas ----------------

def _to_date(value: DateLike) -> _date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, _date):
        return value
    return pd.to_datetime(value).date()

def format_date(value: DateLike) -> str:
    """
    Data por extenso: '15 de Agosto de 2017'.
    O primeiro dia do mês sai como '1º'.
    """
    d = _to_date(value)
    day = "1º" if d.day == 1 else str(d.day)
    return f"{day} de {MONTHS[d.month - 1]} de {d.year}"

def format_date_range(start: DateLike, end: DateLike, prefix: bool = True) -> str:
    """
    ('2017-08-30', '2017-08-15')        -> 'Datas: 15/08/2017 a 30/08/2017'
    ('2017-07-24', '2017-07-25', False) -> '24/07/2017 e 25/07/2017'
    ('2017-05-01', '2017-05-01')        -> 'Data: 01/05/2017'
    """
    d0, d1 = sorted((_to_date(start), _to_date(end)))
    parts = [d0.strftime("%d/%m/%Y")]
    if d0 != d1:
        parts.append(d1.strftime("%d/%m/%Y"))
    head = ("Datas: " if d0 != d1 else "Data: ") if prefix else ""
    # dias consecutivos usam " e " em qualquer ordem de argumentos
    glue = " e " if d1 - d0 == timedelta(days=1) else " a "
    return head + glue.join(parts)

# ---------------- Dinheiro ----------------

def format_money(value: Union[int, float, Decimal, str], country: str = "BR") -> str:
    """'R$ 1.234,56' (BR) ou 'US$ 1,234.56' (US). Outros países caem no BR."""
    symbol, thousands, decimal = _MONEY.get((country or "").upper(), _MONEY["BR"])
    q = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    s = f"{q:,.2f}"  # '1,234.56'
    s = s.replace(",", "\0").replace(".", decimal).replace("\0", thousands)
    return f"{symbol} {s}"
