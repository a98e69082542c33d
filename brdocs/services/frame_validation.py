"""
Validação e normalização em lote sobre DataFrames (planilhas de cadastro).

Todas as funções devolvem cópias; o DataFrame de entrada não é alterado.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Optional

import pandas as pd

from brdocs.models.document import DocumentType
from brdocs.utils.format_br import format_cnpj, format_cpf
from brdocs.utils.log import get_logger
from brdocs.utils.text import sanitize_input
from brdocs.utils.validators_br import Mode, address_number, cep, cnpj, cpf, document, phone

log = get_logger(__name__)

Normalizer = Callable[[Any, Mode], Optional[str]]

def _document_digits(value: Any, mode: Mode) -> Optional[str]:
    return document(value, mode).digits

VALIDATORS: Dict[str, Normalizer] = {
    "cpf": cpf,
    "cnpj": cnpj,
    "document": _document_digits,
    "cep": lambda v, mode: cep(v),
    "phone": lambda v, mode: phone(v),
    "address_number": lambda v, mode: address_number(v),
}

def _require_column(df: pd.DataFrame, column: str) -> None:
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {', '.join(map(str, df.columns))}")

def _validator(kind: str) -> Normalizer:
    if kind not in VALIDATORS:
        raise KeyError(f"Tipo '{kind}' desconhecido. Tipos válidos: {', '.join(sorted(VALIDATORS))}")
    return VALIDATORS[kind]

def _cell(value: Any) -> Optional[str]:
    # NaN/None viram None; números (ex.: CEP lido como int) viram texto
    if value is None or (not isinstance(value, str) and pd.api.types.is_scalar(value) and pd.isna(value)):
        return None
    return str(value).strip()

def normalize_column(
    df: pd.DataFrame,
    column: str,
    kind: str,
    mode: Mode = None,
    keep_invalid: bool = True,
) -> pd.DataFrame:
    """
    Normaliza `column` com o validador `kind`.
    Células inválidas mantêm o valor original (ou viram None com keep_invalid=False);
    vazias (None/NaN/NA) viram None.
    """
    _require_column(df, column)
    fn = _validator(kind)

    def _apply(value: Any) -> Any:
        s = _cell(value)
        if s is None:
            return None
        out = fn(s, mode)
        if out is not None:
            return out
        return value if keep_invalid else None

    out = df.copy()
    # object: None precisa sobreviver em colunas de dtype string (pandas 3)
    out[column] = df[column].astype(object).map(_apply)
    return out

def validation_report(df: pd.DataFrame, columns: Dict[str, str], mode: Mode = None) -> pd.DataFrame:
    """
    Uma linha por célula inválida: row, column, kind, value.
    Células vazias (None/NaN) são ignoradas.
    """
    rows = []
    for column, kind in columns.items():
        _require_column(df, column)
        fn = _validator(kind)
        for idx, value in df[column].items():
            s = _cell(value)
            if s is None:
                continue
            if fn(s, mode) is None:
                rows.append({"row": idx, "column": column, "kind": kind, "value": value})
    report = pd.DataFrame(rows, columns=["row", "column", "kind", "value"])
    log.info("%d célula(s) inválida(s) em %d coluna(s)", len(report), len(columns))
    return report

def format_documents(df: pd.DataFrame, column: str, mode: Mode = None, prepend: bool = False) -> pd.DataFrame:
    """Formata CPF/CNPJ na coluna; vazios e inválidos ficam como estão."""
    _require_column(df, column)
    out = df.copy()

    def _apply(value: Any) -> Any:
        s = _cell(value)
        result = document(s, mode) if s is not None else None
        if result is None or not result.valid:
            return value
        if result.type is DocumentType.CPF:
            return ("CPF: " if prepend else "") + format_cpf(result.digits)
        return ("CNPJ: " if prepend else "") + format_cnpj(result.digits)

    out[column] = df[column].astype(object).map(_apply)
    return out

def sanitize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """sanitize_input em toda célula string."""
    out = df.copy()
    for column in out.columns:
        out[column] = out[column].map(lambda v: sanitize_input(v) if isinstance(v, str) else v)
    return out
