from __future__ import annotations
import html
import re
from typing import Any, Dict, Iterable, Mapping, Optional

def only_digits(s: Any) -> str:
    """Remove tudo que não for dígito ASCII. Aceita números (52998224725)."""
    return re.sub(r"[^0-9]", "", "" if s is None else str(s))

def natural_language_join(items: Iterable[Any], last: str = "e", glue: str = ", ") -> str:
    """
    Junta itens com `glue` e usa `last` antes do último:
    ['a', 'b', 'c'] -> 'a, b e c'
    """
    parts = [str(i) for i in items]
    if not parts:
        return ""
    tail = parts.pop()
    if parts:
        return f"{glue.join(parts)} {last} {tail}"
    return tail

def strip_slashes(s: str) -> str:
    # '\x' -> 'x', '\\' -> '\', barra solta no fim some
    return re.sub(r"\\(.?)", r"\1", s, flags=re.DOTALL)

def sanitize_input(s: Optional[str]) -> str:
    """apara espaços, remove escapes com barra invertida e escapa HTML"""
    if s is None:
        return ""
    return html.escape(strip_slashes(str(s).strip()), quote=True)

def sanitize_mapping(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Devolve uma cópia com os valores string sanitizados.
    Demais valores são mantidos como estão.
    """
    return {k: sanitize_input(v) if isinstance(v, str) else v for k, v in (data or {}).items()}
