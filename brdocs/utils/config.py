from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict

from brdocs.models.document import ValidationMode

_DEFAULTS: Dict[str, str] = {
    # Logging
    "BRDOCS_LOG_LEVEL": "WARNING",
    # Validação de documentos (strict | lenient)
    "BRDOCS_DOCUMENT_MODE": "strict",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}

@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna o dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. BRDOCS_LOG_LEVEL)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = env_val.strip()
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)

def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    unknown = sorted(set(overrides or {}) - set(_DEFAULTS))
    if unknown:
        raise KeyError(f"Configuração desconhecida: {', '.join(unknown)}")
    _runtime_overrides.update({k: str(v).strip() for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]

def reset_settings() -> None:
    """Descarta todos os overrides de set_settings()."""
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]

def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' inexistente. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]

def default_mode() -> ValidationMode:
    raw = setting("BRDOCS_DOCUMENT_MODE").lower()
    try:
        return ValidationMode(raw)
    except ValueError:
        valid = ", ".join(m.value for m in ValidationMode)
        raise ValueError(f"BRDOCS_DOCUMENT_MODE inválido: '{raw}'. Use um de: {valid}") from None
