from __future__ import annotations
import pandas as pd
import pytest

from brdocs.utils.config import reset_settings

# ---------- CONFIGURAÇÃO ISOLADA POR TESTE ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """
    Garante defaults (modo strict) em todo teste, sem ENV nem overrides herdados.
    """
    monkeypatch.delenv("BRDOCS_DOCUMENT_MODE", raising=False)
    monkeypatch.delenv("BRDOCS_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def cadastro_df() -> pd.DataFrame:
    return pd.DataFrame([
        {"nome": "Ana", "documento": "529.982.247-25", "cep": "01310-100", "telefone": "(11) 98765-4321", "numero": "12a"},
        {"nome": "Coop", "documento": "11222333000181", "cep": "01.310 100", "telefone": "3333-4444", "numero": "S/N"},
        {"nome": "Zé", "documento": "111.111.111-11", "cep": "1310-100", "telefone": "12345", "numero": None},
    ])
