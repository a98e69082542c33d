from __future__ import annotations
import logging

import pytest

from brdocs.models import DocumentType, ValidationMode
from brdocs.utils.validators_br import (
    address_number, cep, cnpj, cpf, date, date_time, document,
    is_valid_cnpj, is_valid_cpf, is_valid_document, phone, postal_code,
)

# ---------------- CPF ----------------

def test_cpf_validation():
    assert cpf("529.982.247-25") == "52998224725"  # CPF de teste amplamente usado
    assert cpf("52998224725") == "52998224725"
    assert cpf("52998224724") is None
    assert cpf("000.000.000-00") is None
    assert cpf("11111111111") is None
    assert cpf(None) is None
    assert is_valid_cpf("529.982.247-25") is True

def test_cpf_is_idempotent_on_valid_digits():
    for d in ["52998224725", "01234567890"]:
        assert cpf(cpf(d)) == cpf(d) == d

def test_cpf_strict_vs_lenient():
    assert cpf("1234567890") is None
    assert cpf("1234567890", ValidationMode.LENIENT) == "01234567890"
    assert cpf("1234567890", "lenient") == "01234567890"
    assert cpf("529982247250", ValidationMode.LENIENT) is None  # acima de 11
    assert cpf("", ValidationMode.LENIENT) is None  # vira 000... e cai em repetidos

# ---------------- CNPJ ----------------

def test_cnpj_validation():
    assert cnpj("11.222.333/0001-81") == "11222333000181"
    assert cnpj("11222333000182") is None
    assert cnpj("11.111.111/1111-11") is None  # repetido inválido
    assert is_valid_cnpj("04252011000110") is True

def test_cnpj_strict_vs_lenient():
    assert cnpj("4252011000110") is None
    assert cnpj("4252011000110", ValidationMode.LENIENT) == "04252011000110"
    assert cnpj("00000000000000", ValidationMode.LENIENT) is None
    assert cnpj("112223330001810", ValidationMode.LENIENT) is None

# ---------------- Documento ----------------

def test_document_dispatch():
    r = document("529.982.247-25")
    assert r.type == DocumentType.CPF and r.digits == "52998224725" and r.valid
    r = document("11.222.333/0001-81")
    assert r.type == DocumentType.CNPJ and r.digits == "11222333000181" and r.label == "CNPJ"
    r = document("123")
    assert r.type == DocumentType.INVALID and r.digits is None and not r.valid
    assert is_valid_document("123") is False

def test_document_lenient_prefers_cpf():
    assert document("1234567890", "lenient").type == DocumentType.CPF
    assert document("4252011000110", "lenient").type == DocumentType.CNPJ

def test_rejection_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="brdocs")
    cpf("111.111.111-11")
    assert "repetidos" in caplog.text

def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        cpf("52998224725", "relaxed")

# ---------------- Número de endereço ----------------

def test_address_number():
    assert address_number("123") == "123"
    assert address_number("123-a") == "123-A"
    assert address_number("12345 b2") == "12345 B2"
    assert address_number("S/N") == "s/n"
    assert address_number("s.n.") == "s/n"
    assert address_number("sn") == "s/n"
    assert address_number("s n") == "s/n"
    assert address_number("12 a b") is None
    assert address_number("abc") is None
    assert address_number("") is None

# ---------------- CEP ----------------

def test_cep_canonical_form():
    assert cep("01310-100") == "01310-100"
    assert cep("01310100") == "01310-100"
    assert cep("01.310-100") == "01310-100"
    assert cep("01 310 100") == "01310-100"
    assert postal_code("01310100") == "01310-100"

def test_cep_rejects():
    assert cep("1310100") is None
    assert cep("0131-0100") is None
    assert cep("01310-1000") is None
    assert cep("０1310100") is None  # dígito não ASCII

# ---------------- Telefone ----------------

@pytest.mark.parametrize("raw, expected", [
    ("(11) 98765-4321", "11 98765-4321"),
    ("+55 (11) 98765-4321", "+55 11 98765-4321"),
    ("+5511987654321", "+55 11 98765-4321"),
    ("98765-4321", "98765-4321"),
    ("3333-4444", "3333-4444"),
    ("1133334444", "11 3333-4444"),
    ("(011) 3333 4444", "011 3333-4444"),
])
def test_phone_normalization(raw, expected):
    assert phone(raw) == expected
    assert phone(expected) == expected  # ponto fixo

@pytest.mark.parametrize("raw", ["12345", "abc", "", "+55 11 98765-43210", "11 98765_4321"])
def test_phone_rejects(raw):
    assert phone(raw) is None

# ---------------- Datas ----------------

def test_date_and_date_time():
    assert date("2024-02-29") is True
    assert date("2023-02-29") is False
    assert date("2024-2-29") is False
    assert date("29/02/2024", "%d/%m/%Y") is True
    assert date("") is False
    assert date_time("2024-01-01 10:00:00") is True
    assert date_time("2024-01-01 25:00:00") is False

# ---------------- Entrada numérica ----------------

def test_numeric_input_is_accepted():
    assert cpf(52998224725) == "52998224725"
    assert cpf(1234567890, ValidationMode.LENIENT) == "01234567890"
    assert cnpj(11222333000181) == "11222333000181"
    assert document(52998224725).type == DocumentType.CPF
    assert address_number(123) == "123"
    assert cep(1310100) is None  # zero à esquerda perdido no int
    assert cep(20040002) == "20040-002"
    assert phone(33334444) == "3333-4444"
    assert date(20240101) is False
