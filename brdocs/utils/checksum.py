"""
Algoritmos de dígito verificador.

Recebem uma sequência numérica (str de dígitos ou int não negativo) e
devolvem inteiros; não fazem validação de documento, só a conta.
"""
from __future__ import annotations
import re
from typing import Union

Number = Union[str, int]

_DIGITS = re.compile(r"[0-9]+")

def _digits(number: Number) -> str:
    s = str(number)
    if isinstance(number, bool) or not _DIGITS.fullmatch(s):
        raise ValueError(f"Esperada sequência numérica, recebido {number!r}")
    return s

def luhn(number: Number) -> int:
    """
    Luhn (módulo 10).

    Do dígito menos significativo para o mais significativo, dobra os de
    índice par; os resultados são concatenados, seus dígitos somados e o
    DV é (soma * 9) % 10.
    """
    checksum = "".join(
        str(int(d) * 2) if i % 2 == 0 else d
        for i, d in enumerate(reversed(_digits(number)))
    )
    return sum(int(c) for c in checksum) * 9 % 10

def mod11_pre(number: Number, base: int = 9) -> int:
    """
    Soma ponderada do módulo 11, sem aplicar o módulo.

    Pesos cíclicos 2..base a partir do dígito menos significativo.
    Útil quando é preciso mexer na soma antes do '% 11'.
    """
    if base < 2:
        raise ValueError(f"base deve ser >= 2, recebido {base}")
    checksum = 0
    factor = 2
    for d in reversed(_digits(number)):
        checksum += int(d) * factor
        factor += 1
        if factor > base:
            factor = 2
    return checksum

def mod11(number: Number, base: int = 9) -> int:
    """
    Módulo 11 da soma ponderada.

    Pode exigir pós-tratamento para os resultados 0, 1 e 10.
    """
    return mod11_pre(number, base) % 11
