from __future__ import annotations
import pytest

from brdocs.utils.checksum import luhn, mod11, mod11_pre

def test_luhn_known_values():
    assert luhn("7992739871") == 3
    assert luhn(7992739871) == 3
    assert luhn("0") == 0

def test_mod11_pre_cycles_weights_up_to_base():
    assert mod11_pre("12") == 2 * 2 + 1 * 3
    # base=3: pesos 2,3,2,3
    assert mod11_pre("1111", base=3) == 10
    assert mod11_pre("112223330001") == 102

def test_mod11_is_pre_sum_modulo_11():
    assert mod11("112223330001") == 3
    assert mod11("1122233300018") == 120 % 11

@pytest.mark.parametrize("bad", ["", "12a", "-5", -5, "١٢"])
def test_non_numeric_input_raises(bad):
    with pytest.raises(ValueError):
        luhn(bad)
    with pytest.raises(ValueError):
        mod11(bad)

def test_invalid_base():
    with pytest.raises(ValueError):
        mod11_pre("123", base=1)
