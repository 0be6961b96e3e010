import pytest

from hevcnal.bitstream import BitReader, ParseError
from hevcnal.scaling_list_data import ScalingListData, parse_scaling_list_data

# Entries visited: 6 matrices for sizeId 0..2, matrices 0 and 3 for sizeId 3.
_ENTRIES = 6 + 6 + 6 + 2


def _pack(bits: str) -> bytes:
    bits = bits + "0" * (-len(bits) % 8)
    return int(bits, 2).to_bytes(len(bits) // 8, "big")


def test_all_predicted_with_zero_delta():
    reader = BitReader(_pack("01" * _ENTRIES))
    data = ScalingListData.from_reader(reader)
    assert reader.remaining_bits() == 0
    assert data.scaling_list_pred_mode_flag == [[0] * 6 for _ in range(4)]
    assert data.scaling_list_pred_matrix_id_delta == [[0] * 6 for _ in range(4)]
    assert all(lst == [] for row in data.scaling_list for lst in row)


def test_matrix_id_delta_is_read():
    # first entry: pred_mode 0, ue(v) "011" -> 2
    bits = "0" + "011" + "01" * (_ENTRIES - 1)
    data = parse_scaling_list_data(_pack(bits))
    assert data.scaling_list_pred_matrix_id_delta[0][0] == 2
    assert data.scaling_list_pred_matrix_id_delta[0][1] == 0


def test_explicit_list_with_zero_deltas_keeps_default():
    bits = "1" + "1" * 16 + "01" * (_ENTRIES - 1)
    data = parse_scaling_list_data(_pack(bits))
    assert data.scaling_list_pred_mode_flag[0][0] == 1
    assert data.scaling_list[0][0] == [8] * 16
    assert data.scaling_list[0][1] == []


def test_explicit_list_with_unit_deltas():
    # se(v) "010" is +1
    bits = "1" + "010" * 16 + "01" * (_ENTRIES - 1)
    data = parse_scaling_list_data(_pack(bits))
    assert data.scaling_list[0][0] == list(range(9, 25))


def test_large_size_reads_dc_coefficient():
    # sizeId 2, matrixId 0 is the 13th entry
    bits = "01" * 12 + "1" + "1" + "1" * 64 + "01" * 7
    reader = BitReader(_pack(bits))
    data = ScalingListData.from_reader(reader)
    assert data.scaling_list_dc_coef_minus8[0][0] == 0
    assert data.scaling_list[2][0] == [8] * 64
    assert len(data.scaling_list[2][0]) == 64


def test_size_id_3_skips_matrices():
    bits = "01" * 18 + "1" + "1" + "1" * 64 + "01"
    data = parse_scaling_list_data(_pack(bits))
    assert data.scaling_list_pred_mode_flag[3] == [1, 0, 0, 0, 0, 0]
    assert len(data.scaling_list[3][0]) == 64
    assert data.scaling_list[3][3] == []
    assert data.scaling_list_dc_coef_minus8[1][0] == 0


def test_coefficients_stay_in_byte_range():
    # se(v) "00101" is -2; repeated deltas wrap modulo 256
    bits = "1" + "00101" * 16 + "01" * (_ENTRIES - 1)
    data = parse_scaling_list_data(_pack(bits))
    coefs = data.scaling_list[0][0]
    assert len(coefs) == 16
    assert all(0 <= c < 256 for c in coefs)


def test_truncated_input_raises():
    with pytest.raises(ParseError):
        parse_scaling_list_data(b"\x55")
    with pytest.raises(ParseError):
        parse_scaling_list_data(b"")