"""Scaling list data syntax (H.265 section 7.3.4)."""

from __future__ import annotations

from dataclasses import dataclass, field

from hevcnal.bitstream import BitReader, unescape_rbsp

_NUM_SIZE_IDS = 4
_NUM_MATRIX_IDS = 6
_MAX_COEF_NUM = 64


def _grid(value: int = 0) -> list[list[int]]:
    return [[value] * _NUM_MATRIX_IDS for _ in range(_NUM_SIZE_IDS)]


def _empty_lists() -> list[list[list[int]]]:
    return [[[] for _ in range(_NUM_MATRIX_IDS)] for _ in range(_NUM_SIZE_IDS)]


@dataclass
class ScalingListData:
    """A parsed scaling_list_data() structure, indexed [sizeId][matrixId]."""

    scaling_list_pred_mode_flag: list[list[int]] = field(default_factory=_grid)
    scaling_list_pred_matrix_id_delta: list[list[int]] = field(default_factory=_grid)
    scaling_list_dc_coef_minus8: list[list[int]] = field(default_factory=_grid)
    scaling_list: list[list[list[int]]] = field(default_factory=_empty_lists)

    @classmethod
    def from_reader(cls, reader: BitReader) -> "ScalingListData":
        """Parse scaling_list_data(); raises ParseError on truncated input."""
        data = cls()
        for size_id in range(_NUM_SIZE_IDS):
            step = 3 if size_id == 3 else 1
            for matrix_id in range(0, _NUM_MATRIX_IDS, step):
                pred_mode = reader.read_bits(1)
                data.scaling_list_pred_mode_flag[size_id][matrix_id] = pred_mode
                if not pred_mode:
                    data.scaling_list_pred_matrix_id_delta[size_id][
                        matrix_id
                    ] = reader.read_exp_golomb()
                    continue
                next_coef = 8
                coef_num = min(_MAX_COEF_NUM, 1 << (4 + (size_id << 1)))
                if size_id > 1:
                    dc = reader.read_signed_exp_golomb()
                    data.scaling_list_dc_coef_minus8[size_id - 2][matrix_id] = dc
                    next_coef = dc + 8
                coefs = data.scaling_list[size_id][matrix_id]
                for _ in range(coef_num):
                    delta = reader.read_signed_exp_golomb()
                    next_coef = (next_coef + delta + 256) % 256
                    coefs.append(next_coef)
        return data


def parse_scaling_list_data(data: bytes) -> ScalingListData:
    """Unescape ``data`` and parse scaling_list_data() from it."""
    return ScalingListData.from_reader(BitReader(unescape_rbsp(data)))