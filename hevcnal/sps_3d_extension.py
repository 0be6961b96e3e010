"""Sequence parameter set 3D extension syntax (H.265 section I.7.3.2.2.5)."""

from __future__ import annotations

from dataclasses import dataclass, field

from hevcnal.bitstream import BitReader, unescape_rbsp

_NUM_DEPTH_FLAGS = 2


@dataclass
class Sps3dExtension:
    """A parsed sps_3d_extension() structure.

    The per-depth flags read for both d = 0 and d = 1 are kept as lists;
    the fields that exist only for one value of d are kept as scalars.
    """

    iv_di_mc_enabled_flag: list[int] = field(default_factory=list)
    iv_mv_scal_enabled_flag: list[int] = field(default_factory=list)
    log2_ivmc_sub_pb_size_minus3: int = 0
    iv_res_pred_enabled_flag: int = 0
    depth_ref_enabled_flag: int = 0
    vsp_mc_enabled_flag: int = 0
    dbbp_enabled_flag: int = 0
    tex_mc_enabled_flag: int = 0
    log2_texmc_sub_pb_size_minus3: int = 0
    intra_contour_enabled_flag: int = 0
    intra_dc_only_wedge_enabled_flag: int = 0
    cqt_cu_part_pred_enabled_flag: int = 0
    inter_dc_only_enabled_flag: int = 0
    skip_intra_enabled_flag: int = 0

    @classmethod
    def from_reader(cls, reader: BitReader) -> "Sps3dExtension":
        """Parse sps_3d_extension(); raises ParseError on truncated input."""
        ext = cls()
        for d in range(_NUM_DEPTH_FLAGS):
            ext.iv_di_mc_enabled_flag.append(reader.read_bits(1))
            ext.iv_mv_scal_enabled_flag.append(reader.read_bits(1))
            if d == 0:
                ext.log2_ivmc_sub_pb_size_minus3 = reader.read_exp_golomb()
                ext.iv_res_pred_enabled_flag = reader.read_bits(1)
                ext.depth_ref_enabled_flag = reader.read_bits(1)
                ext.vsp_mc_enabled_flag = reader.read_bits(1)
                ext.dbbp_enabled_flag = reader.read_bits(1)
            else:
                ext.tex_mc_enabled_flag = reader.read_bits(1)
                ext.log2_texmc_sub_pb_size_minus3 = reader.read_exp_golomb()
                ext.intra_contour_enabled_flag = reader.read_bits(1)
                ext.intra_dc_only_wedge_enabled_flag = reader.read_bits(1)
                ext.cqt_cu_part_pred_enabled_flag = reader.read_bits(1)
                ext.inter_dc_only_enabled_flag = reader.read_bits(1)
                ext.skip_intra_enabled_flag = reader.read_bits(1)
        return ext


def parse_sps_3d_extension(data: bytes) -> Sps3dExtension:
    """Unescape ``data`` and parse sps_3d_extension() from it."""
    return Sps3dExtension.from_reader(BitReader(unescape_rbsp(data)))