"""Profile, tier and level syntax (H.265 section 7.3.3)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hevcnal.bitstream import BitReader, unescape_rbsp

_NUM_COMPATIBILITY_FLAGS = 32
_MAX_SUB_LAYERS = 8


@dataclass
class ProfileInfo:
    """Profile fields shared by the general and sub-layer profile entries."""

    profile_space: int = 0
    tier_flag: int = 0
    profile_idc: int = 0
    profile_compatibility_flag: list[int] = field(
        default_factory=lambda: [0] * _NUM_COMPATIBILITY_FLAGS
    )
    progressive_source_flag: int = 0
    interlaced_source_flag: int = 0
    non_packed_constraint_flag: int = 0
    frame_only_constraint_flag: int = 0
    max_12bit_constraint_flag: int = 0
    max_10bit_constraint_flag: int = 0
    max_8bit_constraint_flag: int = 0
    max_422chroma_constraint_flag: int = 0
    max_420chroma_constraint_flag: int = 0
    max_monochrome_constraint_flag: int = 0
    intra_constraint_flag: int = 0
    one_picture_only_constraint_flag: int = 0
    lower_bit_rate_constraint_flag: int = 0
    max_14bit_constraint_flag: int = 0
    reserved_zero_33bits: int = 0
    reserved_zero_34bits: int = 0
    reserved_zero_7bits: int = 0
    reserved_zero_35bits: int = 0
    reserved_zero_43bits: int = 0
    inbld_flag: int = 0
    reserved_zero_bit: int = 0

    def _signals(self, *profiles: int) -> bool:
        return any(
            self.profile_idc == p or self.profile_compatibility_flag[p] == 1
            for p in profiles
        )

    @classmethod
    def from_reader(cls, reader: BitReader) -> "ProfileInfo":
        """Parse a profile entry; raises ParseError on truncated input."""
        info = cls()
        info.profile_space = reader.read_bits(2)
        info.tier_flag = reader.read_bits(1)
        info.profile_idc = reader.read_bits(5)
        info.profile_compatibility_flag = [
            reader.read_bits(1) for _ in range(_NUM_COMPATIBILITY_FLAGS)
        ]
        info.progressive_source_flag = reader.read_bits(1)
        info.interlaced_source_flag = reader.read_bits(1)
        info.non_packed_constraint_flag = reader.read_bits(1)
        info.frame_only_constraint_flag = reader.read_bits(1)

        if info._signals(4, 5, 6, 7, 8, 9, 10):
            info.max_12bit_constraint_flag = reader.read_bits(1)
            info.max_10bit_constraint_flag = reader.read_bits(1)
            info.max_8bit_constraint_flag = reader.read_bits(1)
            info.max_422chroma_constraint_flag = reader.read_bits(1)
            info.max_420chroma_constraint_flag = reader.read_bits(1)
            info.max_monochrome_constraint_flag = reader.read_bits(1)
            info.intra_constraint_flag = reader.read_bits(1)
            info.one_picture_only_constraint_flag = reader.read_bits(1)
            info.lower_bit_rate_constraint_flag = reader.read_bits(1)
            if info._signals(5, 9, 10):
                info.max_14bit_constraint_flag = reader.read_bits(1)
                info.reserved_zero_33bits = reader.read_bits(33)
            else:
                info.reserved_zero_34bits = reader.read_bits(34)
        elif info._signals(2):
            info.reserved_zero_7bits = reader.read_bits(7)
            info.one_picture_only_constraint_flag = reader.read_bits(1)
            info.reserved_zero_35bits = reader.read_bits(35)
        else:
            info.reserved_zero_43bits = reader.read_bits(43)

        if 1 <= info.profile_idc <= 5 or info._signals(1, 2, 3, 4, 5, 9):
            info.inbld_flag = reader.read_bits(1)
        else:
            info.reserved_zero_bit = reader.read_bits(1)
        return info


@dataclass
class ProfileTierLevel:
    """A parsed profile_tier_level() structure."""

    profile_present_flag: bool = False
    max_num_sub_layers_minus1: int = 0
    general: Optional[ProfileInfo] = None
    general_level_idc: int = 0
    sub_layer_profile_present_flag: list[int] = field(default_factory=list)
    sub_layer_level_present_flag: list[int] = field(default_factory=list)
    reserved_zero_2bits: list[int] = field(default_factory=list)
    sub_layer: list[ProfileInfo] = field(default_factory=list)
    sub_layer_level_idc: list[int] = field(default_factory=list)

    @classmethod
    def from_reader(
        cls,
        reader: BitReader,
        profile_present_flag: bool,
        max_num_sub_layers_minus1: int,
    ) -> "ProfileTierLevel":
        """Parse profile_tier_level(); raises ParseError on truncated input."""
        ptl = cls(
            profile_present_flag=bool(profile_present_flag),
            max_num_sub_layers_minus1=max_num_sub_layers_minus1,
        )
        if profile_present_flag:
            ptl.general = ProfileInfo.from_reader(reader)
        ptl.general_level_idc = reader.read_bits(8)

        for _ in range(max_num_sub_layers_minus1):
            ptl.sub_layer_profile_present_flag.append(reader.read_bits(1))
            ptl.sub_layer_level_present_flag.append(reader.read_bits(1))

        if max_num_sub_layers_minus1 > 0:
            ptl.reserved_zero_2bits = [
                reader.read_bits(2)
                for _ in range(max_num_sub_layers_minus1, _MAX_SUB_LAYERS)
            ]

        for present in ptl.sub_layer_profile_present_flag:
            if present:
                ptl.sub_layer.append(ProfileInfo.from_reader(reader))
                ptl.sub_layer_level_idc.append(reader.read_bits(8))
        return ptl


def parse_profile_info(data: bytes) -> ProfileInfo:
    """Unescape ``data`` and parse a profile entry from it."""
    return ProfileInfo.from_reader(BitReader(unescape_rbsp(data)))


def parse_profile_tier_level(
    data: bytes, profile_present_flag: bool, max_num_sub_layers_minus1: int
) -> ProfileTierLevel:
    """Unescape ``data`` and parse profile_tier_level() from it."""
    return ProfileTierLevel.from_reader(
        BitReader(unescape_rbsp(data)),
        profile_present_flag,
        max_num_sub_layers_minus1,
    )