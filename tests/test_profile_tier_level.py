import pytest

from hevcnal.bitstream import BitReader, ParseError
from hevcnal.profile_tier_level import (
    ProfileInfo,
    ProfileTierLevel,
    parse_profile_info,
    parse_profile_tier_level,
)

SAMPLE = bytes(
    [
        0x01, 0x60, 0x00, 0x00, 0x03, 0x00, 0xB0, 0x00,
        0x00, 0x03, 0x00, 0x00, 0x03, 0x00, 0x5D, 0xAC,
        0x59,
    ]
)

STANDARD_2018 = bytes(
    [
        0x01, 0x60, 0x00, 0x00, 0x00, 0x80, 0x00, 0x00,
        0x00, 0x00, 0x00, 0xBA, 0x00, 0x00, 0x2C, 0x09,
    ]
)

EXPECTED_COMPAT = [0, 1, 1] + [0] * 29


def _assert_zero_constraints(general):
    for name in (
        "max_12bit_constraint_flag",
        "max_10bit_constraint_flag",
        "max_8bit_constraint_flag",
        "max_422chroma_constraint_flag",
        "max_420chroma_constraint_flag",
        "max_monochrome_constraint_flag",
        "intra_constraint_flag",
        "one_picture_only_constraint_flag",
        "lower_bit_rate_constraint_flag",
        "max_14bit_constraint_flag",
        "reserved_zero_33bits",
        "reserved_zero_34bits",
        "reserved_zero_43bits",
        "inbld_flag",
        "reserved_zero_bit",
    ):
        assert getattr(general, name) == 0, name


def test_sample_value():
    ptls = parse_profile_tier_level(SAMPLE, True, 0)
    general = ptls.general
    assert general.profile_space == 0
    assert general.tier_flag == 0
    assert general.profile_idc == 1
    assert general.profile_compatibility_flag == EXPECTED_COMPAT
    assert general.progressive_source_flag == 1
    assert general.interlaced_source_flag == 0
    assert general.non_packed_constraint_flag == 1
    assert general.frame_only_constraint_flag == 1
    _assert_zero_constraints(general)
    assert ptls.general_level_idc == 93
    assert ptls.sub_layer_profile_present_flag == []
    assert ptls.sub_layer_level_present_flag == []
    assert ptls.reserved_zero_2bits == []
    assert ptls.sub_layer == []


def test_022018_standard():
    ptls = parse_profile_tier_level(STANDARD_2018, True, 0)
    general = ptls.general
    assert general.profile_space == 0
    assert general.tier_flag == 0
    assert general.profile_idc == 1
    assert general.profile_compatibility_flag == EXPECTED_COMPAT
    assert general.progressive_source_flag == 1
    assert general.interlaced_source_flag == 0
    assert general.non_packed_constraint_flag == 0
    assert general.frame_only_constraint_flag == 0
    _assert_zero_constraints(general)
    assert ptls.general_level_idc == 186
    assert ptls.sub_layer_profile_present_flag == []
    assert ptls.sub_layer_level_present_flag == []
    assert ptls.reserved_zero_2bits == []
    assert ptls.sub_layer == []


def test_parse_profile_info_matches_general():
    info = parse_profile_info(SAMPLE)
    ptls = parse_profile_tier_level(SAMPLE, True, 0)
    assert info == ptls.general


def test_profile_info_from_reader_length():
    reader = BitReader(STANDARD_2018)
    ProfileInfo.from_reader(reader)
    assert reader.remaining_bits() == len(STANDARD_2018) * 8 - 88


def test_no_profile_present():
    ptls = parse_profile_tier_level(bytes([0x5D]), False, 0)
    assert ptls.general is None
    assert ptls.general_level_idc == 93
    assert ptls.profile_present_flag is False


def test_sub_layers_without_profiles():
    ptls = parse_profile_tier_level(bytes([0x5D, 0x00, 0x00]), False, 1)
    assert ptls.general_level_idc == 93
    assert ptls.sub_layer_profile_present_flag == [0]
    assert ptls.sub_layer_level_present_flag == [0]
    assert ptls.reserved_zero_2bits == [0] * 7
    assert ptls.sub_layer == []
    assert ptls.sub_layer_level_idc == []


def test_truncated_input_raises():
    with pytest.raises(ParseError):
        parse_profile_tier_level(SAMPLE[:10], True, 0)


def test_truncated_sub_layers_raise():
    with pytest.raises(ParseError):
        parse_profile_tier_level(bytes([0x5D, 0x00]), False, 1)


def test_truncated_profile_info_raises():
    with pytest.raises(ParseError):
        parse_profile_info(bytes([0x01, 0x60]))