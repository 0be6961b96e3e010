"""Supplemental enhancement information messages (H.265 section 7.3.5, annex D)."""

from __future__ import annotations

import uuid as _uuid
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from hevcnal.bitstream import BitReader, ParseError, unescape_rbsp

_UUID_SIZE = 16
_EXTENSION_MARKER = 0xFF


class SeiType(IntEnum):
    """SEI payload types (H.265 annex D.2.1)."""

    buffering_period = 0
    pic_timing = 1
    pan_scan_rect = 2
    filler_payload = 3
    user_data_registered_itu_t_t35 = 4
    user_data_unregistered = 5
    recovery_point = 6
    scene_info = 9
    picture_snapshot = 15
    progressive_refinement_segment_start = 16
    progressive_refinement_segment_end = 17
    film_grain_characteristics = 19
    post_filter_hint = 22
    tone_mapping_info = 23
    frame_packing_arrangement = 45
    display_orientation = 47
    green_metadata = 56
    structure_of_pictures_info = 128
    active_parameter_sets = 129
    decoding_unit_info = 130
    temporal_sub_layer_zero_index = 131
    decoded_picture_hash = 132
    scalable_nesting = 133
    region_refresh_info = 134
    no_display = 135
    time_code = 136
    mastering_display_colour_volume = 137
    segmented_rect_frame_packing_arrangement = 138
    temporal_motion_constrained_tile_sets = 139
    chroma_resampling_filter_hint = 140
    knee_function_info = 141
    colour_remapping_info = 142
    deinterlaced_field_identification = 143
    content_light_level_info = 144
    alternative_transfer_characteristics = 147


def _read_bytes(reader: BitReader, count: int) -> bytes:
    return bytes(reader.read_uint8() for _ in range(count))


@dataclass
class SeiUserDataRegisteredItuTT35:
    """user_data_registered_itu_t_t35() payload (annex D.2.6)."""

    itu_t_t35_country_code: int = 0
    itu_t_t35_country_code_extension_byte: int = 0
    payload: bytes = b""

    @classmethod
    def from_reader(
        cls, reader: BitReader, payload_size: int
    ) -> "SeiUserDataRegisteredItuTT35":
        """Parse the payload; raises ParseError when it is empty or truncated."""
        remaining = payload_size
        if remaining == 0:
            raise ParseError("empty user_data_registered_itu_t_t35 payload")
        state = cls()
        state.itu_t_t35_country_code = reader.read_uint8()
        remaining -= 1
        if state.itu_t_t35_country_code == _EXTENSION_MARKER:
            if remaining <= 0:
                raise ParseError("missing itu_t_t35_country_code_extension_byte")
            state.itu_t_t35_country_code_extension_byte = reader.read_uint8()
            remaining -= 1
        state.payload = _read_bytes(reader, remaining)
        return state


@dataclass
class SeiUserDataUnregistered:
    """user_data_unregistered() payload (annex D.2.7)."""

    uuid_iso_iec_11578_1: int = 0
    uuid_iso_iec_11578_2: int = 0
    payload: bytes = b""

    @classmethod
    def from_reader(
        cls, reader: BitReader, payload_size: int
    ) -> "SeiUserDataUnregistered":
        """Parse the payload; raises ParseError when shorter than a UUID."""
        if payload_size < _UUID_SIZE:
            raise ParseError(
                f"user_data_unregistered payload too short: {payload_size}"
            )
        state = cls()
        state.uuid_iso_iec_11578_1 = reader.read_bits(64)
        state.uuid_iso_iec_11578_2 = reader.read_bits(64)
        state.payload = _read_bytes(reader, payload_size - _UUID_SIZE)
        return state

    def uuid(self) -> str:
        """The uuid_iso_iec_11578 field in 8-4-4-4-12 hexadecimal form."""
        value = (self.uuid_iso_iec_11578_1 << 64) | self.uuid_iso_iec_11578_2
        return str(_uuid.UUID(int=value))


@dataclass
class SeiUnknown:
    """Payload of an SEI type without a dedicated parser, kept as raw bytes."""

    payload: bytes = b""

    @classmethod
    def from_reader(cls, reader: BitReader, payload_size: int) -> "SeiUnknown":
        """Keep ``payload_size`` bytes; raises ParseError when empty or truncated."""
        if payload_size == 0:
            raise ParseError("empty SEI payload")
        return cls(payload=_read_bytes(reader, payload_size))


SeiPayload = Union[SeiUserDataRegisteredItuTT35, SeiUserDataUnregistered, SeiUnknown]

_PAYLOAD_PARSERS = {
    SeiType.user_data_registered_itu_t_t35: SeiUserDataRegisteredItuTT35,
    SeiType.user_data_unregistered: SeiUserDataUnregistered,
}


def _read_ff_coded(reader: BitReader) -> int:
    total = 0
    byte = _EXTENSION_MARKER
    while byte == _EXTENSION_MARKER:
        byte = reader.read_uint8()
        total += byte
    return total


@dataclass
class SeiMessage:
    """An sei_message(): type, size and parsed payload.

    ``payload`` is None when the payload could not be parsed.
    """

    payload_type: int = 0
    payload_size: int = 0
    payload: Optional[SeiPayload] = None

    @property
    def sei_type(self) -> Optional[SeiType]:
        """The payload type as a SeiType, or None for unlisted types."""
        try:
            return SeiType(self.payload_type)
        except ValueError:
            return None

    @classmethod
    def from_reader(cls, reader: BitReader) -> "SeiMessage":
        """Parse an SEI message; raises ParseError if type or size is truncated."""
        message = cls()
        message.payload_type = _read_ff_coded(reader)
        message.payload_size = _read_ff_coded(reader)
        parser = _PAYLOAD_PARSERS.get(message.payload_type, SeiUnknown)
        try:
            message.payload = parser.from_reader(reader, message.payload_size)
        except ParseError:
            message.payload = None
        return message


def parse_sei(data: bytes) -> SeiMessage:
    """Unescape ``data`` and parse an SEI message from it."""
    return SeiMessage.from_reader(BitReader(unescape_rbsp(data)))