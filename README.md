# hevcnal

Pure-Python parsers for several H.265/HEVC syntax structures. Each parser
takes a byte string, removes emulation-prevention bytes (the `03` in
`00 00 03`), and decodes the structure bit by bit into plain dataclasses.

Covered structures:

- `profile_tier_level()` and its profile information
  (`hevcnal.profile_tier_level`: `parse_profile_tier_level`,
  `parse_profile_info`, `ProfileTierLevel`, `ProfileInfo`)
- `scaling_list_data()` (`hevcnal.scaling_list_data`:
  `parse_scaling_list_data`, `ScalingListData`)
- SEI messages (`hevcnal.sei`: `parse_sei`, `SeiMessage`, `SeiType`):
  registered ITU-T T.35 user data (`SeiUserDataRegisteredItuTT35`),
  unregistered user data (`SeiUserDataUnregistered`), and a raw-bytes
  fallback for every other payload type (`SeiUnknown`)
- `sps_3d_extension()` (`hevcnal.sps_3d_extension`:
  `parse_sps_3d_extension`, `Sps3dExtension`)

## Installation

```
pip install hevcnal
```

## Usage

```python
from hevcnal.profile_tier_level import parse_profile_tier_level

data = bytes([
    0x01, 0x60, 0x00, 0x00, 0x03, 0x00, 0xb0, 0x00,
    0x00, 0x03, 0x00, 0x00, 0x03, 0x00, 0x5d, 0xac, 0x59,
])
ptl = parse_profile_tier_level(data, True, 0)
print(ptl.general.profile_idc)   # 1
print(ptl.general_level_idc)     # 93
```

SEI messages:

```python
from hevcnal.sei import parse_sei, SeiUserDataUnregistered

message = parse_sei(payload_bytes)
print(message.payload_type, message.payload_size, message.sei_type)
if isinstance(message.payload, SeiUserDataUnregistered):
    print(message.payload.uuid())   # 8-4-4-4-12 hexadecimal form
```

`SeiMessage.sei_type` is `None` for payload types not listed in `SeiType`.
If the payload type or size bytes are truncated, `parse_sei` raises; if only
the payload itself cannot be parsed (empty, too short or truncated),
`message.payload` is `None`.

Structures that sit inside a larger bitstream can be parsed from a shared
`hevcnal.bitstream.BitReader` with each class's `from_reader` method, so that
the reader's position carries over from one structure to the next:

```python
from hevcnal.bitstream import BitReader, unescape_rbsp
from hevcnal.scaling_list_data import ScalingListData

reader = BitReader(unescape_rbsp(raw))
scaling = ScalingListData.from_reader(reader)
print(reader.remaining_bits())
```

`BitReader` offers `read_bits`, `read_uint8`, `read_exp_golomb` (ue(v)),
`read_signed_exp_golomb` (se(v)) and `remaining_bits`. A buffer that ends too
early or holds a malformed Exp-Golomb code raises
`hevcnal.bitstream.ParseError`, a subclass of `ValueError`.

## What this package does not do

It parses the individual syntax structures listed above and nothing more. It
does not split a byte stream into NAL units, parse NAL unit headers, VPS, SPS,
PPS or slice headers, handle RTP packetization, keep parameter-set state
across units, or provide a command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```