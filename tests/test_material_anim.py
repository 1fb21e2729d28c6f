import struct

import pytest

from modtool.basic import BinaryReader, BinaryWriter
from modtool.material_anim import (
    AlphaAnimInfo,
    ColourAnimInfo,
    KeyInfoF32,
    KeyInfoS10,
    KeyInfoU8,
    PVWAnimInfo1S10,
    PVWAnimInfo3S10,
    TextureAnimData,
)


def _round_trip(obj):
    writer = BinaryWriter()
    obj.write(writer)
    data = writer.getvalue()
    reader = BinaryReader(data)
    result = type(obj).read(reader)
    assert reader.remaining() == 0
    return result, data


def test_key_info_u8_wire_layout():
    _, data = _round_trip(KeyInfoU8(5, 1.0, 0.0))
    assert data == bytes([5, 0, 0, 0]) + struct.pack(">ff", 1.0, 0.0)


def test_key_info_s10_wire_layout_negative_time():
    _, data = _round_trip(KeyInfoS10(-2, 0.5, 2.0))
    assert data == struct.pack(">hhff", -2, 0, 0.5, 2.0)


def test_key_info_f32_wire_layout():
    _, data = _round_trip(KeyInfoF32(1.5, 2.5, -3.0))
    assert data == struct.pack(">fff", 1.5, 2.5, -3.0)


@pytest.mark.parametrize(
    "obj",
    [
        KeyInfoU8(200, 0.1, -0.7),
        KeyInfoF32(3.25, 0.3, 1.0),
        KeyInfoS10(-300, 2.2, 4.4),
        ColourAnimInfo(7, KeyInfoU8(1, 0.1, 0.2), KeyInfoU8(2, 0.3, 0.4), KeyInfoU8(3, 0.5, 0.6)),
        AlphaAnimInfo(-1, KeyInfoU8(9, 1.1, 1.2)),
        TextureAnimData(4, KeyInfoF32(1, 2, 3), KeyInfoF32(4, 5, 6), KeyInfoF32(7, 8, 9)),
        PVWAnimInfo1S10(2, KeyInfoS10(10, 0.25, 0.75)),
        PVWAnimInfo3S10(3, KeyInfoS10(1, 1, 1), KeyInfoS10(2, 2, 2), KeyInfoS10(3, 3, 3)),
    ],
)
def test_round_trip(obj):
    result, _ = _round_trip(obj)
    assert result == obj


def test_padding_bytes_are_ignored_on_read():
    data = bytes([4, 0xAA, 0xBB, 0xCC]) + struct.pack(">ff", 1.0, 2.0)
    key = KeyInfoU8.read(BinaryReader(data))
    assert key == KeyInfoU8(4, 1.0, 2.0)


def test_equality_is_tolerant_for_floats():
    assert KeyInfoF32(1.0, 1.0, 1.0) == KeyInfoF32(1.0 + 1e-9, 1.0, 1.0)
    assert KeyInfoU8(1, 1.0, 0.0) != KeyInfoU8(1, 1.5, 0.0)
    assert KeyInfoS10(1, 0.0, 0.0) != KeyInfoS10(2, 0.0, 0.0)


def test_composite_sizes():
    _, colour = _round_trip(ColourAnimInfo())
    _, pvw3 = _round_trip(PVWAnimInfo3S10())
    _, tex = _round_trip(TextureAnimData())
    assert len(colour) == 4 + 3 * 12
    assert len(pvw3) == 4 + 3 * 12
    assert len(tex) == 4 + 3 * 12


def test_truncated_input_raises():
    with pytest.raises(EOFError):
        AlphaAnimInfo.read(BinaryReader(b"\x00\x00\x00\x01\x02"))


def test_out_of_range_time_rejected_on_write():
    with pytest.raises(ValueError):
        KeyInfoU8(256).write(BinaryWriter())