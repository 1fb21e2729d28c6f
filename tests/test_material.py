import pytest

from modtool.basic import BinaryReader, BinaryWriter, ColourU8, ColourU16, Vector2f, Vector3f
from modtool.material import (
    LightingInfo,
    LightingInfoFlags,
    Material,
    MaterialContainer,
    MaterialFlags,
    PeInfo,
    PolygonColourInfo,
    PVWCombiner,
    TEVColReg,
    TEVInfo,
    TEVStage,
    TexGenData,
    TextureData,
    TextureInfo,
    lighting_info_flags_to_string,
    material_flags_to_string,
)
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


def _encode(obj) -> bytes:
    writer = BinaryWriter()
    obj.write(writer)
    return writer.getvalue()


def _round_trip(obj):
    data = _encode(obj)
    reader = BinaryReader(data)
    result = type(obj).read(reader)
    assert reader.remaining() == 0
    return result, data


def _texture_data() -> TextureData:
    return TextureData(
        texture_attribute_index=2,
        wrap_mode_s=1,
        wrap_mode_t=-1,
        unknown3=3,
        unknown4=4,
        unknown5=5,
        unknown6=6,
        animation_factor=7,
        anim_length=30,
        anim_speed=0.1,
        scale=Vector2f(1.5, 2.5),
        rotation=0.3,
        pivot=Vector2f(0.5, 0.5),
        position=Vector2f(-1.0, 4.0),
        scale_info=[TextureAnimData(1, KeyInfoF32(0.0, 1.0, 0.0))],
        rotation_info=[],
        translation_info=[TextureAnimData(2), TextureAnimData(3, value_z=KeyInfoF32(1.0, 2.0, 3.0))],
    )


def _enabled_material() -> Material:
    colour_info = PolygonColourInfo(
        ColourU8(10, 20, 30, 40),
        12,
        0.1,
        [ColourAnimInfo(1, KeyInfoU8(1, 0.5, 0.0))],
        [AlphaAnimInfo(2, KeyInfoU8(3, 1.0, 0.25))],
    )
    pe = PeInfo(flags=1, z_mode_function=5)
    pe.alpha_comp0 = 3
    pe.blend_src_factor = 4
    return Material(
        flags=int(MaterialFlags.IS_ENABLED | MaterialFlags.OPAQUE),
        texture_index=-1,
        tev_group_id=9,
        colour_info=colour_info,
        lighting_info=LightingInfo(0x201, 0.75),
        pe_info=pe,
        tex_info=TextureInfo(1, Vector3f(1.0, 2.0, 3.0), [TexGenData(1, 2, 3, 4)], [_texture_data()]),
    )


def test_material_flags_to_string_zero_is_none():
    assert material_flags_to_string(0) == "None"


def test_material_flags_to_string_lists_names_in_order():
    flags = MaterialFlags.HIDDEN | MaterialFlags.IS_ENABLED | MaterialFlags.OPAQUE
    assert material_flags_to_string(flags) == "IsEnabled, Opaque, Hidden"


def test_lighting_flags_to_string():
    flags = LightingInfoFlags.ENABLE_COLOR0 | LightingInfoFlags.AMB_SRC_COLOR0_VTX
    assert lighting_info_flags_to_string(flags) == "EnableColor0, AmbSrcColor0Vtx"
    assert lighting_info_flags_to_string(0) == ""


def test_lighting_info_default_enables_colour0():
    assert LightingInfo().flags == LightingInfoFlags.ENABLE_COLOR0


def test_tex_gen_data_wire_bytes():
    assert _encode(TexGenData(1, 2, 3, 4)) == b"\x01\x02\x03\x04"


def test_tev_stage_writes_zero_padding_after_selectors():
    stage = TEVStage(1, 2, 3, 4, 5, 6)
    data = _encode(stage)
    assert data[:6] == bytes([1, 2, 3, 4, 5, 6])
    assert data[6:8] == b"\x00\x00"


def test_pe_info_bitfields_pack_into_words():
    pe = PeInfo()
    pe.alpha_comp0 = 0xF
    pe.alpha_ref1 = 0xFF
    assert pe.alpha_compare_function & 0xF == 0xF
    assert pe.alpha_compare_function >> 24 == 0xFF
    assert pe.alpha_ref0 == 0
    pe.blend_logic_op = 2
    assert pe.blend_mode >> 12 == 2
    assert pe.blend_type == 0


def test_pe_info_bitfield_masks_overflow():
    pe = PeInfo()
    pe.alpha_comp0 = 0x13
    assert pe.alpha_comp0 == 3
    assert pe.alpha_ref0 == 0


def test_pe_info_round_trip_with_high_bits():
    pe = PeInfo(0xFFFFFFFF, 0x80000001, 2, 0x1234)
    result, _ = _round_trip(pe)
    assert result == pe
    assert result.flags == pe.flags


def test_pvw_combiner_equality_ignores_trailing_bytes():
    assert PVWCombiner(unused=(1, 2, 3)) == PVWCombiner()
    assert PVWCombiner(op=1) != PVWCombiner()


def test_pvw_combiner_round_trip_keeps_trailing_bytes():
    combiner = PVWCombiner((1, 2, 3, 4), 5, 6, 7, 8, 9, (10, 11, 12))
    result, data = _round_trip(combiner)
    assert result.unused == (10, 11, 12)
    assert data == bytes(range(1, 13))


def test_pvw_combiner_rejects_wrong_input_count():
    with pytest.raises(ValueError):
        _encode(PVWCombiner(input_abcd=(1, 2, 3)))


def test_polygon_colour_info_round_trip_is_nearly_equal():
    info = _enabled_material().colour_info
    result, _ = _round_trip(info)
    assert result == info


def test_texture_data_round_trip():
    data = _texture_data()
    result, _ = _round_trip(data)
    assert result == data
    assert result.wrap_mode_t == -1


def test_texture_info_round_trip():
    info = _enabled_material().tex_info
    result, _ = _round_trip(info)
    assert result == info


def test_tev_info_round_trip():
    info = TEVInfo(
        tev_colour_reg_a=TEVColReg(
            ColourU16(1, 2, 3, 4),
            10,
            0.5,
            [PVWAnimInfo3S10(3, KeyInfoS10(-2, 1.0, 0.0))],
            [PVWAnimInfo1S10(1, KeyInfoS10(5, 0.5, 0.5))],
        ),
        konst_colour_b=ColourU8(9, 8, 7, 6),
        tev_stages=[TEVStage(1, 0, 0, 4, 0x1C, 0x1F, PVWCombiner(op=1), PVWCombiner(clamp=1))],
    )
    result, _ = _round_trip(info)
    assert result == info


def test_disabled_material_writes_only_header():
    material = Material(flags=int(MaterialFlags.OPAQUE), texture_index=3)
    material.colour_info.diffuse_colour = ColourU8(1, 2, 3, 4)
    material.tev_group_id = 77
    result, data = _round_trip(material)
    assert result.colour_info.diffuse_colour == ColourU8(1, 2, 3, 4)
    assert result.tev_group_id == 0
    assert data[-4:] == b"\x01\x02\x03\x04"


def test_enabled_material_round_trip_and_byte_identity():
    material = _enabled_material()
    result, data = _round_trip(material)
    assert result == material
    assert _encode(result) == data


def test_material_read_truncated_raises():
    data = _encode(_enabled_material())
    with pytest.raises(EOFError):
        Material.read(BinaryReader(data[:-1]))


def test_material_container_holds_independent_lists():
    first, second = MaterialContainer(), MaterialContainer()
    first.materials.append(Material())
    assert second.materials == []
    assert len(first.materials) == 1