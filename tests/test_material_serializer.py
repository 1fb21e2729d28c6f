import json

import pytest

from modtool.basic import BinaryWriter, Vector2f, Vector3f
from modtool.component_serializer import colour_u8_from_dict
from modtool.material import (
    LightingInfo,
    Material,
    MaterialFlags,
    PeInfo,
    PolygonColourInfo,
    TEVInfo,
    TEVStage,
    TexGenData,
    TextureData,
    TextureInfo,
)
from modtool.material_anim import (
    AlphaAnimInfo,
    ColourAnimInfo,
    KeyInfoF32,
    KeyInfoU8,
    TextureAnimData,
)
from modtool.material_serializer import (
    load_materials,
    material_from_dict,
    material_to_dict,
    save_materials,
)


def _enabled_material():
    pe = PeInfo(flags=2, z_mode_function=3)
    pe.alpha_comp0 = 4
    pe.alpha_ref0 = 128
    pe.blend_type = 1
    pe.blend_dst_factor = 5
    return Material(
        flags=int(MaterialFlags.IS_ENABLED | MaterialFlags.OPAQUE),
        texture_index=3,
        tev_group_id=7,
        colour_info=PolygonColourInfo(
            colour_u8_from_dict({"r": 10, "g": 20, "b": 30, "a": 40}),
            2,
            0.5,
            [ColourAnimInfo(1, KeyInfoU8(4, 1.5, 0.25), KeyInfoU8(5, 2.0, 0.0), KeyInfoU8(6, 0.0, 1.0))],
            [AlphaAnimInfo(2, KeyInfoU8(9, 0.75, 0.5))],
        ),
        lighting_info=LightingInfo(0x205, 1.0),
        pe_info=pe,
        tex_info=TextureInfo(
            1,
            Vector3f(1.0, 2.0, 3.0),
            [TexGenData(0, 1, 4, 0xFF)],
            [
                TextureData(
                    texture_attribute_index=2,
                    wrap_mode_s=1,
                    wrap_mode_t=2,
                    anim_speed=0.25,
                    scale=Vector2f(1.0, 1.0),
                    rotation=0.5,
                    scale_info=[TextureAnimData(2, KeyInfoF32(0.0, 1.0, 0.0))],
                )
            ],
        ),
    )


def _bytes(obj):
    writer = BinaryWriter()
    obj.write(writer)
    return writer.getvalue()


def test_flags_become_names():
    out = material_to_dict(_enabled_material())
    assert out["flags"] == ["IsEnabled", "Opaque"]
    assert out["tev_group_id"] == 7


def test_disabled_material_omits_detail_blocks():
    material = Material(flags=int(MaterialFlags.HIDDEN), texture_index=1)
    out = material_to_dict(material)
    assert out["flags"] == ["Hidden"]
    assert "tev_group_id" not in out
    assert "color_info" not in out


def test_enabled_round_trip():
    original = _enabled_material()
    restored = material_from_dict(json.loads(json.dumps(material_to_dict(original))))
    assert restored == original
    assert _bytes(restored) == _bytes(original)


def test_disabled_round_trip_keeps_diffuse():
    material = Material(flags=0, texture_index=-1)
    material.colour_info.diffuse_colour = colour_u8_from_dict({"r": 1, "g": 2, "b": 3, "a": 4})
    restored = material_from_dict(material_to_dict(material))
    assert restored.colour_info.diffuse_colour == material.colour_info.diffuse_colour
    assert restored.texture_index == -1
    assert _bytes(restored) == _bytes(material)


def test_disabled_material_ignores_detail_blocks():
    restored = material_from_dict({"flags": [], "tev_group_id": 9})
    assert restored.tev_group_id == 0


def test_unknown_flag_name_raises():
    with pytest.raises(ValueError):
        material_from_dict({"flags": ["NotAFlag"]})


def test_save_and_load(tmp_path):
    path = tmp_path / "materials.json"
    materials = [_enabled_material(), Material(flags=int(MaterialFlags.HIDDEN))]
    tev_infos = [TEVInfo(tev_stages=[TEVStage(unknown=1)])]
    save_materials(path, materials, tev_infos)
    loaded_materials, loaded_tevs = load_materials(path)
    assert loaded_materials == materials
    assert loaded_tevs == tev_infos
    assert [_bytes(m) for m in loaded_materials] == [_bytes(m) for m in materials]


def test_load_missing_sections_gives_empty_lists(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}", encoding="utf-8")
    assert load_materials(path) == ([], [])


def test_load_non_object_raises(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_materials(path)


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_materials(path)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_materials(tmp_path / "absent.json")