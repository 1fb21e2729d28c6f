"""Dictionary (JSON) form of the material component records."""

from __future__ import annotations

import enum
from typing import Any, Iterable, Union

from .anim_serializer import (
    alpha_anim_from_dict,
    alpha_anim_to_dict,
    colour_anim_from_dict,
    colour_anim_to_dict,
    texture_anim_from_dict,
    texture_anim_to_dict,
)
from .basic import ColourU8, ColourU16, Vector2f, Vector3f
from .gx import (
    GXTexCoordID,
    GXTexGenSrc,
    GXTexGenType,
    GXTexMtx,
    GXTexWrapMode,
    enum_to_string,
    string_to_enum,
)
from .material import (
    LIGHTING_FLAG_NAMES,
    LightingInfo,
    PeInfo,
    PolygonColourInfo,
    TexGenData,
    TextureData,
    TextureInfo,
)

Colour = Union[ColourU8, ColourU16]
_U32_MASK = 0xFFFFFFFF


def _wrap(value: int, bits: int, signed: bool = False) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int(data: dict, key: str, current: int, bits: int = 32, signed: bool = True) -> int:
    value = data.get(key)
    return _wrap(int(value), bits, signed) if _is_number(value) else current


def _float(data: dict, key: str, current: float) -> float:
    value = data.get(key)
    return float(value) if _is_number(value) else current


def _object(data: dict, key: str) -> dict | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _objects(data: dict, key: str) -> list[dict]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _enum(data: dict, key: str, enum_type: type[enum.IntEnum], current: int, bits: int, signed: bool = False) -> int:
    value = data.get(key)
    if isinstance(value, str):
        return _wrap(string_to_enum(enum_type, value), bits, signed)
    if _is_number(value):
        return _wrap(int(value), bits, signed)
    return current


def _vec2_to_dict(vec: Vector2f) -> dict[str, float]:
    return {"x": vec.x, "y": vec.y}


def _vec2_from_dict(data: dict, key: str, current: Vector2f) -> Vector2f:
    obj = _object(data, key)
    if obj is None:
        return current
    return Vector2f(_float(obj, "x", current.x), _float(obj, "y", current.y))


def _vec3_to_dict(vec: Vector3f) -> dict[str, float]:
    return {"x": vec.x, "y": vec.y, "z": vec.z}


def _vec3_from_dict(data: dict, key: str, current: Vector3f) -> Vector3f:
    obj = _object(data, key)
    if obj is None:
        return current
    return Vector3f(_float(obj, "x", current.x), _float(obj, "y", current.y), _float(obj, "z", current.z))


def flags_to_names(flags: int, names: Iterable[tuple[int, str]]) -> list[str | int]:
    """Names of the set flags; bits without a name follow as one integer."""
    table = list(names)
    result: list[str | int] = [name for flag, name in table if flags & flag]
    known = 0
    for flag, _ in table:
        known |= int(flag)
    leftover = int(flags) & ~known & _U32_MASK
    if leftover:
        result.append(leftover)
    return result


def names_to_flags(value: Any, names: Iterable[tuple[int, str]]) -> int:
    """Combine flag names (or raw integers) into a flag word.

    Raises ValueError for an unknown name and TypeError for a value of the
    wrong kind.
    """
    lookup = {name: int(flag) for flag, name in names}
    if isinstance(value, bool):
        raise TypeError("flags cannot be a boolean")
    if isinstance(value, int):
        return value & _U32_MASK
    items = [value] if isinstance(value, str) else value
    if not isinstance(items, (list, tuple)):
        raise TypeError(f"flags must be a name, an integer or a list, not {type(value).__name__}")
    flags = 0
    for item in items:
        if isinstance(item, str):
            if item not in lookup:
                raise ValueError(f"unknown flag name {item!r}")
            flags |= lookup[item]
        elif isinstance(item, int) and not isinstance(item, bool):
            flags |= item & _U32_MASK
        else:
            raise TypeError(f"flag entry {item!r} is neither a name nor an integer")
    return flags


def colour_to_dict(colour: Colour) -> dict[str, int]:
    return {"r": colour.r, "g": colour.g, "b": colour.b, "a": colour.a}


def _colour_from_dict(data: dict, colour: Colour, bits: int) -> Colour:
    for channel in ("r", "g", "b", "a"):
        setattr(colour, channel, _int(data, channel, getattr(colour, channel), bits, False))
    return colour


def colour_u8_from_dict(data: dict) -> ColourU8:
    return _colour_from_dict(data, ColourU8(), 8)  # type: ignore[return-value]


def colour_u16_from_dict(data: dict) -> ColourU16:
    return _colour_from_dict(data, ColourU16(), 16)  # type: ignore[return-value]


def polygon_colour_info_to_dict(info: PolygonColourInfo) -> dict[str, Any]:
    return {
        "diffuse_color": colour_to_dict(info.diffuse_colour),
        "anim_length": info.anim_length,
        "anim_speed": info.anim_speed,
        "color_animations": [colour_anim_to_dict(anim) for anim in info.colour_anim_info],
        "alpha_animations": [alpha_anim_to_dict(anim) for anim in info.alpha_anim_info],
    }


def polygon_colour_info_from_dict(data: dict) -> PolygonColourInfo:
    info = PolygonColourInfo()
    if (colour := _object(data, "diffuse_color")) is not None:
        info.diffuse_colour = colour_u8_from_dict(colour)
    info.anim_length = _int(data, "anim_length", info.anim_length)
    info.anim_speed = _float(data, "anim_speed", info.anim_speed)
    info.colour_anim_info = [colour_anim_from_dict(obj) for obj in _objects(data, "color_animations")]
    info.alpha_anim_info = [alpha_anim_from_dict(obj) for obj in _objects(data, "alpha_animations")]
    return info


def lighting_info_to_dict(info: LightingInfo) -> dict[str, Any]:
    return {"flags": flags_to_names(info.flags, LIGHTING_FLAG_NAMES), "unknown": info.unknown}


def lighting_info_from_dict(data: dict) -> LightingInfo:
    info = LightingInfo()
    if "flags" in data:
        info.flags = names_to_flags(data["flags"], LIGHTING_FLAG_NAMES)
    info.unknown = _float(data, "unknown", info.unknown)
    return info


_ALPHA_COMPARE_KEYS = (
    ("comp0", "alpha_comp0"),
    ("ref0", "alpha_ref0"),
    ("op", "alpha_op"),
    ("comp1", "alpha_comp1"),
    ("ref1", "alpha_ref1"),
)

_BLEND_KEYS = (
    ("type", "blend_type"),
    ("src_factor", "blend_src_factor"),
    ("dst_factor", "blend_dst_factor"),
    ("logic_op", "blend_logic_op"),
)


def pe_info_to_dict(info: PeInfo) -> dict[str, Any]:
    return {
        "flags": info.flags,
        "alpha_compare_function": {key: getattr(info, attr) for key, attr in _ALPHA_COMPARE_KEYS},
        "z_mode_function": info.z_mode_function,
        "blend_mode": {key: getattr(info, attr) for key, attr in _BLEND_KEYS},
    }


def pe_info_from_dict(data: dict) -> PeInfo:
    info = PeInfo()
    info.flags = _int(data, "flags", info.flags, 32, False)
    if (obj := _object(data, "alpha_compare_function")) is not None:
        for key, attr in _ALPHA_COMPARE_KEYS:
            setattr(info, attr, _int(obj, key, getattr(info, attr), 32, False))
    info.z_mode_function = _int(data, "z_mode_function", info.z_mode_function, 32, False)
    if (obj := _object(data, "blend_mode")) is not None:
        for key, attr in _BLEND_KEYS:
            setattr(info, attr, _int(obj, key, getattr(info, attr), 32, False))
    return info


_TEX_GEN_FIELDS = (
    ("destination_coords", "destination_coords", GXTexCoordID),
    ("func", "func", GXTexGenType),
    ("source_param", "source_param", GXTexGenSrc),
    ("texture_mtx", "tex_mtx", GXTexMtx),
)


def tex_gen_data_to_dict(info: TexGenData) -> dict[str, str]:
    return {key: enum_to_string(kind, getattr(info, attr)) for key, attr, kind in _TEX_GEN_FIELDS}


def tex_gen_data_from_dict(data: dict) -> TexGenData:
    info = TexGenData()
    for key, attr, kind in _TEX_GEN_FIELDS:
        setattr(info, attr, _enum(data, key, kind, getattr(info, attr), 8))
    return info


_TEXTURE_ANIM_LISTS = (
    ("scale_animations", "scale_info"),
    ("rotation_animations", "rotation_info"),
    ("translation_animations", "translation_info"),
)


def texture_data_to_dict(info: TextureData) -> dict[str, Any]:
    out: dict[str, Any] = {
        "texture_attr_idx": info.texture_attribute_index,
        "wrap_mode_s": enum_to_string(GXTexWrapMode, info.wrap_mode_s),
        "wrap_mode_t": enum_to_string(GXTexWrapMode, info.wrap_mode_t),
        "unknown3": info.unknown3,
        "unknown4": info.unknown4,
        "unknown5": info.unknown5,
        "unknown6": info.unknown6,
        "animation_factor": info.animation_factor,
        "anim_length": info.anim_length,
        "anim_speed": info.anim_speed,
        "scale": _vec2_to_dict(info.scale),
        "rotation": info.rotation,
        "pivot": _vec2_to_dict(info.pivot),
        "position": _vec2_to_dict(info.position),
    }
    for key, attr in _TEXTURE_ANIM_LISTS:
        out[key] = [texture_anim_to_dict(anim) for anim in getattr(info, attr)]
    return out


def texture_data_from_dict(data: dict) -> TextureData:
    info = TextureData()
    info.texture_attribute_index = _int(data, "texture_attr_idx", info.texture_attribute_index)
    info.wrap_mode_s = _enum(data, "wrap_mode_s", GXTexWrapMode, info.wrap_mode_s, 16, True)
    info.wrap_mode_t = _enum(data, "wrap_mode_t", GXTexWrapMode, info.wrap_mode_t, 16, True)
    for key in ("unknown3", "unknown4", "unknown5", "unknown6"):
        setattr(info, key, _int(data, key, getattr(info, key), 8, False))
    info.animation_factor = _int(data, "animation_factor", info.animation_factor)
    info.anim_length = _int(data, "anim_length", info.anim_length)
    info.anim_speed = _float(data, "anim_speed", info.anim_speed)
    info.scale = _vec2_from_dict(data, "scale", info.scale)
    info.rotation = _float(data, "rotation", info.rotation)
    info.pivot = _vec2_from_dict(data, "pivot", info.pivot)
    info.position = _vec2_from_dict(data, "position", info.position)
    for key, attr in _TEXTURE_ANIM_LISTS:
        setattr(info, attr, [texture_anim_from_dict(obj) for obj in _objects(data, key)])
    return info


def texture_info_to_dict(info: TextureInfo) -> dict[str, Any]:
    return {
        "use_scale": info.use_scale,
        "scale": _vec3_to_dict(info.scale),
        "texture_gen_data": [tex_gen_data_to_dict(gen) for gen in info.texture_gen_data],
        "texture_data": [texture_data_to_dict(tex) for tex in info.texture_data],
    }


def texture_info_from_dict(data: dict) -> TextureInfo:
    info = TextureInfo()
    info.use_scale = _int(data, "use_scale", info.use_scale, 32, False)
    info.scale = _vec3_from_dict(data, "scale", info.scale)
    info.texture_gen_data = [tex_gen_data_from_dict(obj) for obj in _objects(data, "texture_gen_data")]
    info.texture_data = [texture_data_from_dict(obj) for obj in _objects(data, "texture_data")]
    return info