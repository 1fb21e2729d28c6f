"""Dictionary (JSON) form of keyframes and material animation records."""

from __future__ import annotations

from typing import Any, Union

from .material_anim import (
    AlphaAnimInfo,
    ColourAnimInfo,
    KeyInfoF32,
    KeyInfoS10,
    KeyInfoU8,
    PVWAnimInfo1S10,
    PVWAnimInfo3S10,
    TextureAnimData,
)

KeyInfo = Union[KeyInfoU8, KeyInfoF32, KeyInfoS10]


def _wrap(value: int, bits: int, signed: bool = False) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int(data: dict, key: str, current: int, bits: int, signed: bool) -> int:
    value = data.get(key)
    return _wrap(int(value), bits, signed) if _is_number(value) else current


def _float(data: dict, key: str, current: float) -> float:
    value = data.get(key)
    return float(value) if _is_number(value) else current


def _object(data: dict, key: str) -> dict | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def key_info_to_dict(key: KeyInfo) -> dict[str, Any]:
    return {"time": key.time, "value": key.value, "tangent": key.tangent}


def key_info_u8_from_dict(data: dict) -> KeyInfoU8:
    key = KeyInfoU8()
    key.time = _int(data, "time", 0, 8, False)
    key.value = _float(data, "value", key.value)
    key.tangent = _float(data, "tangent", key.tangent)
    return key


def key_info_f32_from_dict(data: dict) -> KeyInfoF32:
    key = KeyInfoF32()
    key.time = _float(data, "time", key.time)
    key.value = _float(data, "value", key.value)
    key.tangent = _float(data, "tangent", key.tangent)
    return key


def key_info_s10_from_dict(data: dict) -> KeyInfoS10:
    key = KeyInfoS10()
    key.time = _int(data, "time", 0, 16, True)
    key.value = _float(data, "value", key.value)
    key.tangent = _float(data, "tangent", key.tangent)
    return key


_COLOUR_KEYS = (
    ("red_keyframe", "key_data_r"),
    ("green_keyframe", "key_data_g"),
    ("blue_keyframe", "key_data_b"),
)


def colour_anim_to_dict(info: ColourAnimInfo) -> dict[str, Any]:
    out: dict[str, Any] = {"index": info.index}
    for name, attr in _COLOUR_KEYS:
        out[name] = key_info_to_dict(getattr(info, attr))
    return out


def colour_anim_from_dict(data: dict) -> ColourAnimInfo:
    info = ColourAnimInfo()
    info.index = _int(data, "index", info.index, 32, True)
    for name, attr in _COLOUR_KEYS:
        if (obj := _object(data, name)) is not None:
            setattr(info, attr, key_info_u8_from_dict(obj))
    return info


def alpha_anim_to_dict(info: AlphaAnimInfo) -> dict[str, Any]:
    return {"index": info.index, "alpha_keyframe": key_info_to_dict(info.key_data)}


def alpha_anim_from_dict(data: dict) -> AlphaAnimInfo:
    info = AlphaAnimInfo()
    info.index = _int(data, "index", info.index, 32, True)
    if (obj := _object(data, "alpha_keyframe")) is not None:
        info.key_data = key_info_u8_from_dict(obj)
    return info


_TEXTURE_KEYS = (("value_x", "value_x"), ("value_y", "value_y"), ("value_z", "value_z"))


def texture_anim_to_dict(info: TextureAnimData) -> dict[str, Any]:
    out: dict[str, Any] = {"frame": info.animation_frame}
    for name, attr in _TEXTURE_KEYS:
        out[name] = key_info_to_dict(getattr(info, attr))
    return out


def texture_anim_from_dict(data: dict) -> TextureAnimData:
    info = TextureAnimData()
    info.animation_frame = _int(data, "frame", info.animation_frame, 32, True)
    for name, attr in _TEXTURE_KEYS:
        if (obj := _object(data, name)) is not None:
            setattr(info, attr, key_info_f32_from_dict(obj))
    return info


def pvw_anim1_to_dict(info: PVWAnimInfo1S10) -> dict[str, Any]:
    return {
        "keyframe_count": info.keyframe_count,
        "keyframe_info": key_info_to_dict(info.keyframe_info),
    }


def pvw_anim1_from_dict(data: dict) -> PVWAnimInfo1S10:
    info = PVWAnimInfo1S10()
    info.keyframe_count = _int(data, "keyframe_count", info.keyframe_count, 32, True)
    if (obj := _object(data, "keyframe_info")) is not None:
        info.keyframe_info = key_info_s10_from_dict(obj)
    return info


_PVW3_KEYS = (("keyframe_a", "keyframe_a"), ("keyframe_b", "keyframe_b"), ("keyframe_c", "keyframe_c"))


def pvw_anim3_to_dict(info: PVWAnimInfo3S10) -> dict[str, Any]:
    out: dict[str, Any] = {"keyframe_count": info.keyframe_count}
    for name, attr in _PVW3_KEYS:
        out[name] = key_info_to_dict(getattr(info, attr))
    return out


def pvw_anim3_from_dict(data: dict) -> PVWAnimInfo3S10:
    info = PVWAnimInfo3S10()
    info.keyframe_count = _int(data, "keyframe_count", info.keyframe_count, 32, True)
    for name, attr in _PVW3_KEYS:
        if (obj := _object(data, name)) is not None:
            setattr(info, attr, key_info_s10_from_dict(obj))
    return info