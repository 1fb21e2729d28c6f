"""Dictionary (JSON) form of TEV combiners, stages, colour registers and blocks."""

from __future__ import annotations

import enum
from typing import Any

from .anim_serializer import (
    pvw_anim1_from_dict,
    pvw_anim1_to_dict,
    pvw_anim3_from_dict,
    pvw_anim3_to_dict,
)
from .component_serializer import colour_to_dict, colour_u8_from_dict, colour_u16_from_dict
from .gx import (
    GXChannelID,
    GXTevColorArg,
    GXTevKAlphaSel,
    GXTevKColorSel,
    GXTexCoordID,
    GXTexMapID,
    enum_to_string,
    string_to_enum,
)
from .material import PVWCombiner, TEVColReg, TEVInfo, TEVStage

_INPUT_KEYS = ("input_a", "input_b", "input_c", "input_d")
_COMBINER_BYTES = ("op", "bias", "scale", "clamp", "out_reg")
_UNUSED_KEYS = ("unused0", "unused1", "unused2")

_STAGE_ENUMS: tuple[tuple[str, type[enum.IntEnum]], ...] = (
    ("tex_coord_id", GXTexCoordID),
    ("tex_map_id", GXTexMapID),
    ("gx_channel_id", GXChannelID),
    ("k_color_sel", GXTevKColorSel),
    ("k_alpha_sel", GXTevKAlphaSel),
)

_REG_KEYS = ("tev_colour_reg_a", "tev_colour_reg_b", "tev_colour_reg_c")
_KONST_KEYS = ("konst_colour_a", "konst_colour_b", "konst_colour_c", "konst_colour_d")


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


def _enum(data: dict, key: str, enum_type: type[enum.IntEnum], current: int, bits: int = 8) -> int:
    value = data.get(key)
    if isinstance(value, str):
        return _wrap(string_to_enum(enum_type, value), bits)
    if _is_number(value):
        return _wrap(int(value), bits)
    return current


def combiner_to_dict(combiner: PVWCombiner) -> dict[str, Any]:
    out: dict[str, Any] = {
        key: enum_to_string(GXTevColorArg, value) for key, value in zip(_INPUT_KEYS, combiner.input_abcd)
    }
    for key in _COMBINER_BYTES:
        out[key] = getattr(combiner, key)
    for key, value in zip(_UNUSED_KEYS, combiner.unused):
        out[key] = value
    return out


def combiner_from_dict(data: dict) -> PVWCombiner:
    combiner = PVWCombiner()
    combiner.input_abcd = tuple(  # type: ignore[assignment]
        _enum(data, key, GXTevColorArg, current) for key, current in zip(_INPUT_KEYS, combiner.input_abcd)
    )
    for key in _COMBINER_BYTES:
        setattr(combiner, key, _int(data, key, getattr(combiner, key), 8, False))
    combiner.unused = tuple(  # type: ignore[assignment]
        _int(data, key, current, 8, False) for key, current in zip(_UNUSED_KEYS, combiner.unused)
    )
    return combiner


def tev_stage_to_dict(stage: TEVStage) -> dict[str, Any]:
    out: dict[str, Any] = {"unknown": stage.unknown}
    for key, kind in _STAGE_ENUMS:
        out[key] = enum_to_string(kind, getattr(stage, key))
    out["tev_color_combiner"] = combiner_to_dict(stage.tev_color_combiner)
    out["tev_alpha_combiner"] = combiner_to_dict(stage.tev_alpha_combiner)
    return out


def tev_stage_from_dict(data: dict) -> TEVStage:
    stage = TEVStage()
    stage.unknown = _int(data, "unknown", stage.unknown, 8, False)
    for key, kind in _STAGE_ENUMS:
        setattr(stage, key, _enum(data, key, kind, getattr(stage, key)))
    if (obj := _object(data, "tev_color_combiner")) is not None:
        stage.tev_color_combiner = combiner_from_dict(obj)
    if (obj := _object(data, "tev_alpha_combiner")) is not None:
        stage.tev_alpha_combiner = combiner_from_dict(obj)
    return stage


def tev_col_reg_to_dict(reg: TEVColReg) -> dict[str, Any]:
    return {
        "colour": colour_to_dict(reg.colour),
        "anim_length": reg.anim_length,
        "anim_speed": reg.anim_speed,
        "color_anim_info": [pvw_anim3_to_dict(anim) for anim in reg.colour_anim_info],
        "alpha_anim_info": [pvw_anim1_to_dict(anim) for anim in reg.alpha_anim_info],
    }


def tev_col_reg_from_dict(data: dict) -> TEVColReg:
    reg = TEVColReg()
    if (obj := _object(data, "colour")) is not None:
        reg.colour = colour_u16_from_dict(obj)
    reg.anim_length = _int(data, "anim_length", reg.anim_length)
    reg.anim_speed = _float(data, "anim_speed", reg.anim_speed)
    reg.colour_anim_info = [pvw_anim3_from_dict(obj) for obj in _objects(data, "color_anim_info")]
    reg.alpha_anim_info = [pvw_anim1_from_dict(obj) for obj in _objects(data, "alpha_anim_info")]
    return reg


def tev_info_to_dict(info: TEVInfo) -> dict[str, Any]:
    out: dict[str, Any] = {key: tev_col_reg_to_dict(getattr(info, key)) for key in _REG_KEYS}
    for key in _KONST_KEYS:
        out[key] = colour_to_dict(getattr(info, key))
    out["tev_stages"] = [tev_stage_to_dict(stage) for stage in info.tev_stages]
    return out


def tev_info_from_dict(data: dict) -> TEVInfo:
    info = TEVInfo()
    for key in _REG_KEYS:
        if (obj := _object(data, key)) is not None:
            setattr(info, key, tev_col_reg_from_dict(obj))
    for key in _KONST_KEYS:
        if (obj := _object(data, key)) is not None:
            setattr(info, key, colour_u8_from_dict(obj))
    info.tev_stages = [tev_stage_from_dict(obj) for obj in _objects(data, "tev_stages")]
    return info