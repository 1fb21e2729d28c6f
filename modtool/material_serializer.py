"""Dictionary (JSON) form of whole materials and the material file."""

from __future__ import annotations

import json
import os
from typing import Any

from .component_serializer import (
    colour_to_dict,
    colour_u8_from_dict,
    flags_to_names,
    lighting_info_from_dict,
    lighting_info_to_dict,
    names_to_flags,
    pe_info_from_dict,
    pe_info_to_dict,
    polygon_colour_info_from_dict,
    polygon_colour_info_to_dict,
    texture_info_from_dict,
    texture_info_to_dict,
)
from .material import MATERIAL_FLAG_NAMES, Material, TEVInfo
from .tev_serializer import tev_info_from_dict, tev_info_to_dict


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int(data: dict, key: str, current: int, bits: int, signed: bool) -> int:
    value = data.get(key)
    if not _is_number(value):
        return current
    value = int(value) & ((1 << bits) - 1)
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _object(data: dict, key: str) -> dict | None:
    value = data.get(key)
    return value if isinstance(value, dict) else None


def _objects(data: dict, key: str) -> list[dict]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def material_to_dict(material: Material) -> dict[str, Any]:
    """Describe a material; the detailed blocks appear only when it is enabled."""
    out: dict[str, Any] = {
        "flags": flags_to_names(material.flags, MATERIAL_FLAG_NAMES),
        "texture_index": material.texture_index,
        "diffuse_color": colour_to_dict(material.colour_info.diffuse_colour),
    }
    if material.is_enabled:
        out["tev_group_id"] = material.tev_group_id
        out["color_info"] = polygon_colour_info_to_dict(material.colour_info)
        out["lighting_info"] = lighting_info_to_dict(material.lighting_info)
        out["pe_info"] = pe_info_to_dict(material.pe_info)
        out["texture_info"] = texture_info_to_dict(material.tex_info)
    return out


def material_from_dict(data: dict) -> Material:
    """Build a material; raises ValueError or TypeError for malformed flags."""
    material = Material()
    if "flags" in data:
        material.flags = names_to_flags(data["flags"], MATERIAL_FLAG_NAMES)
    material.texture_index = _int(data, "texture_index", material.texture_index, 32, True)
    if (obj := _object(data, "diffuse_color")) is not None:
        material.colour_info.diffuse_colour = colour_u8_from_dict(obj)
    if material.is_enabled:
        material.tev_group_id = _int(data, "tev_group_id", material.tev_group_id, 32, False)
        if (obj := _object(data, "color_info")) is not None:
            material.colour_info = polygon_colour_info_from_dict(obj)
        if (obj := _object(data, "lighting_info")) is not None:
            material.lighting_info = lighting_info_from_dict(obj)
        if (obj := _object(data, "pe_info")) is not None:
            material.pe_info = pe_info_from_dict(obj)
        if (obj := _object(data, "texture_info")) is not None:
            material.tex_info = texture_info_from_dict(obj)
    return material


def save_materials(
    path: str | os.PathLike[str],
    materials: list[Material],
    tev_infos: list[TEVInfo],
) -> None:
    """Write materials and TEV blocks to a JSON file."""
    document = {
        "materials": [material_to_dict(material) for material in materials],
        "tev_infos": [tev_info_to_dict(info) for info in tev_infos],
    }
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=4)
        handle.write("\n")


def load_materials(path: str | os.PathLike[str]) -> tuple[list[Material], list[TEVInfo]]:
    """Read materials and TEV blocks from a JSON file.

    Raises ValueError if the file is not a JSON object.
    """
    with open(path, encoding="utf-8") as handle:
        document = json.load(handle)
    if not isinstance(document, dict):
        raise ValueError("material file must hold a JSON object")
    materials = [material_from_dict(obj) for obj in _objects(document, "materials")]
    tev_infos = [tev_info_from_dict(obj) for obj in _objects(document, "tev_infos")]
    return materials, tev_infos