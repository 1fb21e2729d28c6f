"""Material, lighting, texture-coordinate and TEV records of a model file."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields

from .basic import (
    BinaryReader,
    BinaryWriter,
    ColourU8,
    ColourU16,
    Vector2f,
    Vector3f,
    nearly_equal,
)
from .material_anim import (
    AlphaAnimInfo,
    ColourAnimInfo,
    PVWAnimInfo1S10,
    PVWAnimInfo3S10,
    TextureAnimData,
)

_U32_MASK = 0xFFFFFFFF


def _to_s32(value: int) -> int:
    value &= _U32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _approx_eq(self, other: object) -> bool:
    """Field-wise equality that compares floats with ``nearly_equal``."""
    if type(other) is not type(self):
        return NotImplemented
    for f in fields(self):
        a, b = getattr(self, f.name), getattr(other, f.name)
        if isinstance(a, float) or isinstance(b, float):
            if not nearly_equal(float(a), float(b)):
                return False
        elif a != b:
            return False
    return True


class _BitField:
    """Access to a run of bits inside an integer attribute."""

    def __init__(self, attr: str, shift: int, width: int) -> None:
        self._attr = attr
        self._shift = shift
        self._mask = (1 << width) - 1

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        return (getattr(obj, self._attr) >> self._shift) & self._mask

    def __set__(self, obj, value: int) -> None:
        current = getattr(obj, self._attr) & ~(self._mask << self._shift) & _U32_MASK
        setattr(obj, self._attr, current | ((int(value) & self._mask) << self._shift))


@dataclass(eq=False)
class PolygonColourInfo:
    diffuse_colour: ColourU8 = field(default_factory=ColourU8)
    anim_length: int = 0
    anim_speed: float = 0.0
    colour_anim_info: list[ColourAnimInfo] = field(default_factory=list)
    alpha_anim_info: list[AlphaAnimInfo] = field(default_factory=list)

    __eq__ = _approx_eq
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> PolygonColourInfo:
        diffuse = ColourU8.read(reader)
        anim_length = reader.read_s32()
        anim_speed = reader.read_f32()
        colours = [ColourAnimInfo.read(reader) for _ in range(reader.read_u32())]
        alphas = [AlphaAnimInfo.read(reader) for _ in range(reader.read_u32())]
        return cls(diffuse, anim_length, anim_speed, colours, alphas)

    def write(self, writer: BinaryWriter) -> None:
        self.diffuse_colour.write(writer)
        writer.write_s32(self.anim_length)
        writer.write_f32(self.anim_speed)
        writer.write_u32(len(self.colour_anim_info))
        for info in self.colour_anim_info:
            info.write(writer)
        writer.write_u32(len(self.alpha_anim_info))
        for info in self.alpha_anim_info:
            info.write(writer)


class LightingInfoFlags(enum.IntFlag):
    ENABLE_COLOR0 = 0x0001
    ENABLE_SPECULAR = 0x0002
    ENABLE_ALPHA0 = 0x0004
    UNKNOWN8 = 0x0008
    UNKNOWN10 = 0x0010
    UNKNOWN20 = 0x0020
    UNKNOWN40 = 0x0040
    UNKNOWN80 = 0x0080
    UNKNOWN100 = 0x0100
    AMB_SRC_COLOR0_VTX = 0x0200
    AMB_SRC_ALPHA0_VTX = 0x0400
    MAT_SRC_COLOR0_VTX = 0x0800
    MAT_SRC_ALPHA0_VTX = 0x1000


LIGHTING_FLAG_NAMES: tuple[tuple[int, str], ...] = (
    (LightingInfoFlags.ENABLE_COLOR0, "EnableColor0"),
    (LightingInfoFlags.ENABLE_SPECULAR, "EnableSpecular"),
    (LightingInfoFlags.ENABLE_ALPHA0, "EnableAlpha0"),
    (LightingInfoFlags.UNKNOWN8, "Unknown8"),
    (LightingInfoFlags.UNKNOWN10, "Unknown10"),
    (LightingInfoFlags.UNKNOWN20, "Unknown20"),
    (LightingInfoFlags.UNKNOWN40, "Unknown40"),
    (LightingInfoFlags.UNKNOWN80, "Unknown80"),
    (LightingInfoFlags.UNKNOWN100, "Unknown100"),
    (LightingInfoFlags.AMB_SRC_COLOR0_VTX, "AmbSrcColor0Vtx"),
    (LightingInfoFlags.AMB_SRC_ALPHA0_VTX, "AmbSrcAlpha0Vtx"),
    (LightingInfoFlags.MAT_SRC_COLOR0_VTX, "MatSrcColor0Vtx"),
    (LightingInfoFlags.MAT_SRC_ALPHA0_VTX, "MatSrcAlpha0Vtx"),
)


@dataclass(eq=False)
class LightingInfo:
    flags: int = int(LightingInfoFlags.ENABLE_COLOR0)
    unknown: float = 0.0

    __eq__ = _approx_eq
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> LightingInfo:
        return cls(reader.read_u32(), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u32(int(self.flags))
        writer.write_f32(self.unknown)


@dataclass
class PeInfo:
    """Pixel-engine state; the packed words expose their bit fields as properties."""

    flags: int = 0
    alpha_compare_function: int = 0
    z_mode_function: int = 0
    blend_mode: int = 0

    alpha_comp0 = _BitField("alpha_compare_function", 0, 4)
    alpha_ref0 = _BitField("alpha_compare_function", 4, 8)
    alpha_op = _BitField("alpha_compare_function", 16, 4)
    alpha_comp1 = _BitField("alpha_compare_function", 20, 4)
    alpha_ref1 = _BitField("alpha_compare_function", 24, 8)

    blend_type = _BitField("blend_mode", 0, 4)
    blend_src_factor = _BitField("blend_mode", 4, 4)
    blend_dst_factor = _BitField("blend_mode", 8, 4)
    blend_logic_op = _BitField("blend_mode", 12, 4)

    @classmethod
    def read(cls, reader: BinaryReader) -> PeInfo:
        return cls(*(reader.read_s32() & _U32_MASK for _ in range(4)))

    def write(self, writer: BinaryWriter) -> None:
        for value in (self.flags, self.alpha_compare_function, self.z_mode_function, self.blend_mode):
            writer.write_s32(_to_s32(value))


@dataclass
class TexGenData:
    destination_coords: int = 0
    func: int = 0
    source_param: int = 0
    tex_mtx: int = 0

    @classmethod
    def read(cls, reader: BinaryReader) -> TexGenData:
        return cls(reader.read_u8(), reader.read_u8(), reader.read_u8(), reader.read_u8())

    def write(self, writer: BinaryWriter) -> None:
        for value in (self.destination_coords, self.func, self.source_param, self.tex_mtx):
            writer.write_u8(value)


@dataclass(eq=False)
class TextureData:
    texture_attribute_index: int = 0
    wrap_mode_s: int = 0
    wrap_mode_t: int = 0
    unknown3: int = 0
    unknown4: int = 0
    unknown5: int = 0
    unknown6: int = 0
    animation_factor: int = 0
    anim_length: int = 0
    anim_speed: float = 0.0
    scale: Vector2f = field(default_factory=Vector2f)
    rotation: float = 0.0
    pivot: Vector2f = field(default_factory=Vector2f)
    position: Vector2f = field(default_factory=Vector2f)
    scale_info: list[TextureAnimData] = field(default_factory=list)
    rotation_info: list[TextureAnimData] = field(default_factory=list)
    translation_info: list[TextureAnimData] = field(default_factory=list)

    __eq__ = _approx_eq
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> TextureData:
        data = cls()
        data.texture_attribute_index = reader.read_s32()
        data.wrap_mode_s = reader.read_s16()
        data.wrap_mode_t = reader.read_s16()
        data.unknown3 = reader.read_u8()
        data.unknown4 = reader.read_u8()
        data.unknown5 = reader.read_u8()
        data.unknown6 = reader.read_u8()
        data.animation_factor = reader.read_s32()
        data.anim_length = reader.read_s32()
        data.anim_speed = reader.read_f32()
        data.scale = Vector2f.read(reader)
        data.rotation = reader.read_f32()
        data.pivot = Vector2f.read(reader)
        data.position = Vector2f.read(reader)
        data.scale_info = [TextureAnimData.read(reader) for _ in range(reader.read_u32())]
        data.rotation_info = [TextureAnimData.read(reader) for _ in range(reader.read_u32())]
        data.translation_info = [TextureAnimData.read(reader) for _ in range(reader.read_u32())]
        return data

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.texture_attribute_index)
        writer.write_s16(self.wrap_mode_s)
        writer.write_s16(self.wrap_mode_t)
        for value in (self.unknown3, self.unknown4, self.unknown5, self.unknown6):
            writer.write_u8(value)
        writer.write_s32(self.animation_factor)
        writer.write_s32(self.anim_length)
        writer.write_f32(self.anim_speed)
        self.scale.write(writer)
        writer.write_f32(self.rotation)
        self.pivot.write(writer)
        self.position.write(writer)
        for infos in (self.scale_info, self.rotation_info, self.translation_info):
            writer.write_u32(len(infos))
            for info in infos:
                info.write(writer)


@dataclass
class TextureInfo:
    use_scale: int = 0
    scale: Vector3f = field(default_factory=Vector3f)
    texture_gen_data: list[TexGenData] = field(default_factory=list)
    texture_data: list[TextureData] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> TextureInfo:
        use_scale = reader.read_s32() & _U32_MASK
        scale = Vector3f.read(reader)
        gen = [TexGenData.read(reader) for _ in range(reader.read_u32())]
        data = [TextureData.read(reader) for _ in range(reader.read_u32())]
        return cls(use_scale, scale, gen, data)

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(_to_s32(self.use_scale))
        self.scale.write(writer)
        writer.write_u32(len(self.texture_gen_data))
        for gen in self.texture_gen_data:
            gen.write(writer)
        writer.write_u32(len(self.texture_data))
        for data in self.texture_data:
            data.write(writer)


@dataclass(eq=False)
class PVWCombiner:
    """One TEV combiner; the three trailing bytes take no part in equality."""

    input_abcd: tuple[int, int, int, int] = (0, 0, 0, 0)
    op: int = 0
    bias: int = 0
    scale: int = 0
    clamp: int = 0
    out_reg: int = 0
    unused: tuple[int, int, int] = (0, 0, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PVWCombiner):
            return NotImplemented
        return (
            tuple(self.input_abcd) == tuple(other.input_abcd)
            and (self.op, self.bias, self.scale, self.clamp, self.out_reg)
            == (other.op, other.bias, other.scale, other.clamp, other.out_reg)
        )

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> PVWCombiner:
        inputs = tuple(reader.read_u8() for _ in range(4))
        op, bias, scale, clamp, out_reg = (reader.read_u8() for _ in range(5))
        unused = tuple(reader.read_u8() for _ in range(3))
        return cls(inputs, op, bias, scale, clamp, out_reg, unused)  # type: ignore[arg-type]

    def write(self, writer: BinaryWriter) -> None:
        if len(self.input_abcd) != 4 or len(self.unused) != 3:
            raise ValueError("a combiner needs four inputs and three trailing bytes")
        for value in (*self.input_abcd, self.op, self.bias, self.scale, self.clamp, self.out_reg, *self.unused):
            writer.write_u8(value)


@dataclass
class TEVStage:
    unknown: int = 0
    tex_coord_id: int = 0
    tex_map_id: int = 0
    gx_channel_id: int = 0
    k_color_sel: int = 0
    k_alpha_sel: int = 0
    tev_color_combiner: PVWCombiner = field(default_factory=PVWCombiner)
    tev_alpha_combiner: PVWCombiner = field(default_factory=PVWCombiner)

    @classmethod
    def read(cls, reader: BinaryReader) -> TEVStage:
        values = [reader.read_u8() for _ in range(6)]
        reader.read_u16()
        return cls(*values, PVWCombiner.read(reader), PVWCombiner.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        for value in (
            self.unknown,
            self.tex_coord_id,
            self.tex_map_id,
            self.gx_channel_id,
            self.k_color_sel,
            self.k_alpha_sel,
        ):
            writer.write_u8(value)
        writer.write_u16(0)
        self.tev_color_combiner.write(writer)
        self.tev_alpha_combiner.write(writer)


@dataclass(eq=False)
class TEVColReg:
    colour: ColourU16 = field(default_factory=ColourU16)
    anim_length: int = 0
    anim_speed: float = 0.0
    colour_anim_info: list[PVWAnimInfo3S10] = field(default_factory=list)
    alpha_anim_info: list[PVWAnimInfo1S10] = field(default_factory=list)

    __eq__ = _approx_eq
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> TEVColReg:
        colour = ColourU16.read(reader)
        anim_length = reader.read_s32()
        anim_speed = reader.read_f32()
        colours = [PVWAnimInfo3S10.read(reader) for _ in range(reader.read_u32())]
        alphas = [PVWAnimInfo1S10.read(reader) for _ in range(reader.read_u32())]
        return cls(colour, anim_length, anim_speed, colours, alphas)

    def write(self, writer: BinaryWriter) -> None:
        self.colour.write(writer)
        writer.write_s32(self.anim_length)
        writer.write_f32(self.anim_speed)
        writer.write_u32(len(self.colour_anim_info))
        for info in self.colour_anim_info:
            info.write(writer)
        writer.write_u32(len(self.alpha_anim_info))
        for info in self.alpha_anim_info:
            info.write(writer)


@dataclass
class TEVInfo:
    tev_colour_reg_a: TEVColReg = field(default_factory=TEVColReg)
    tev_colour_reg_b: TEVColReg = field(default_factory=TEVColReg)
    tev_colour_reg_c: TEVColReg = field(default_factory=TEVColReg)
    konst_colour_a: ColourU8 = field(default_factory=ColourU8)
    konst_colour_b: ColourU8 = field(default_factory=ColourU8)
    konst_colour_c: ColourU8 = field(default_factory=ColourU8)
    konst_colour_d: ColourU8 = field(default_factory=ColourU8)
    tev_stages: list[TEVStage] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> TEVInfo:
        regs = [TEVColReg.read(reader) for _ in range(3)]
        konsts = [ColourU8.read(reader) for _ in range(4)]
        stages = [TEVStage.read(reader) for _ in range(reader.read_u32())]
        return cls(*regs, *konsts, stages)

    def write(self, writer: BinaryWriter) -> None:
        for reg in (self.tev_colour_reg_a, self.tev_colour_reg_b, self.tev_colour_reg_c):
            reg.write(writer)
        for colour in (self.konst_colour_a, self.konst_colour_b, self.konst_colour_c, self.konst_colour_d):
            colour.write(writer)
        writer.write_u32(len(self.tev_stages))
        for stage in self.tev_stages:
            stage.write(writer)


class MaterialFlags(enum.IntFlag):
    IS_ENABLED = 0x1
    OPAQUE = 0x100
    ALPHA_CLIP = 0x200
    TRANSPARENT_BLEND = 0x400
    INVERT_SPECIAL_BLEND = 0x8000
    HIDDEN = 0x10000


MATERIAL_FLAG_NAMES: tuple[tuple[int, str], ...] = (
    (MaterialFlags.IS_ENABLED, "IsEnabled"),
    (MaterialFlags.OPAQUE, "Opaque"),
    (MaterialFlags.ALPHA_CLIP, "AlphaClip"),
    (MaterialFlags.TRANSPARENT_BLEND, "TransparentBlend"),
    (MaterialFlags.INVERT_SPECIAL_BLEND, "InvertSpecialBlend"),
    (MaterialFlags.HIDDEN, "Hidden"),
)


@dataclass
class Material:
    flags: int = 0
    texture_index: int = 0
    tev_group_id: int = 0
    colour_info: PolygonColourInfo = field(default_factory=PolygonColourInfo)
    lighting_info: LightingInfo = field(default_factory=LightingInfo)
    pe_info: PeInfo = field(default_factory=PeInfo)
    tex_info: TextureInfo = field(default_factory=TextureInfo)

    @property
    def is_enabled(self) -> bool:
        return bool(self.flags & MaterialFlags.IS_ENABLED)

    @classmethod
    def read(cls, reader: BinaryReader) -> Material:
        material = cls(reader.read_u32(), reader.read_s32())
        material.colour_info.diffuse_colour = ColourU8.read(reader)
        if material.is_enabled:
            material.tev_group_id = reader.read_u32()
            material.colour_info = PolygonColourInfo.read(reader)
            material.lighting_info = LightingInfo.read(reader)
            material.pe_info = PeInfo.read(reader)
            material.tex_info = TextureInfo.read(reader)
        return material

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u32(int(self.flags))
        writer.write_s32(self.texture_index)
        self.colour_info.diffuse_colour.write(writer)
        if self.is_enabled:
            writer.write_u32(self.tev_group_id)
            self.colour_info.write(writer)
            self.lighting_info.write(writer)
            self.pe_info.write(writer)
            self.tex_info.write(writer)


@dataclass
class MaterialContainer:
    materials: list[Material] = field(default_factory=list)
    tev_environment_info: list[TEVInfo] = field(default_factory=list)


def _join_flag_names(flags: int, table: tuple[tuple[int, str], ...]) -> str:
    return ", ".join(name for flag, name in table if flags & flag)


def material_flags_to_string(flags: int) -> str:
    """Comma-separated names of the set material flags, or "None" for zero."""
    if flags == 0:
        return "None"
    return _join_flag_names(flags, MATERIAL_FLAG_NAMES)


def lighting_info_flags_to_string(flags: int) -> str:
    """Comma-separated names of the set lighting flags."""
    return _join_flag_names(flags, LIGHTING_FLAG_NAMES)