"""Keyframe primitives and the animation records built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .basic import BinaryReader, BinaryWriter, nearly_equal


@dataclass(eq=False)
class KeyInfoU8:
    """Keyframe with an 8-bit time, padded to four bytes on disk."""

    time: int = 0
    value: float = 0.0
    tangent: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyInfoU8):
            return NotImplemented
        return (
            self.time == other.time
            and nearly_equal(self.value, other.value)
            and nearly_equal(self.tangent, other.tangent)
        )

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> KeyInfoU8:
        time = reader.read_u8()
        for _ in range(3):
            reader.read_u8()
        return cls(time, reader.read_f32(), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u8(self.time)
        for _ in range(3):
            writer.write_u8(0)
        writer.write_f32(self.value)
        writer.write_f32(self.tangent)


@dataclass(eq=False)
class KeyInfoF32:
    """Keyframe with a floating-point time."""

    time: float = 0.0
    value: float = 0.0
    tangent: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyInfoF32):
            return NotImplemented
        return (
            nearly_equal(self.time, other.time)
            and nearly_equal(self.value, other.value)
            and nearly_equal(self.tangent, other.tangent)
        )

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> KeyInfoF32:
        return cls(reader.read_f32(), reader.read_f32(), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_f32(self.time)
        writer.write_f32(self.value)
        writer.write_f32(self.tangent)


@dataclass(eq=False)
class KeyInfoS10:
    """Keyframe with a signed 16-bit time, padded to four bytes on disk."""

    time: int = 0
    value: float = 0.0
    tangent: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyInfoS10):
            return NotImplemented
        return (
            self.time == other.time
            and nearly_equal(self.value, other.value)
            and nearly_equal(self.tangent, other.tangent)
        )

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: BinaryReader) -> KeyInfoS10:
        time = reader.read_s16()
        reader.read_s16()
        return cls(time, reader.read_f32(), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s16(self.time)
        writer.write_s16(0)
        writer.write_f32(self.value)
        writer.write_f32(self.tangent)


@dataclass
class ColourAnimInfo:
    index: int = 0
    key_data_r: KeyInfoU8 = field(default_factory=KeyInfoU8)
    key_data_g: KeyInfoU8 = field(default_factory=KeyInfoU8)
    key_data_b: KeyInfoU8 = field(default_factory=KeyInfoU8)

    @classmethod
    def read(cls, reader: BinaryReader) -> ColourAnimInfo:
        index = reader.read_s32()
        return cls(index, KeyInfoU8.read(reader), KeyInfoU8.read(reader), KeyInfoU8.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.index)
        for key in (self.key_data_r, self.key_data_g, self.key_data_b):
            key.write(writer)


@dataclass
class AlphaAnimInfo:
    index: int = 0
    key_data: KeyInfoU8 = field(default_factory=KeyInfoU8)

    @classmethod
    def read(cls, reader: BinaryReader) -> AlphaAnimInfo:
        index = reader.read_s32()
        return cls(index, KeyInfoU8.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.index)
        self.key_data.write(writer)


@dataclass
class TextureAnimData:
    animation_frame: int = 0
    value_x: KeyInfoF32 = field(default_factory=KeyInfoF32)
    value_y: KeyInfoF32 = field(default_factory=KeyInfoF32)
    value_z: KeyInfoF32 = field(default_factory=KeyInfoF32)

    @classmethod
    def read(cls, reader: BinaryReader) -> TextureAnimData:
        frame = reader.read_s32()
        return cls(frame, KeyInfoF32.read(reader), KeyInfoF32.read(reader), KeyInfoF32.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.animation_frame)
        for key in (self.value_x, self.value_y, self.value_z):
            key.write(writer)


@dataclass
class PVWAnimInfo1S10:
    keyframe_count: int = 0
    keyframe_info: KeyInfoS10 = field(default_factory=KeyInfoS10)

    @classmethod
    def read(cls, reader: BinaryReader) -> PVWAnimInfo1S10:
        count = reader.read_s32()
        return cls(count, KeyInfoS10.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.keyframe_count)
        self.keyframe_info.write(writer)


@dataclass
class PVWAnimInfo3S10:
    keyframe_count: int = 0
    keyframe_a: KeyInfoS10 = field(default_factory=KeyInfoS10)
    keyframe_b: KeyInfoS10 = field(default_factory=KeyInfoS10)
    keyframe_c: KeyInfoS10 = field(default_factory=KeyInfoS10)

    @classmethod
    def read(cls, reader: BinaryReader) -> PVWAnimInfo3S10:
        count = reader.read_s32()
        return cls(count, KeyInfoS10.read(reader), KeyInfoS10.read(reader), KeyInfoS10.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.keyframe_count)
        for key in (self.keyframe_a, self.keyframe_b, self.keyframe_c):
            key.write(writer)