"""Binary stream helpers and the small value types shared by model chunks."""

from __future__ import annotations

import struct
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

DEFAULT_ALIGNMENT = 0x20
FLOAT_EPSILON = 1.1920928955078125e-07


def nearly_equal(a: float, b: float) -> bool:
    """Return True when two single-precision values are equal within epsilon."""
    return abs(a - b) <= FLOAT_EPSILON * max(1.0, abs(a), abs(b))


def _aligned(position: int, alignment: int) -> int:
    if alignment <= 0:
        raise ValueError(f"alignment must be positive, got {alignment}")
    return -(-position // alignment) * alignment


class BinaryReader:
    """Big-endian reader over an in-memory byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _unpack(self, fmt: str):
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))[0]

    def read_u8(self) -> int:
        return self._unpack(">B")

    def read_u16(self) -> int:
        return self._unpack(">H")

    def read_s16(self) -> int:
        return self._unpack(">h")

    def read_u32(self) -> int:
        return self._unpack(">I")

    def read_s32(self) -> int:
        return self._unpack(">i")

    def read_f32(self) -> float:
        return self._unpack(">f")

    def read_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes ({size})")
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(
                f"read of {size} bytes at offset {self._pos} runs past the end ({len(self._data)})"
            )
        out = self._data[self._pos:end]
        self._pos = end
        return out

    def align(self, alignment: int = DEFAULT_ALIGNMENT) -> None:
        target = _aligned(self._pos, alignment)
        if target > len(self._data):
            raise EOFError(f"alignment to {target} runs past the end ({len(self._data)})")
        self._pos = target

    def seek(self, position: int) -> None:
        if not 0 <= position <= len(self._data):
            raise ValueError(f"position {position} outside 0..{len(self._data)}")
        self._pos = position

    def position(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos


class BinaryWriter:
    """Big-endian writer that accumulates bytes in memory."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def _pack(self, fmt: str, value) -> None:
        try:
            self._buf += struct.pack(fmt, value)
        except struct.error as exc:
            raise ValueError(f"value {value!r} does not fit format {fmt}: {exc}") from exc

    def write_u8(self, value: int) -> None:
        self._pack(">B", value)

    def write_u16(self, value: int) -> None:
        self._pack(">H", value)

    def write_s16(self, value: int) -> None:
        self._pack(">h", value)

    def write_u32(self, value: int) -> None:
        self._pack(">I", value)

    def write_s32(self, value: int) -> None:
        self._pack(">i", value)

    def write_f32(self, value: float) -> None:
        self._pack(">f", value)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        self._buf += bytes(data)

    def align(self, alignment: int = DEFAULT_ALIGNMENT) -> None:
        self._buf += bytes(_aligned(len(self._buf), alignment) - len(self._buf))

    @contextmanager
    def chunk(self, chunk_id: int) -> Iterator[BinaryWriter]:
        """Write a chunk header, the body written inside the block, and patch its size.

        The body is padded to the default alignment; the size field counts the
        bytes after the header.
        """
        self.write_u32(chunk_id)
        size_offset = len(self._buf)
        self.write_u32(0)
        start = len(self._buf)
        yield self
        self.align()
        struct.pack_into(">I", self._buf, size_offset, len(self._buf) - start)

    def position(self) -> int:
        return len(self._buf)

    def getvalue(self) -> bytes:
        return bytes(self._buf)


@dataclass(eq=False)
class Vector2f:
    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return abs(self.x - other.x) < FLOAT_EPSILON and abs(self.y - other.y) < FLOAT_EPSILON

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g}"

    @classmethod
    def read(cls, reader: BinaryReader) -> Vector2f:
        return cls(reader.read_f32(), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_f32(self.x)
        writer.write_f32(self.y)


@dataclass
class Vector2i:
    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"{self.x} {self.y}"

    @classmethod
    def read(cls, reader: BinaryReader) -> Vector2i:
        return cls(reader.read_u32(), reader.read_u32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u32(self.x)
        writer.write_u32(self.y)


@dataclass(eq=False)
class Vector3f:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return (
            abs(self.x - other.x) < FLOAT_EPSILON
            and abs(self.y - other.y) < FLOAT_EPSILON
            and abs(self.z - other.z) < FLOAT_EPSILON
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    @classmethod
    def read(cls, reader: BinaryReader) -> Vector3f:
        return cls(reader.read_f32(), reader.read_f32(), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_f32(self.x)
        writer.write_f32(self.y)
        writer.write_f32(self.z)


@dataclass
class Vector3i:
    x: int = 0
    y: int = 0
    z: int = 0

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    @classmethod
    def read(cls, reader: BinaryReader) -> Vector3i:
        return cls(reader.read_u32(), reader.read_u32(), reader.read_u32())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_u32(self.x)
        writer.write_u32(self.y)
        writer.write_u32(self.z)


@dataclass
class ColourU8:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b} {self.a}"

    @classmethod
    def read(cls, reader: BinaryReader) -> ColourU8:
        return cls(reader.read_u8(), reader.read_u8(), reader.read_u8(), reader.read_u8())

    def write(self, writer: BinaryWriter) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            writer.write_u8(channel)


@dataclass
class ColourU16:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b} {self.a}"

    @classmethod
    def read(cls, reader: BinaryReader) -> ColourU16:
        return cls(reader.read_u16(), reader.read_u16(), reader.read_u16(), reader.read_u16())

    def write(self, writer: BinaryWriter) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            writer.write_u16(channel)


@dataclass
class Plane:
    normal: Vector3f = field(default_factory=Vector3f)
    distance: float = 0.0

    @classmethod
    def read(cls, reader: BinaryReader) -> Plane:
        return cls(Vector3f.read(reader), reader.read_f32())

    def write(self, writer: BinaryWriter) -> None:
        self.normal.write(writer)
        writer.write_f32(self.distance)


@dataclass
class NBT:
    normal: Vector3f = field(default_factory=Vector3f)
    binormal: Vector3f = field(default_factory=Vector3f)
    tangent: Vector3f = field(default_factory=Vector3f)

    @classmethod
    def read(cls, reader: BinaryReader) -> NBT:
        return cls(Vector3f.read(reader), Vector3f.read(reader), Vector3f.read(reader))

    def write(self, writer: BinaryWriter) -> None:
        self.normal.write(writer)
        self.binormal.write(writer)
        self.tangent.write(writer)


@dataclass
class Envelope:
    indices: list[int] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> Envelope:
        envelope = cls()
        for _ in range(reader.read_u16()):
            envelope.indices.append(reader.read_s16())
            envelope.weights.append(reader.read_f32())
        return envelope

    def write(self, writer: BinaryWriter) -> None:
        if len(self.indices) != len(self.weights):
            raise ValueError(
                f"envelope has {len(self.indices)} indices but {len(self.weights)} weights"
            )
        writer.write_u16(len(self.indices))
        for index, weight in zip(self.indices, self.weights):
            writer.write_s16(index)
            writer.write_f32(weight)


@dataclass
class VtxMatrix:
    index: int = 0
    has_partial_weights: bool = False

    @classmethod
    def read(cls, reader: BinaryReader) -> VtxMatrix:
        raw = reader.read_s16()
        if raw >= 0:
            return cls(raw, True)
        return cls(-1 - raw, False)

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s16(self.index if self.has_partial_weights else -1 - self.index)