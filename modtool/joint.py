"""Skeleton joint records."""

from __future__ import annotations

from dataclasses import dataclass, field

from .basic import BinaryReader, BinaryWriter, Vector3f


@dataclass
class JointMatPoly:
    material_index: int = 0
    mesh_index: int = 0

    @classmethod
    def read(cls, reader: BinaryReader) -> JointMatPoly:
        return cls(reader.read_s16(), reader.read_s16())

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s16(self.material_index)
        writer.write_s16(self.mesh_index)


@dataclass
class Joint:
    parent_index: int = 0
    is_visible: int = 0
    min_bounds: Vector3f = field(default_factory=Vector3f)
    max_bounds: Vector3f = field(default_factory=Vector3f)
    volume_radius: float = 0.0
    scale: Vector3f = field(default_factory=Vector3f)
    rotation: Vector3f = field(default_factory=Vector3f)
    position: Vector3f = field(default_factory=Vector3f)
    linked_polygons: list[JointMatPoly] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> Joint:
        parent_index = reader.read_s32()
        is_visible = reader.read_u32()
        min_bounds = Vector3f.read(reader)
        max_bounds = Vector3f.read(reader)
        volume_radius = reader.read_f32()
        scale = Vector3f.read(reader)
        rotation = Vector3f.read(reader)
        position = Vector3f.read(reader)
        polygons = [JointMatPoly.read(reader) for _ in range(reader.read_u32())]
        return cls(
            parent_index,
            is_visible,
            min_bounds,
            max_bounds,
            volume_radius,
            scale,
            rotation,
            position,
            polygons,
        )

    def write(self, writer: BinaryWriter) -> None:
        writer.write_s32(self.parent_index)
        writer.write_u32(self.is_visible)
        self.min_bounds.write(writer)
        self.max_bounds.write(writer)
        writer.write_f32(self.volume_radius)
        self.scale.write(writer)
        self.rotation.write(writer)
        self.position.write(writer)
        writer.write_u32(len(self.linked_polygons))
        for poly in self.linked_polygons:
            poly.write(writer)