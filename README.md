# modtool

A library for the data records inside MOD model files. It reads and writes
the big-endian binary layout of the shared building blocks, joints,
materials and TEV (texture environment) blocks, and turns materials into
editable JSON and back.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `modtool.basic`: `BinaryReader` and `BinaryWriter` over in-memory bytes
  (big-endian `u8`/`u16`/`s16`/`u32`/`s32`/`f32`, raw bytes, alignment to
  0x20 by default, and `BinaryWriter.chunk(chunk_id)`, a context manager
  that writes a chunk header, pads the body and patches in its size). Also
  the small records `Vector2f`, `Vector2i`, `Vector3f`, `Vector3i`,
  `ColourU8`, `ColourU16`, `Plane`, `NBT`, `Envelope`, `VtxMatrix`, and
  `nearly_equal(a, b)` for comparing single-precision values.
- `modtool.joint`: `Joint` and `JointMatPoly`.
- `modtool.gx`: the GX enumerations (`GXTexCoordID`, `GXTexMapID`,
  `GXChannelID`, `GXTevKColorSel`, `GXTevKAlphaSel`, `GXTexMtx`,
  `GXTexGenSrc`, `GXTexGenType`, `GXTevColorArg`, `GXTexWrapMode`) with
  `enum_to_string` and `string_to_enum`.
- `modtool.material_anim`: keyframes (`KeyInfoU8`, `KeyInfoF32`,
  `KeyInfoS10`) and the animation records `ColourAnimInfo`,
  `AlphaAnimInfo`, `TextureAnimData`, `PVWAnimInfo1S10`, `PVWAnimInfo3S10`.
- `modtool.material`: `Material`, `PolygonColourInfo`, `LightingInfo`,
  `PeInfo`, `TexGenData`, `TextureData`, `TextureInfo`, `PVWCombiner`,
  `TEVStage`, `TEVColReg`, `TEVInfo`, `MaterialContainer`, the flag sets
  `MaterialFlags` and `LightingInfoFlags`, and
  `material_flags_to_string` / `lighting_info_flags_to_string`.
- `modtool.anim_serializer`, `modtool.component_serializer`,
  `modtool.tev_serializer`: `*_to_dict` / `*_from_dict` converters for each
  record. Enumerated values are written by name; flags as lists of names.
- `modtool.material_serializer`: `material_to_dict`, `material_from_dict`,
  and `save_materials` / `load_materials` for the JSON material file.

Every binary record has a `read(reader)` class method and a
`write(writer)` method. Reading past the end of the data raises `EOFError`;
writing a value that does not fit its field raises `ValueError`.

## Examples

```python
from modtool.basic import BinaryReader, BinaryWriter, Vector3f

writer = BinaryWriter()
Vector3f(1.0, 2.0, 3.0).write(writer)
data = writer.getvalue()

point = Vector3f.read(BinaryReader(data))
```

```python
from modtool.gx import GXTexWrapMode, enum_to_string, string_to_enum

enum_to_string(GXTexWrapMode, 1)             # "GX_REPEAT"
string_to_enum(GXTexWrapMode, "GX_MIRROR")   # 2
```

Exporting and re-importing materials:

```python
from modtool.material_serializer import save_materials, load_materials

save_materials("materials.json", materials, tev_infos)
materials, tev_infos = load_materials("materials.json")
```

`load_materials` raises `ValueError` if the file does not hold a JSON
object, or if a flag name is unknown.

## What it does not do

- It has no records for meshes, display lists, textures or collision data,
  and cannot decode display lists into triangles.
- It does not load or write a whole model file; it works on the individual
  records, and the caller positions the reader and writer.
- It has no command-line tool or interactive shell.