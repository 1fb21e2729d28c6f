"""GX graphics enumerations and their text forms."""

from __future__ import annotations

import enum
import re

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


class GXTexCoordID(enum.IntEnum):
    GX_TEXCOORD0 = 0x0
    GX_TEXCOORD1 = 1
    GX_TEXCOORD2 = 2
    GX_TEXCOORD3 = 3
    GX_TEXCOORD4 = 4
    GX_TEXCOORD5 = 5
    GX_TEXCOORD6 = 6
    GX_TEXCOORD7 = 7
    GX_MAX_TEXCOORD = 8
    GX_TEXCOORD_NULL = 0xFF


class GXTexMapID(enum.IntEnum):
    GX_TEXMAP0 = 0
    GX_TEXMAP1 = 1
    GX_TEXMAP2 = 2
    GX_TEXMAP3 = 3
    GX_TEXMAP4 = 4
    GX_TEXMAP5 = 5
    GX_TEXMAP6 = 6
    GX_TEXMAP7 = 7
    GX_MAX_TEXMAP = 8
    GX_TEXMAP_NULL = 0xFF
    GX_TEX_DISABLE = 0x100


class GXChannelID(enum.IntEnum):
    GX_COLOR0 = 0
    GX_COLOR1 = 1
    GX_ALPHA0 = 2
    GX_ALPHA1 = 3
    GX_COLOR0A0 = 4
    GX_COLOR1A1 = 5
    GX_COLOR_ZERO = 6
    GX_ALPHA_BUMP = 7
    GX_ALPHA_BUMPN = 8
    GX_COLOR_NULL = 0xFF


class GXTevKColorSel(enum.IntEnum):
    GX_TEV_KCSEL_1 = 0x00
    GX_TEV_KCSEL_7_8 = 0x01
    GX_TEV_KCSEL_3_4 = 0x02
    GX_TEV_KCSEL_5_8 = 0x03
    GX_TEV_KCSEL_1_2 = 0x04
    GX_TEV_KCSEL_3_8 = 0x05
    GX_TEV_KCSEL_1_4 = 0x06
    GX_TEV_KCSEL_1_8 = 0x07
    GX_TEV_KCSEL_K0 = 0x0C
    GX_TEV_KCSEL_K1 = 0x0D
    GX_TEV_KCSEL_K2 = 0x0E
    GX_TEV_KCSEL_K3 = 0x0F
    GX_TEV_KCSEL_K0_R = 0x10
    GX_TEV_KCSEL_K1_R = 0x11
    GX_TEV_KCSEL_K2_R = 0x12
    GX_TEV_KCSEL_K3_R = 0x13
    GX_TEV_KCSEL_K0_G = 0x14
    GX_TEV_KCSEL_K1_G = 0x15
    GX_TEV_KCSEL_K2_G = 0x16
    GX_TEV_KCSEL_K3_G = 0x17
    GX_TEV_KCSEL_K0_B = 0x18
    GX_TEV_KCSEL_K1_B = 0x19
    GX_TEV_KCSEL_K2_B = 0x1A
    GX_TEV_KCSEL_K3_B = 0x1B
    GX_TEV_KCSEL_K0_A = 0x1C
    GX_TEV_KCSEL_K1_A = 0x1D
    GX_TEV_KCSEL_K2_A = 0x1E
    GX_TEV_KCSEL_K3_A = 0x1F


class GXTevKAlphaSel(enum.IntEnum):
    GX_TEV_KASEL_1 = 0x00
    GX_TEV_KASEL_7_8 = 0x01
    GX_TEV_KASEL_3_4 = 0x02
    GX_TEV_KASEL_5_8 = 0x03
    GX_TEV_KASEL_1_2 = 0x04
    GX_TEV_KASEL_3_8 = 0x05
    GX_TEV_KASEL_1_4 = 0x06
    GX_TEV_KASEL_1_8 = 0x07
    GX_TEV_KASEL_K0_R = 0x10
    GX_TEV_KASEL_K1_R = 0x11
    GX_TEV_KASEL_K2_R = 0x12
    GX_TEV_KASEL_K3_R = 0x13
    GX_TEV_KASEL_K0_G = 0x14
    GX_TEV_KASEL_K1_G = 0x15
    GX_TEV_KASEL_K2_G = 0x16
    GX_TEV_KASEL_K3_G = 0x17
    GX_TEV_KASEL_K0_B = 0x18
    GX_TEV_KASEL_K1_B = 0x19
    GX_TEV_KASEL_K2_B = 0x1A
    GX_TEV_KASEL_K3_B = 0x1B
    GX_TEV_KASEL_K0_A = 0x1C
    GX_TEV_KASEL_K1_A = 0x1D
    GX_TEV_KASEL_K2_A = 0x1E
    GX_TEV_KASEL_K3_A = 0x1F


class GXTexMtx(enum.IntEnum):
    GX_TEXMTX0 = 0
    GX_TEXMTX1 = 1
    GX_TEXMTX2 = 2
    GX_TEXMTX3 = 3
    GX_TEXMTX4 = 4
    GX_TEXMTX5 = 5
    GX_TEXMTX6 = 6
    GX_TEXMTX7 = 7
    GX_TEXMTX8 = 8
    GX_TEXMTX9 = 9
    GX_IDENTITY = 0xFF


class GXTexGenSrc(enum.IntEnum):
    GX_TG_POS = 0
    GX_TG_NRM = 1
    GX_TG_BINRM = 2
    GX_TG_TANGENT = 3
    GX_TG_TEX0 = 4
    GX_TG_TEX1 = 5
    GX_TG_TEX2 = 6
    GX_TG_TEX3 = 7
    GX_TG_TEX4 = 8
    GX_TG_TEX5 = 9
    GX_TG_TEX6 = 10
    GX_TG_TEX7 = 11
    GX_TG_TEXCOORD0 = 12
    GX_TG_TEXCOORD1 = 13
    GX_TG_TEXCOORD2 = 14
    GX_TG_TEXCOORD3 = 15
    GX_TG_TEXCOORD4 = 16
    GX_TG_TEXCOORD5 = 17
    GX_TG_TEXCOORD6 = 18
    GX_TG_COLOR0 = 19
    GX_TG_COLOR1 = 20


class GXTexGenType(enum.IntEnum):
    GX_TG_MTX3x4 = 0
    GX_TG_MTX2x4 = 1
    GX_TG_BUMP0 = 2
    GX_TG_BUMP1 = 3
    GX_TG_BUMP2 = 4
    GX_TG_BUMP3 = 5
    GX_TG_BUMP4 = 6
    GX_TG_BUMP5 = 7
    GX_TG_BUMP6 = 8
    GX_TG_BUMP7 = 9
    GX_TG_SRTG = 10


class GXTevColorArg(enum.IntEnum):
    GX_CC_CPREV = 0
    GX_CC_APREV = 1
    GX_CC_C0 = 2
    GX_CC_A0 = 3
    GX_CC_C1 = 4
    GX_CC_A1 = 5
    GX_CC_C2 = 6
    GX_CC_A2 = 7
    GX_CC_TEXC = 8
    GX_CC_TEXA = 9
    GX_CC_RASC = 10
    GX_CC_RASA = 11
    GX_CC_ONE = 12
    GX_CC_HALF = 13
    GX_CC_QUARTER = 14
    GX_CC_ZERO = 15
    GX_CC_TEXRRR = 16
    GX_CC_TEXGGG = 17
    GX_CC_TEXBBB = 18


class GXTexWrapMode(enum.IntEnum):
    GX_CLAMP = 0
    GX_REPEAT = 1
    GX_MIRROR = 2
    GX_MAX_TEXWRAPMODE = 3


# Value used when text is neither a known name nor an integer.
_FALLBACKS: dict[type[enum.IntEnum], int] = {
    GXTexWrapMode: GXTexWrapMode.GX_CLAMP,
    GXTexCoordID: GXTexCoordID.GX_TEXCOORD_NULL,
    GXTexGenType: GXTexGenType.GX_TG_MTX3x4,
    GXTexGenSrc: GXTexGenSrc.GX_TG_POS,
    GXTexMtx: GXTexMtx.GX_IDENTITY,
    GXTexMapID: GXTexMapID.GX_TEXMAP_NULL,
    GXChannelID: GXChannelID.GX_COLOR_NULL,
    GXTevKColorSel: GXTevKColorSel.GX_TEV_KCSEL_K3_A,
    GXTevKAlphaSel: GXTevKAlphaSel.GX_TEV_KASEL_K3_A,
    GXTevColorArg: GXTevColorArg.GX_CC_ZERO,
}


def _parse_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    value = int(match.group(1))
    return value if -(2**31) <= value < 2**31 else None


def enum_to_string(enum_type: type[enum.IntEnum], value: int) -> str:
    """Return the member name for ``value``, or its decimal form if unknown."""
    try:
        return enum_type(int(value)).name
    except ValueError:
        return str(int(value))


def string_to_enum(enum_type: type[enum.IntEnum], text: str, default: int | None = None) -> int:
    """Parse a member name or a leading integer; fall back to ``default``.

    Without an explicit ``default`` the type's usual fallback value is used.
    """
    member = enum_type.__members__.get(text)
    if member is not None:
        return int(member)
    parsed = _parse_int(text)
    if parsed is not None:
        return parsed
    if default is None:
        return int(_FALLBACKS.get(enum_type, 0))
    return int(default)