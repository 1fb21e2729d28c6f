import pytest

from modtool.gx import (
    GXChannelID,
    GXTevColorArg,
    GXTevKAlphaSel,
    GXTevKColorSel,
    GXTexCoordID,
    GXTexGenSrc,
    GXTexGenType,
    GXTexMapID,
    GXTexMtx,
    GXTexWrapMode,
    enum_to_string,
    string_to_enum,
)

ALL_TYPES = [
    GXTexCoordID,
    GXTexMapID,
    GXChannelID,
    GXTevKColorSel,
    GXTevKAlphaSel,
    GXTexMtx,
    GXTexGenSrc,
    GXTexGenType,
    GXTevColorArg,
    GXTexWrapMode,
]


def test_known_names():
    assert enum_to_string(GXTexWrapMode, 1) == "GX_REPEAT"
    assert enum_to_string(GXTexMtx, 0xFF) == "GX_IDENTITY"
    assert enum_to_string(GXTexMapID, 0x100) == "GX_TEX_DISABLE"
    assert enum_to_string(GXTexGenType, 10) == "GX_TG_SRTG"


def test_unknown_value_is_decimal():
    assert enum_to_string(GXTevKColorSel, 0x08) == "8"
    assert enum_to_string(GXTexWrapMode, 300) == "300"


@pytest.mark.parametrize("enum_type", ALL_TYPES)
def test_round_trip_all_members(enum_type):
    for member in enum_type:
        name = enum_to_string(enum_type, int(member))
        assert name == member.name
        assert string_to_enum(enum_type, name) == int(member)


def test_numeric_text_parsed():
    assert string_to_enum(GXTexGenSrc, "7") == 7
    assert string_to_enum(GXTexMtx, "  12abc") == 12
    assert string_to_enum(GXTevColorArg, "-3") == -3


@pytest.mark.parametrize(
    "enum_type, expected",
    [
        (GXTexWrapMode, 0),
        (GXTexCoordID, 0xFF),
        (GXTexGenType, 0),
        (GXTexGenSrc, 0),
        (GXTexMtx, 0xFF),
        (GXTexMapID, 0xFF),
        (GXChannelID, 0xFF),
        (GXTevKColorSel, 0x1F),
        (GXTevKAlphaSel, 0x1F),
        (GXTevColorArg, 15),
    ],
)
def test_fallbacks_on_garbage(enum_type, expected):
    assert string_to_enum(enum_type, "nonsense") == expected


def test_explicit_default_overrides_fallback():
    assert string_to_enum(GXChannelID, "bogus", 4) == 4


def test_out_of_range_integer_falls_back():
    assert string_to_enum(GXTevColorArg, "99999999999") == GXTevColorArg.GX_CC_ZERO


def test_kalpha_has_no_konst_colour_entries():
    assert enum_to_string(GXTevKAlphaSel, 0x0C) == "12"
    assert string_to_enum(GXTevKAlphaSel, "GX_TEV_KCSEL_K0") == GXTevKAlphaSel.GX_TEV_KASEL_K3_A