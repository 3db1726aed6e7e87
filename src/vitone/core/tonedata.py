"""Packed lookup tables for detaching Vietnamese tone marks.

Each table maps a precomposed code point to a pair of code points: a base
letter (which keeps any circumflex, breve or horn) and one of five combining
tone marks. The three tables cover different code point ranges and pack the
pair differently so that each fits in as little space as possible.

WINDOWS_1258_KEYS / WINDOWS_1258_VALUES
    Letters that windows-1258 can encode as a single byte. Only detached in
    orthographic mode. A key is the code point itself (all are < 0x100). The
    low 7 bits of a value are the base; the high bit is the tone, offset by
    0x0300, so it selects grave (U+0300) or acute (U+0301)::

        0xC1 = 0b1_1000001 -> base 0x41 "A", tone 0x0300 + 1 = U+0301

MIDDLE_KEYS / MIDDLE_VALUES
    Other precomposed letters between U+00C3 and U+0169. A key is the code
    point minus 0xC3. The low 7 bits of a value are the base. The tone is
    acute for Y/y (the high bit is ignored for those), grave when the high bit
    is clear and tilde (U+0303) when it is set::

        0xC1 = 0b1_1000001 -> base 0x41 "A", tone U+0303

EXTENSION_VALUES
    The Latin Extended Additional letters U+1EA0 to U+1EF9, indexed by code
    point minus 0x1EA0. The low 10 bits of a value are the base; the high 6
    bits are the tone minus 0x0300::

        0x8C41 = 0b100011_0001000001 -> base 0x41 "A", tone 0x0323
"""

from array import array
from bisect import bisect_left

TONE_OFFSET = 0x0300

MIDDLE_FIRST = 0xC3
MIDDLE_LAST = 0x0169
WINDOWS_1258_FIRST = 0xC0
WINDOWS_1258_LAST = 0xFA
EXTENSION_FIRST = 0x1EA0

# BEGIN GENERATED TABLES (scripts/rebuild_tone_tables.py)

WINDOWS_1258_KEYS = bytes(
    [
        0xC0,  # À
        0xC1,  # Á
        0xC8,  # È
        0xC9,  # É
        0xCD,  # Í
        0xD3,  # Ó
        0xD9,  # Ù
        0xDA,  # Ú
        0xE0,  # à
        0xE1,  # á
        0xE8,  # è
        0xE9,  # é
        0xED,  # í
        0xF3,  # ó
        0xF9,  # ù
        0xFA,  # ú
    ]
)
WINDOWS_1258_VALUES = bytes(
    [
        0x41,  # À
        0xC1,  # Á
        0x45,  # È
        0xC5,  # É
        0xC9,  # Í
        0xCF,  # Ó
        0x55,  # Ù
        0xD5,  # Ú
        0x61,  # à
        0xE1,  # á
        0x65,  # è
        0xE5,  # é
        0xE9,  # í
        0xEF,  # ó
        0x75,  # ù
        0xF5,  # ú
    ]
)
MIDDLE_KEYS = bytes(
    [
        0x00,  # Ã
        0x09,  # Ì
        0x0F,  # Ò
        0x12,  # Õ
        0x1A,  # Ý
        0x20,  # ã
        0x29,  # ì
        0x2F,  # ò
        0x32,  # õ
        0x3A,  # ý
        0x65,  # Ĩ
        0x66,  # ĩ
        0xA5,  # Ũ
        0xA6,  # ũ
    ]
)
MIDDLE_VALUES = bytes(
    [
        0xC1,  # Ã
        0x49,  # Ì
        0x4F,  # Ò
        0xCF,  # Õ
        0x59,  # Ý
        0xE1,  # ã
        0x69,  # ì
        0x6F,  # ò
        0xEF,  # õ
        0x79,  # ý
        0xC9,  # Ĩ
        0xE9,  # ĩ
        0xD5,  # Ũ
        0xF5,  # ũ
    ]
)
EXTENSION_VALUES = array(
    "H",
    [
        0x8C41,  # Ạ
        0x8C61,  # ạ
        0x2441,  # Ả
        0x2461,  # ả
        0x04C2,  # Ấ
        0x04E2,  # ấ
        0x00C2,  # Ầ
        0x00E2,  # ầ
        0x24C2,  # Ẩ
        0x24E2,  # ẩ
        0x0CC2,  # Ẫ
        0x0CE2,  # ẫ
        0x8CC2,  # Ậ
        0x8CE2,  # ậ
        0x0502,  # Ắ
        0x0503,  # ắ
        0x0102,  # Ằ
        0x0103,  # ằ
        0x2502,  # Ẳ
        0x2503,  # ẳ
        0x0D02,  # Ẵ
        0x0D03,  # ẵ
        0x8D02,  # Ặ
        0x8D03,  # ặ
        0x8C45,  # Ẹ
        0x8C65,  # ẹ
        0x2445,  # Ẻ
        0x2465,  # ẻ
        0x0C45,  # Ẽ
        0x0C65,  # ẽ
        0x04CA,  # Ế
        0x04EA,  # ế
        0x00CA,  # Ề
        0x00EA,  # ề
        0x24CA,  # Ể
        0x24EA,  # ể
        0x0CCA,  # Ễ
        0x0CEA,  # ễ
        0x8CCA,  # Ệ
        0x8CEA,  # ệ
        0x2449,  # Ỉ
        0x2469,  # ỉ
        0x8C49,  # Ị
        0x8C69,  # ị
        0x8C4F,  # Ọ
        0x8C6F,  # ọ
        0x244F,  # Ỏ
        0x246F,  # ỏ
        0x04D4,  # Ố
        0x04F4,  # ố
        0x00D4,  # Ồ
        0x00F4,  # ồ
        0x24D4,  # Ổ
        0x24F4,  # ổ
        0x0CD4,  # Ỗ
        0x0CF4,  # ỗ
        0x8CD4,  # Ộ
        0x8CF4,  # ộ
        0x05A0,  # Ớ
        0x05A1,  # ớ
        0x01A0,  # Ờ
        0x01A1,  # ờ
        0x25A0,  # Ở
        0x25A1,  # ở
        0x0DA0,  # Ỡ
        0x0DA1,  # ỡ
        0x8DA0,  # Ợ
        0x8DA1,  # ợ
        0x8C55,  # Ụ
        0x8C75,  # ụ
        0x2455,  # Ủ
        0x2475,  # ủ
        0x05AF,  # Ứ
        0x05B0,  # ứ
        0x01AF,  # Ừ
        0x01B0,  # ừ
        0x25AF,  # Ử
        0x25B0,  # ử
        0x0DAF,  # Ữ
        0x0DB0,  # ữ
        0x8DAF,  # Ự
        0x8DB0,  # ự
        0x0059,  # Ỳ
        0x0079,  # ỳ
        0x8C59,  # Ỵ
        0x8C79,  # ỵ
        0x2459,  # Ỷ
        0x2479,  # ỷ
        0x0C59,  # Ỹ
        0x0C79,  # ỹ
    ],
)

# END GENERATED TABLES


def unpackWindows1258(value: int) -> tuple[str, str]:
    return chr(value & 0x7F), chr((value >> 7) + TONE_OFFSET)


def unpackMiddle(value: int) -> tuple[str, str]:
    base = value & 0x7F
    if value & 0x5F == 0x59:
        # Ý and ý carry an acute, the high bit is not a tone selector for them
        tone = 0x0301
    elif value >> 7 == 0:
        tone = 0x0300
    else:
        tone = 0x0303
    return chr(base), chr(tone)


def unpackExtension(value: int) -> tuple[str, str]:
    return chr(value & 0x3FF), chr((value >> 10) + TONE_OFFSET)


def _findKey(keys: bytes, key: int) -> int | None:
    index = bisect_left(keys, key)
    if index < len(keys) and keys[index] == key:
        return index
    return None


def lookupToneDecomposition(char: str, orthographic: bool) -> tuple[str, str] | None:
    """Return the (base, toneMark) pair `char` splits into, or None.

    The Latin Extended Additional range always decomposes, followed by the
    letters that windows-1258 cannot encode as one byte. Letters windows-1258
    can encode directly (such as "á") only decompose when `orthographic` is
    true. `char` is assumed to be in Normalization Form C; this is not
    checked.
    """
    codePoint = ord(char)

    offset = codePoint - EXTENSION_FIRST
    if 0 <= offset < len(EXTENSION_VALUES):
        return unpackExtension(EXTENSION_VALUES[offset])

    if MIDDLE_FIRST <= codePoint <= MIDDLE_LAST:
        index = _findKey(MIDDLE_KEYS, codePoint - MIDDLE_FIRST)
        if index is not None:
            return unpackMiddle(MIDDLE_VALUES[index])

    if orthographic and WINDOWS_1258_FIRST <= codePoint <= WINDOWS_1258_LAST:
        index = _findKey(WINDOWS_1258_KEYS, codePoint)
        if index is not None:
            return unpackWindows1258(WINDOWS_1258_VALUES[index])

    return None
