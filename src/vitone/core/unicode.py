import unicodedata2

GRAVE = "\u0300"
ACUTE = "\u0301"
TILDE = "\u0303"
HOOK_ABOVE = "\u0309"
DOT_BELOW = "\u0323"

TONE_MARKS = frozenset([GRAVE, ACUTE, TILDE, HOOK_ABOVE, DOT_BELOW])

# Vowels that carry tone marks, with their circumflex, breve and horn forms
VIETNAMESE_VOWELS = frozenset("AaĂăÂâEeÊêIiOoÔôƠơUuƯưYy")


def isToneMark(char: str) -> bool:
    return char in TONE_MARKS


def decompose(codePoint: int) -> list[int]:
    char = chr(codePoint)
    decomposed = unicodedata2.normalize("NFD", char)
    return [] if decomposed == char else [ord(c) for c in decomposed]


def normalizeNFC(text: str) -> str:
    return unicodedata2.normalize("NFC", text)


def splitToneMark(char: str) -> tuple[str, str] | None:
    """Split a precomposed Vietnamese vowel into its NFC base and tone mark.

    Returns None if `char` is not a Vietnamese vowel carrying exactly one
    tone mark.
    """
    decomposed = unicodedata2.normalize("NFD", char)
    toneMarks = [c for c in decomposed if c in TONE_MARKS]
    if len(toneMarks) != 1:
        return None
    base = normalizeNFC(decomposed.replace(toneMarks[0], ""))
    if base not in VIETNAMESE_VOWELS:
        return None
    return base, toneMarks[0]
