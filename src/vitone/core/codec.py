import logging

from .decompose import decomposeVietnameseText
from .unicode import normalizeNFC

logger = logging.getLogger(__name__)

WINDOWS_1258 = "cp1258"


def encodeWindows1258(
    text: str, errors: str = "strict", normalize: bool = True
) -> bytes:
    """Encode Vietnamese text as windows-1258.

    Tone marks of letters that windows-1258 has no single byte for are
    detached first, so any NFC Vietnamese text can be encoded. Characters
    that are not representable at all are handled according to `errors`,
    as with `str.encode()`.
    """
    if normalize:
        text = normalizeNFC(text)
    decomposed = decomposeVietnameseText(text, orthographic=False)
    logger.debug("detached %d tone marks before encoding", len(decomposed) - len(text))
    return decomposed.encode(WINDOWS_1258, errors)


def decodeWindows1258(data: bytes, errors: str = "strict") -> str:
    text = data.decode(WINDOWS_1258, errors)
    # Recombine detached tone marks with their base letters
    return normalizeNFC(text)
