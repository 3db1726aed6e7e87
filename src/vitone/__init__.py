from importlib.metadata import PackageNotFoundError, version

from .core.codec import decodeWindows1258, encodeWindows1258
from .core.decompose import (
    DecomposeVietnamese,
    decomposeVietnameseText,
    decomposeVietnameseTones,
)
from .core.tonedata import lookupToneDecomposition

try:
    __version__ = version("vitone")
except PackageNotFoundError:
    # Not installed, running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "DecomposeVietnamese",
    "decodeWindows1258",
    "decomposeVietnameseText",
    "decomposeVietnameseTones",
    "encodeWindows1258",
    "lookupToneDecomposition",
]
