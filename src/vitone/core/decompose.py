from typing import Iterable, Iterator

from .tonedata import lookupToneDecomposition


class DecomposeVietnamese:
    """An iterator over characters with Vietnamese tone marks detached.

    The source must yield single characters in Normalization Form C; this
    precondition is not checked. When a character decomposes, its base is
    returned right away and its tone mark on the following call, without
    pulling from the source in between.

    If `orthographic` is false, only tone marks of letters that have no
    precomposed form in windows-1258 are detached: "á" stays as it is, "ý"
    becomes "y" + U+0301 and "ấ" becomes "â" + U+0301. If `orthographic` is
    true, every tone mark is detached, "á" included. Circumflex, breve and
    horn always stay on their base letter, so the output is not in any
    Unicode normalization form.
    """

    __slots__ = ("_source", "_pending", "_orthographic")

    def __init__(self, source: Iterable[str], orthographic: bool = False):
        self._source = iter(source)
        self._pending = None
        self._orthographic = bool(orthographic)

    @property
    def orthographic(self) -> bool:
        return self._orthographic

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._pending is not None:
            char = self._pending
            self._pending = None
            return char

        if self._source is None:
            raise StopIteration
        try:
            char = next(self._source)
        except StopIteration:
            # Stay exhausted, even if the source would start yielding again
            self._source = None
            raise

        decomposition = lookupToneDecomposition(char, self._orthographic)
        if decomposition is None:
            return char
        base, self._pending = decomposition
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(orthographic={self._orthographic}, "
            f"pending={self._pending!r})"
        )


def decomposeVietnameseTones(
    source: Iterable[str], orthographic: bool = False
) -> DecomposeVietnamese:
    return DecomposeVietnamese(source, orthographic)


def decomposeVietnameseText(text: str, orthographic: bool = False) -> str:
    return "".join(DecomposeVietnamese(text, orthographic))
