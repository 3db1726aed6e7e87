#!/usr/bin/env python

import argparse
import pathlib

from vitone.core import tonedata
from vitone.core.unicode import ACUTE, GRAVE, TILDE, splitToneMark

WINDOWS_1258 = "cp1258"


def isWindows1258Char(char):
    try:
        char.encode(WINDOWS_1258)
    except UnicodeEncodeError:
        return False
    return True


def makeToneTables():
    windows1258Table = []
    middleTable = []
    for codePoint in range(tonedata.WINDOWS_1258_FIRST, tonedata.MIDDLE_LAST + 1):
        char = chr(codePoint)
        split = splitToneMark(char)
        if split is None:
            continue
        base, tone = split
        baseCodePoint = ord(base)
        assert baseCodePoint < 0x80, char
        if isWindows1258Char(char):
            assert codePoint <= tonedata.WINDOWS_1258_LAST, char
            toneSelector = ord(tone) - tonedata.TONE_OFFSET
            assert toneSelector in (0, 1), char
            value = baseCodePoint | toneSelector << 7
            windows1258Table.append((char, codePoint, value))
        else:
            if base in "Yy":
                assert tone == ACUTE, char
                value = baseCodePoint
            elif tone == GRAVE:
                value = baseCodePoint
            elif tone == TILDE:
                value = baseCodePoint | 0x80
            else:
                raise ValueError(f"can't pack {char!r} into the middle table")
            middleTable.append((char, codePoint - tonedata.MIDDLE_FIRST, value))

    extensionTable = []
    codePoint = tonedata.EXTENSION_FIRST
    while (split := splitToneMark(chr(codePoint))) is not None:
        base, tone = split
        baseCodePoint = ord(base)
        toneOffset = ord(tone) - tonedata.TONE_OFFSET
        assert baseCodePoint < 0x400 and toneOffset < 0x40, chr(codePoint)
        extensionTable.append((chr(codePoint), baseCodePoint | toneOffset << 10))
        codePoint += 1

    return windows1258Table, middleTable, extensionTable


def formatBytes(name, rows):
    lines = [f"{name} = bytes(", "    ["]
    lines += [f"        0x{value:02X},  # {char}" for char, value in rows]
    lines += ["    ]", ")"]
    return lines


def formatToneTables(windows1258Table, middleTable, extensionTable):
    lines = []
    lines += formatBytes(
        "WINDOWS_1258_KEYS", [(char, key) for char, key, _ in windows1258Table]
    )
    lines += formatBytes(
        "WINDOWS_1258_VALUES", [(char, value) for char, _, value in windows1258Table]
    )
    lines += formatBytes("MIDDLE_KEYS", [(char, key) for char, key, _ in middleTable])
    lines += formatBytes(
        "MIDDLE_VALUES", [(char, value) for char, _, value in middleTable]
    )
    lines += ["EXTENSION_VALUES = array(", '    "H",', "    ["]
    lines += [f"        0x{value:04X},  # {char}" for char, value in extensionTable]
    lines += ["    ],", ")"]
    return "\n" + "\n".join(lines) + "\n\n"


def insertToneTablesInToneDataModule(check=False):
    tablesSource = formatToneTables(*makeToneTables())

    repoDir = pathlib.Path(__file__).resolve().parent.parent
    toneDataPath = repoDir / "src" / "vitone" / "core" / "tonedata.py"

    sourceText = toneDataPath.read_text(encoding="utf-8")

    targetString = "# BEGIN GENERATED TABLES"
    start = sourceText.find(targetString)
    assert start > 0
    start = sourceText.index("\n", start) + 1
    end = sourceText.find("# END GENERATED TABLES", start)
    assert end > start

    newSourceText = sourceText[:start] + tablesSource + sourceText[end:]

    if check:
        if sourceText != newSourceText:
            raise ValueError("new source differs from old source")
        print("all good")
    else:
        toneDataPath.write_text(newSourceText, encoding="utf-8")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--check", action="store_true", default=False)
    args = parser.parse_args()

    insertToneTablesInToneDataModule(check=args.check)
