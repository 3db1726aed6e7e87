import argparse
import codecs
import json
import logging
import pathlib
import sys
from contextlib import nullcontext
from itertools import chain

import yaml

from . import __version__ as vitoneVersion
from .core.decompose import DecomposeVietnamese
from .core.unicode import normalizeNFC

logger = logging.getLogger(__name__)

if hasattr(logging, "getLevelNamesMapping"):
    levelNamesMapping = logging.getLevelNamesMapping()
else:
    # Python < 3.11
    levelNamesMapping = {
        "CRITICAL": 50,
        "FATAL": 50,
        "ERROR": 40,
        "WARN": 30,
        "WARNING": 30,
        "INFO": 20,
        "DEBUG": 10,
        "NOTSET": 0,
    }

sortedlevelNames = [
    name for name, value in sorted(levelNamesMapping.items(), key=lambda item: item[1])
]

CONFIG_KEYS = {
    "orthographic": bool,
    "normalize": bool,
    "input-encoding": str,
    "output-encoding": str,
    "errors": str,
}

CHUNK_SIZE = 4096


class ConfigError(ValueError):
    pass


def loadConfig(path) -> dict:
    """Load argument defaults from a YAML or JSON file."""
    path = pathlib.Path(path)
    if not path.is_file():
        raise ConfigError(f"File not found: {str(path)!r}")
    contents = path.read_text(encoding="utf-8")
    try:
        if path.suffix == ".json":
            config = json.loads(contents)
        else:
            config = yaml.safe_load(contents)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"can't parse {str(path)!r}: {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"{str(path)!r} must contain a mapping")

    defaults = {}
    for key, value in config.items():
        valueType = CONFIG_KEYS.get(key)
        if valueType is None:
            raise ConfigError(f"unknown configuration key: {key!r}")
        if not isinstance(value, valueType):
            raise ConfigError(
                f"configuration key {key!r} must be of type {valueType.__name__}"
            )
        defaults[key.replace("-", "_")] = value
    return defaults


def makeParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vitone",
        description="Detach Vietnamese tone marks from precomposed letters.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Text files to read. Reads standard input if none are given, "
        "or for '-'",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="A path for the output file. Writes to standard output if not given",
    )
    parser.add_argument(
        "--orthographic",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Detach all tone marks, including those of letters that "
        "windows-1258 can encode directly",
    )
    parser.add_argument(
        "--normalize",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Convert the input to Normalization Form C first",
    )
    parser.add_argument("--input-encoding", default="utf-8")
    parser.add_argument("--output-encoding", default="utf-8")
    parser.add_argument(
        "--errors",
        default="strict",
        help="How to handle characters the output encoding can't represent, "
        "as for str.encode(): strict, replace, ignore, ...",
    )
    parser.add_argument(
        "--config",
        type=pathlib.Path,
        help="A YAML or JSON file providing defaults for the options above",
    )
    parser.add_argument(
        "--logging-level",
        choices=sortedlevelNames,
        default="WARNING",
        help="The logging level for stderr output",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=vitoneVersion,
        help="Show vitone's version number and exit",
    )
    return parser


def parseArguments(argv=None) -> argparse.Namespace:
    parser = makeParser()
    args, _ = parser.parse_known_args(argv)
    if args.config is not None:
        try:
            parser.set_defaults(**loadConfig(args.config))
        except ConfigError as e:
            parser.error(str(e))
    args = parser.parse_args(argv)

    for encoding in [args.input_encoding, args.output_encoding]:
        try:
            codecs.lookup(encoding)
        except LookupError:
            parser.error(f"unknown encoding: {encoding!r}")
    try:
        codecs.lookup_error(args.errors)
    except LookupError:
        parser.error(f"unknown error handler: {args.errors!r}")
    return args


def openInput(path, encoding):
    if path == "-":
        return nullcontext(codecs.getreader(encoding)(sys.stdin.buffer))
    return open(path, encoding=encoding, newline="")


def openOutput(path):
    if path is None or path == "-":
        return nullcontext(sys.stdout.buffer)
    return open(path, "wb")


def processFile(inputFile, outputStream, encoder, orthographic, normalize):
    """Write the decomposed contents of `inputFile` to `outputStream`.

    Returns the number of characters read and the number of tone marks
    detached.
    """
    numRead = 0

    def readLines():
        nonlocal numRead
        for line in inputFile:
            if normalize:
                line = normalizeNFC(line)
            numRead += len(line)
            yield line

    numWritten = 0
    chunk = []
    for char in DecomposeVietnamese(chain.from_iterable(readLines()), orthographic):
        chunk.append(char)
        if char == "\n" or len(chunk) >= CHUNK_SIZE:
            outputStream.write(encoder.encode("".join(chunk)))
            numWritten += len(chunk)
            chunk = []
    if chunk:
        outputStream.write(encoder.encode("".join(chunk)))
        numWritten += len(chunk)

    return numRead, numWritten - numRead


def main(argv=None) -> int:
    args = parseArguments(argv)

    logging.basicConfig(
        format="%(asctime)s %(name)-17s %(levelname)-8s %(message)s",
        level=levelNamesMapping[args.logging_level],
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    encoder = codecs.getincrementalencoder(args.output_encoding)(args.errors)
    inputs = args.inputs or ["-"]

    try:
        with openOutput(args.output) as outputStream:
            for inputPath in inputs:
                with openInput(inputPath, args.input_encoding) as inputFile:
                    numRead, numDetached = processFile(
                        inputFile,
                        outputStream,
                        encoder,
                        args.orthographic,
                        args.normalize,
                    )
                logger.info(
                    "%s: read %d characters, detached %d tone marks",
                    "<stdin>" if inputPath == "-" else inputPath,
                    numRead,
                    numDetached,
                )
            outputStream.write(encoder.encode("", final=True))
            outputStream.flush()
    except (OSError, UnicodeError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
