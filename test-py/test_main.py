import io
import json
import logging
import sys

import pytest

from vitone.__main__ import ConfigError, loadConfig, main, parseArguments


@pytest.fixture
def inputPath(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("Tiếng Việt có dấu\nĐà Nẵng\n", encoding="utf-8")
    return path


@pytest.fixture
def outputPath(tmp_path):
    return tmp_path / "output.txt"


@pytest.mark.parametrize(
    "options, expectedText",
    [
        ([], "Tiê\u0301ng Viê\u0323t có dâ\u0301u\nĐà Nă\u0303ng\n"),
        (
            ["--orthographic"],
            "Tiê\u0301ng Viê\u0323t co\u0301 dâ\u0301u\nĐa\u0300 Nă\u0303ng\n",
        ),
        (
            ["--orthographic", "--no-orthographic"],
            "Tiê\u0301ng Viê\u0323t có dâ\u0301u\nĐà Nă\u0303ng\n",
        ),
    ],
)
def test_main(inputPath, outputPath, options, expectedText):
    assert 0 == main([str(inputPath), "-o", str(outputPath)] + options)
    assert expectedText == outputPath.read_text(encoding="utf-8")


def test_main_windows1258(inputPath, outputPath):
    options = ["--output-encoding", "windows-1258"]
    assert 0 == main([str(inputPath), "-o", str(outputPath)] + options)
    assert b"Ti\xea\xecng Vi\xea\xf2t c\xf3 d\xe2\xecu\n\xd0\xe0 N\xe3\xdeng\n" == (
        outputPath.read_bytes()
    )


def test_main_multipleInputs(tmp_path, inputPath, outputPath):
    secondPath = tmp_path / "second.txt"
    secondPath.write_text("Huế\r\n", encoding="utf-8")
    assert 0 == main([str(inputPath), str(secondPath), "-o", str(outputPath)])
    expectedText = (
        "Tiê\u0301ng Viê\u0323t có dâ\u0301u\nĐà Nă\u0303ng\n"
        "Huê\u0301\r\n"
    )
    assert expectedText.encode("utf-8") == outputPath.read_bytes()


def test_main_normalize(tmp_path, outputPath):
    inputPath = tmp_path / "nfd.txt"
    inputPath.write_text("Vie\u0323\u0302t", encoding="utf-8")
    assert 0 == main([str(inputPath), "-o", str(outputPath), "--normalize"])
    assert "Viê\u0323t" == outputPath.read_text(encoding="utf-8")


def test_main_inputEncoding(tmp_path, outputPath):
    inputPath = tmp_path / "input-1258.txt"
    inputPath.write_bytes(b"Vi\xea\xf2t c\xf3")
    options = ["--input-encoding", "cp1258", "--orthographic"]
    assert 0 == main([str(inputPath), "-o", str(outputPath)] + options)
    assert "Viê\u0323t co\u0301" == outputPath.read_text(encoding="utf-8")


def test_main_stdin(monkeypatch, outputPath):
    stdin = io.TextIOWrapper(io.BytesIO("Ỹ ý".encode("utf-8")), encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", stdin)
    assert 0 == main(["-o", str(outputPath)])
    assert "Y\u0303 y\u0301" == outputPath.read_text(encoding="utf-8")


def test_main_stdout(capsysbinary, inputPath):
    assert 0 == main([str(inputPath), "--orthographic"])
    captured = capsysbinary.readouterr()
    assert "Đa\u0300 Nă\u0303ng\n".encode("utf-8") in captured.out


def test_main_unencodable(tmp_path, outputPath, caplog):
    inputPath = tmp_path / "input.txt"
    inputPath.write_text("Hà Nội 漢字", encoding="utf-8")
    options = ["--output-encoding", "cp1258"]
    with caplog.at_level(logging.ERROR):
        assert 1 == main([str(inputPath), "-o", str(outputPath)] + options)
    assert "can't encode" in caplog.text

    options += ["--errors", "replace"]
    assert 0 == main([str(inputPath), "-o", str(outputPath)] + options)
    assert b"H\xe0 N\xf4\xf2i ??" == outputPath.read_bytes()


def test_main_missingInput(tmp_path, outputPath, caplog):
    with caplog.at_level(logging.ERROR):
        assert 1 == main([str(tmp_path / "missing.txt"), "-o", str(outputPath)])
    assert "missing.txt" in caplog.text


@pytest.mark.parametrize(
    "arguments",
    [
        ["--output-encoding", "no-such-encoding"],
        ["--input-encoding", "no-such-encoding"],
        ["--errors", "no-such-handler"],
        ["--logging-level", "LOUD"],
    ],
)
def test_parseArguments_errors(arguments):
    with pytest.raises(SystemExit) as excInfo:
        parseArguments(arguments)
    assert 2 == excInfo.value.code


def test_parseArguments_yamlConfig(tmp_path):
    configPath = tmp_path / "config.yaml"
    configPath.write_text(
        "orthographic: true\noutput-encoding: windows-1258\n", encoding="utf-8"
    )
    args = parseArguments(["--config", str(configPath)])
    assert args.orthographic
    assert "windows-1258" == args.output_encoding
    assert not args.normalize

    args = parseArguments(["--config", str(configPath), "--no-orthographic"])
    assert not args.orthographic


def test_parseArguments_jsonConfig(tmp_path):
    configPath = tmp_path / "config.json"
    configPath.write_text(json.dumps({"normalize": True}), encoding="utf-8")
    args = parseArguments(["--config", str(configPath), "input.txt"])
    assert args.normalize
    assert ["input.txt"] == args.inputs


def test_parseArguments_badConfig(tmp_path):
    configPath = tmp_path / "config.yaml"
    configPath.write_text("orthographic: 3\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excInfo:
        parseArguments(["--config", str(configPath)])
    assert 2 == excInfo.value.code


@pytest.mark.parametrize(
    "fileName, contents, expectedMessage",
    [
        ("config.yaml", "verbose: true\n", "unknown configuration key"),
        ("config.yaml", "- orthographic\n", "must contain a mapping"),
        ("config.yaml", "errors: [1, 2\n", "can't parse"),
        ("config.json", "{orthographic: true}", "can't parse"),
        ("config.json", '{"errors": false}', "must be of type str"),
    ],
)
def test_loadConfig_errors(tmp_path, fileName, contents, expectedMessage):
    configPath = tmp_path / fileName
    configPath.write_text(contents, encoding="utf-8")
    with pytest.raises(ConfigError, match=expectedMessage):
        loadConfig(configPath)


def test_loadConfig(tmp_path):
    configPath = tmp_path / "config.yaml"
    configPath.write_text("", encoding="utf-8")
    assert {} == loadConfig(configPath)
    with pytest.raises(ConfigError, match="File not found"):
        loadConfig(tmp_path / "missing.yaml")
