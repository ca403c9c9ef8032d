"""
Tests for the command line entry point.

With no arguments the program prints exactly the table and exits with 0.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

from extascii.cli import main


def test_no_arguments_prints_table(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    lines = captured.out.split("\n")

    assert lines[-1] == ""
    assert len(lines[:-1]) == 128
    assert [int(line[:3]) for line in lines[:-1]] == list(range(128, 256))
    assert captured.err == ""


def test_title_and_separator(capsys):
    main(["--title", "--separator", ":"])
    lines = capsys.readouterr().out.split("\n")

    assert lines[0] == "Extended ASCII codes"
    assert lines[1] == ""
    assert lines[2] == "128: Ç"


def test_encoding_option(capsys):
    main(["--encoding", "cp852"])
    lines = capsys.readouterr().out.split("\n")
    assert lines[165 - 128] == "165 ą"


def test_json_summary(capsys):
    main(["--summary", "json"])
    lines = capsys.readouterr().out.split("\n")

    assert len(lines) == 130
    summary = json.loads(lines[128])
    assert summary["integer_value"] == 678
    assert summary["start_date"] == {"year": 2018, "month": 10, "day": 1}


def test_yaml_summary(capsys):
    main(["--summary", "yaml"])
    out = capsys.readouterr().out
    summary = out.split("\n", 128)[128]
    data = yaml.safe_load(summary)

    assert data["sequence"][9] == 131681894400


def test_unknown_encoding_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--encoding", "no-such-codec"])

    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown code page" in captured.err


@pytest.mark.parametrize("encoding", ["rot13", "hex", "base64"])
def test_non_text_codec_exits_with_usage_error(capsys, encoding):
    with pytest.raises(SystemExit) as exc:
        main(["--encoding", encoding])

    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Not a text code page" in captured.err


def test_narrow_terminal_encoding_still_prints_table():
    """A stdout that cannot encode cp437 glyphs gets '?' instead of a crash."""
    src = Path(__file__).resolve().parent.parent / "src"
    env = dict(os.environ)
    env["PYTHONIOENCODING"] = "latin-1"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [sys.executable, "-m", "extascii"],
        capture_output=True,
        env=env,
    )

    assert result.returncode == 0
    assert result.stderr == b""
    lines = result.stdout.split(b"\n")
    assert lines[-1] == b""
    assert len(lines[:-1]) == 128
    # 158 is the peseta sign in cp437, absent from latin-1
    assert lines[158 - 128] == b"158 ?"
    assert lines[0] == "128 Ç".encode("latin-1")
