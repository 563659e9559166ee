"""Tests for the INI file handler."""

import pytest

from sini import Document, IniFile, ParseError


def test_write_then_read(tmp_path):
    path = tmp_path / "rules.ini"
    doc = Document()
    doc["General"]["Name"] = "Test Map"
    doc["General"]["Speed"] = 6
    IniFile(str(path)).write(doc)

    assert path.read_text(encoding="utf-8") == "[General]\nName=Test Map\nSpeed=6\n\n"
    again = IniFile(str(path), "utf-8").read()
    assert again["General"].get("Speed", int) == 6

def test_write_options(tmp_path):
    path = tmp_path / "opt.ini"
    doc = Document()
    doc[""]["a"] = 1
    IniFile(str(path)).write(doc, blank_lines=0, delimiter=" = ")
    assert path.read_text(encoding="utf-8") == "a = 1\n"

def test_read_falls_back_to_detection(tmp_path):
    path = tmp_path / "wide.ini"
    path.write_bytes("[s]\nkey=wert\n".encode("utf-16"))
    doc = IniFile(str(path), "utf-8").read()
    assert doc["s"].get("key") == "wert"

def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        IniFile(str(tmp_path / "nope.ini")).read()

def test_read_malformed_file(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("[broken\n", encoding="utf-8")
    with pytest.raises(ParseError):
        IniFile(str(path), "utf-8").read()

def test_str():
    assert "rules.ini" in str(IniFile("rules.ini"))

def test_read_utf8_with_bom(tmp_path):
    path = tmp_path / "win.ini"
    path.write_bytes("[s]\nkey=v\n".encode("utf-8-sig"))
    doc = IniFile(str(path), "utf-8").read()
    assert doc["s"].get("key") == "v"
