"""Tests for the INI grammar."""

import logging

import pytest

from sini import Document, ParseError, parse


def value(doc, section, key):
    return doc.section_or_fail(section).get(key)


# ---------------------------------------------------------------------------
# document shape
# ---------------------------------------------------------------------------

def test_parse_empty_text():
    doc = parse("")
    assert isinstance(doc, Document)
    assert list(doc) == [""]
    assert len(doc[""]) == 0

def test_parse_blank_lines_only():
    doc = parse("\n\n   \n\t\n")
    assert list(doc) == [""]

def test_parse_default_and_sections():
    doc = parse(
        "a=b\n"
        "c=42\n"
        "\n"
        "[section1]\n"
        "e='asdf'\n"
        "g=\"as123df\"\n"
        "\n"
    )
    assert doc.to_dict() == {
        "": {"a": "b", "c": "42"},
        "section1": {"e": "asdf", "g": "as123df"},
    }

def test_parse_without_trailing_newline():
    doc = parse("a=1\n[s]\nb=2")
    assert value(doc, "s", "b") == "2"

def test_parse_crlf():
    doc = parse("a=1\r\n[s]\r\nb = two words \r\n")
    assert value(doc, "", "a") == "1"
    assert value(doc, "s", "b") == "two words"

def test_parse_returns_fresh_document():
    assert parse("a=1") is not parse("a=1")


# ---------------------------------------------------------------------------
# values
# ---------------------------------------------------------------------------

def test_raw_value_collapses_blanks():
    doc = parse("k =   a   b\t\tc   \n")
    assert value(doc, "", "k") == "a b c"

def test_raw_value_keeps_equal_sign_and_inner_semicolon():
    doc = parse("k=x=y;z\n")
    assert value(doc, "", "k") == "x=y;z"

def test_empty_value():
    doc = parse("k=\nj =   \n")
    assert value(doc, "", "k") == ""
    assert value(doc, "", "j") == ""

def test_single_quoted_value_keeps_blanks():
    doc = parse("k = '  spaced   out  '\n")
    assert value(doc, "", "k") == "  spaced   out  "

def test_double_quoted_value():
    doc = parse('k="a ; b = c"\n')
    assert value(doc, "", "k") == "a ; b = c"

def test_quoted_escapes():
    doc = parse("a='it\\'s'\nb=\"say \\\"hi\\\"\"\nc='a\\b'\nd=\"it's\"\n")
    assert value(doc, "", "a") == "it's"
    assert value(doc, "", "b") == 'say "hi"'
    assert value(doc, "", "c") == "a\\b"
    assert value(doc, "", "d") == "it's"

def test_empty_quoted_value():
    doc = parse("k=''\nj=\"\"\n")
    assert value(doc, "", "k") == ""
    assert value(doc, "", "j") == ""


# ---------------------------------------------------------------------------
# comments
# ---------------------------------------------------------------------------

def test_comment_lines():
    doc = parse("; top comment\n  ; indented\n[s] ; after header\nk=v\n")
    assert list(doc) == ["", "s"]
    assert value(doc, "s", "k") == "v"

def test_comment_after_values():
    doc = parse("a=v ; note\nb='q' ; note\nc= ; only comment\n")
    assert value(doc, "", "a") == "v"
    assert value(doc, "", "b") == "q"
    assert value(doc, "", "c") == ""


# ---------------------------------------------------------------------------
# keys and sections
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("key", [
    "Scientific Notation 1", "$var", ".dot", ":colon", "a-b_c~d.e", "x1", "a$:b",
])
def test_valid_keys(key):
    doc = parse(f"{key} = 1\n")
    assert key in doc[""]

def test_key_trailing_blanks_trimmed():
    doc = parse("  spaced key   \t= 1\n")
    assert list(doc[""]) == ["spaced key"]

def test_section_name_trimmed():
    doc = parse("[ my section ]\nk=1\n")
    assert value(doc, "my section", "k") == "1"

def test_reopened_section_merges():
    doc = parse("[a]\nx=1\n[b]\ny=2\n[a]\nx=3\nz=4\n")
    assert doc["a"].to_dict() == {"x": "3", "z": "4"}
    assert doc["b"].to_dict() == {"y": "2"}

def test_last_write_wins():
    doc = parse("k=first\nk=second\n")
    assert value(doc, "", "k") == "second"

def test_duplicate_key_logged(caplog):
    with caplog.at_level(logging.DEBUG):
        parse("k=1\nk=2\n")
    assert "overridden" in caplog.text


# ---------------------------------------------------------------------------
# errors
# ---------------------------------------------------------------------------

def test_unterminated_section_header():
    with pytest.raises(ParseError):
        parse("[asdf\ne=f\n")

def test_unterminated_section_header_position():
    with pytest.raises(ParseError) as e:
        parse("a=b\n\n[asdf\ne=f\n\n")
    err = e.value
    assert err.lineno == 3
    assert err.colno == 6
    assert err.line == "[asdf"
    assert "]" in err.message
    assert "line 3" in str(err)

def test_empty_section_header():
    with pytest.raises(ParseError):
        parse("[]\n")

@pytest.mark.parametrize("text", [
    "k='abc\n",
    "k='abc",
    'k="abc\nnext=1\n',
    "k='abc\\'\n",
])
def test_unterminated_quote(text):
    with pytest.raises(ParseError) as e:
        parse(text)
    assert "closing" in e.value.message

def test_missing_equal_sign():
    with pytest.raises(ParseError) as e:
        parse("a=1\nkey value\n")
    assert e.value.lineno == 2
    assert '"="' in e.value.message

@pytest.mark.parametrize("text", [
    "k='a' b\n",
    "[a] b\n",
    "=v\n",
    "1a=2\n",
    "[s]\n#k=1\n",
])
def test_trailing_garbage(text):
    with pytest.raises(ParseError):
        parse(text)

def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("[oops")

def test_leading_bom_ignored():
    doc = parse("\ufeff[s]\nk=v\n")
    assert doc.to_dict() == {"": {}, "s": {"k": "v"}}

def test_bom_elsewhere_is_an_error():
    with pytest.raises(ParseError):
        parse("k=v\n\ufeff[s]\n")
