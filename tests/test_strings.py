"""Tests for the individual sanitizer passes."""

# Third-party imports
import pytest

# Local/package imports
from xpath_sanitizer.utils import strings


def test_strip_control_chars():
    assert strings.strip_control_chars("a\x00b\x1fc\x7fd\r\n\t") == "abcd"
    # C1 controls are category Cc as well
    assert strings.strip_control_chars("a\x85b") == "ab"


def test_strip_separators_does_not_interpret_paths():
    assert strings.strip_separators("../a\\b/./c") == "..ab.c"


def test_strip_markup_keeps_inner_text():
    assert strings.strip_markup("a<b>c</b>d<i >e") == "acde"
    assert strings.strip_markup("x<unterminated") == "x<unterminated"


def test_strip_metacharacters():
    assert strings.strip_metacharacters("a<>\"'`%;&|@$#()b-c_d.e") == "ab-c_d.e"


@pytest.mark.parametrize(
    "ch,allowed",
    [
        ("a", True),
        ("Ж", True),
        ("名", True),
        ("7", True),
        ("٣", True),
        (" ", True),
        (".", True),
        ("_", True),
        ("-", True),
        ("²", False),
        ("\t", False),
        ("+", False),
        ("=", False),
        ("\U0001F4C4", False),
    ],
)
def test_is_allowed_char(ch, allowed):
    assert strings.is_allowed_char(ch) is allowed


def test_keep_allowed_chars():
    assert strings.keep_allowed_chars("a+b=c~d e.f") == "abcd e.f"


def test_collapse_whitespace():
    assert strings.collapse_whitespace("a   b .  c") == "a b.c"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("...a.b", "a.b"),
        ("a....b", "a.b"),
        ("__a__", "a"),
        ("a___.b", "a.b"),
        ("a_b", "a_b"),
        ("._._", ""),
        ("_ abc", "abc"),
        ("abc _", "abc"),
        ("a _.b", "a.b"),
        ("__ x __", "x"),
        ("a _ _.b", "a.b"),
    ],
)
def test_trim_dots_underscores(value, expected):
    assert strings.trim_dots_underscores(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("", False),
        (".", True),
        ("....", True),
        (". .", False),
        ("a.", False),
    ],
)
def test_is_all_dots(value, expected):
    assert strings.is_all_dots(value) is expected


def test_is_blank():
    assert strings.is_blank("")
    assert strings.is_blank(" \t\r\n\x00")
    assert not strings.is_blank(" a ")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("file.txt.jpg", True),
        ("FILE.TxT.PNG", True),
        (".txt.jpg", False),
        ("file.txt.", False),
        ("file.txt.j-g", False),
        ("file.txt", False),
        ("file.txt.\u017f", False),
        ("file.txt.\u212a", False),
        ("a\rb.txt.jpg", False),
        ("a\u0085b.txt.jpg", False),
        ("a\u2029b.txt.jpg", False),
    ],
)
def test_has_double_extension(value, expected):
    assert strings.has_double_extension(value) is expected


def test_split_extension():
    assert strings.split_extension("name.pdf", 255) == ("name", ".pdf")
    assert strings.split_extension(".hidden", 255) is None
    assert strings.split_extension("name.", 255) is None
    assert strings.split_extension("noext", 255) is None
    assert strings.split_extension("a.bcdef", 6) is None


def test_truncate_short_text_untouched():
    assert strings.truncate("abc.pdf", 10) == "abc.pdf"


def test_truncate_with_extension():
    assert strings.truncate("abcdefgh.pdf", 8) == "abcd.pdf"
    assert strings.truncate("abc_defgh.pdf", 8) == "abc.pdf"


def test_truncate_without_extension():
    assert strings.truncate("abcdefgh", 5) == "abcde"
    assert strings.truncate("abcd efgh", 5) == "abcd"


def test_final_pass():
    assert strings.final_pass("a/b\\c..d<e>f;g\r\nh(i)") == "abcdefgh(i)"
