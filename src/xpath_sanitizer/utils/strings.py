"""String passes used by the sanitizer.

Every function here is a pure, independent text transform. The sanitizer
chains them in a fixed order; the order matters (tags are stripped before
the allow-list filter runs, dots are collapsed before the ends are trimmed).
"""

import re
import unicodedata

# Command separator that aborts sanitization outright in permissive mode
COMMAND_SEPARATOR = ";"

# Characters stripped before the allow-list filter
METACHARACTERS_RE = re.compile(r"[<>\"'`%;&|@$#()]+")
# Same set without parentheses, used by the final pass
FINAL_METACHARACTERS_RE = re.compile(r"[<>\"'`%;&|@$#]+")

# The name part stops at line terminators; case folding is ASCII only
DOUBLE_EXTENSION_RE = re.compile(
    r"[^\n\r\u0085\u2028\u2029]+\.txt\.[A-Za-z0-9]+", re.IGNORECASE | re.ASCII
)
MARKUP_TAG_RE = re.compile(r"<[^>]*>")
SPACE_RUN_RE = re.compile(r" +")
SPACED_DOT_RE = re.compile(r"\s*\.\s*")
DOT_RUN_RE = re.compile(r"\.{2,}")
LEADING_DOTS_UNDERSCORES_RE = re.compile(r"^[._]+")
TRAILING_DOTS_UNDERSCORES_RE = re.compile(r"[._]+$")
UNDERSCORES_BEFORE_DOT_RE = re.compile(r"_+(?=\.|$)")

ALLOWED_PUNCTUATION = frozenset(" ._-")
TRUNCATION_TRAILER = " ._"


def is_control(ch: str) -> bool:
    """Return True for a Unicode control character (category Cc)."""
    return unicodedata.category(ch) == "Cc"


def is_blank(text: str) -> bool:
    """Return True if text holds nothing but whitespace and control characters."""
    return all(ch.isspace() or is_control(ch) for ch in text)


def is_all_dots(text: str) -> bool:
    """Return True for a non-empty string made only of '.' characters."""
    return bool(text) and text.strip(".") == ""


def has_command_separator(text: str) -> bool:
    return COMMAND_SEPARATOR in text


def has_double_extension(text: str) -> bool:
    """Detect names like ``report.txt.exe`` that hide a second extension."""
    return DOUBLE_EXTENSION_RE.fullmatch(text) is not None


def strip_control_chars(text: str) -> str:
    return "".join(ch for ch in text if not is_control(ch))


def strip_separators(text: str) -> str:
    """Delete path separators; components are not interpreted."""
    return text.replace("/", "").replace("\\", "")


def strip_markup(text: str) -> str:
    """Remove tag-like ``<...>`` constructs, keeping the text between them."""
    return MARKUP_TAG_RE.sub("", text)


def strip_metacharacters(text: str) -> str:
    return METACHARACTERS_RE.sub("", text)


def is_allowed_char(ch: str) -> bool:
    """Letters, decimal digits, space, dot, underscore and hyphen are kept."""
    return ch.isalpha() or ch.isdecimal() or ch in ALLOWED_PUNCTUATION


def keep_allowed_chars(text: str) -> str:
    return "".join(ch for ch in text if is_allowed_char(ch))


def collapse_whitespace(text: str) -> str:
    """Collapse space runs and drop the spaces around dots.

    The caller trims the text first; this does not touch the ends.
    """
    text = SPACE_RUN_RE.sub(" ", text)
    return SPACED_DOT_RE.sub(".", text)


def trim_dots_underscores(text: str) -> str:
    """Collapse dot runs and strip dots/underscores from the edges.

    Underscore runs in front of a dot or at the end are removed as well, so
    ``file___.txt`` becomes ``file.txt``. Removing an underscore can expose a
    space at an edge or next to a dot (``_ abc``, ``a _.b``), so the passes
    repeat with whitespace trimming until the text is stable.
    """
    while True:
        previous = text
        text = DOT_RUN_RE.sub(".", text)
        text = LEADING_DOTS_UNDERSCORES_RE.sub("", text)
        text = TRAILING_DOTS_UNDERSCORES_RE.sub("", text)
        text = UNDERSCORES_BEFORE_DOT_RE.sub("", text)
        text = collapse_whitespace(text.strip())
        if text == previous:
            return text


def split_extension(text: str, max_len: int):
    """Return ``(base, extension)`` if text has an extension worth keeping.

    The extension starts at the last dot, which must be neither the first
    nor the last character, and must leave room for at least one base
    character within ``max_len``. Returns None otherwise.
    """
    last_dot = text.rfind(".")
    if last_dot <= 0 or last_dot >= len(text) - 1:
        return None
    extension = text[last_dot:]
    if len(extension) >= max_len:
        return None
    return text[:last_dot], extension


def truncate(text: str, max_len: int) -> str:
    """Cut text to ``max_len`` code points, preserving the extension if any."""
    if len(text) <= max_len:
        return text

    parts = split_extension(text, max_len)
    if parts is None:
        return text[:max_len].rstrip(TRUNCATION_TRAILER)

    base, extension = parts
    base = base[: max_len - len(extension)].rstrip(TRUNCATION_TRAILER)
    return base + extension


def final_pass(text: str) -> str:
    """Re-delete separators, ``..`` sequences, metacharacters and CR/LF."""
    text = strip_separators(text)
    text = text.replace("..", "")
    text = FINAL_METACHARACTERS_RE.sub("", text)
    return text.replace("\r", "").replace("\n", "")
