# mpris_presence/text.py
import unicodedata
from functools import lru_cache
from typing import Callable, Optional

from .debug import debug_log
from .errors import StyleTransformFailed

Modifier = Callable[[str], Optional[str]]

STOP_CHARS = frozenset("([")
IGNORE_CHARS = frozenset("() []\",\n\u00a0'-")
ELLIPSIS = "..."

_NAME_PREFIXES = (
    ("LATIN CAPITAL LETTER ", "CAPITAL "),
    ("LATIN SMALL LETTER ", "SMALL "),
    ("GREEK CAPITAL LETTER ", "CAPITAL "),
    ("GREEK SMALL LETTER ", "SMALL "),
    ("DIGIT ", "DIGIT "),
)

# Reserved code points in the math block; Unicode points these at Letterlike Symbols.
_HOLES = {
    ("ITALIC", "h"): "\u210e",
}


def format_time(secs: int) -> str:
    """Seconds to "m:ss". A remainder of exactly 60 is not rolled over."""
    mins = 0
    while secs > 60:
        secs -= 60
        mins += 1

    sec_str = str(secs)
    if len(sec_str) < 2:
        sec_str = "0" + sec_str
    return f"{mins}:{sec_str}"


@lru_cache(maxsize=1024)
def _math_variant(style: str, ch: str) -> Optional[str]:
    hole = _HOLES.get((style, ch))
    if hole:
        return hole

    try:
        name = unicodedata.name(ch)
    except ValueError:
        return None

    for prefix, replacement in _NAME_PREFIXES:
        if name.startswith(prefix):
            suffix = replacement + name[len(prefix):]
            break
    else:
        return None

    try:
        return unicodedata.lookup(f"MATHEMATICAL {style} {suffix}")
    except KeyError:
        return None


def math_bold(ch: str) -> Optional[str]:
    return _math_variant("BOLD", ch)


def math_italic(ch: str) -> Optional[str]:
    return _math_variant("ITALIC", ch)


def math_bold_script(ch: str) -> Optional[str]:
    return _math_variant("BOLD SCRIPT", ch)


def style_text(s: str, modifier: Modifier) -> str:
    """
    Restyle `s` one character at a time.

    Scanning stops at the first "(" or "[" and the rest of the string is
    appended as-is, so suffixes like "(feat. X)" stay plain. Punctuation in
    IGNORE_CHARS passes through; anything else without a variant raises
    StyleTransformFailed.
    """
    out = []
    stop_at = len(s)

    for index, ch in enumerate(s):
        variant = modifier(ch)
        if variant is not None:
            out.append(variant)
        elif ch in STOP_CHARS:
            stop_at = index
            break
        elif ch in IGNORE_CHARS:
            out.append(ch)
        else:
            debug_log(f"Wrong char code: {ord(ch)} ----{ch}")
            raise StyleTransformFailed(ch)

    out.append(s[stop_at:])
    return "".join(out)


def style_or_plain(s: str, modifier: Modifier) -> str:
    try:
        return style_text(s, modifier)
    except StyleTransformFailed:
        return s


def truncate_utf8_bytes(s: str, max_bytes: int) -> str:
    size = 0
    out = []

    for ch in s:
        char_len = len(ch.encode("utf-8"))
        if size + char_len > max_bytes:
            out.append(ELLIPSIS)
            break
        size += char_len
        out.append(ch)

    return "".join(out)
