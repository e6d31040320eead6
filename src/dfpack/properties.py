"""Reading and writing the line-oriented ``.properties`` key/value format."""

from __future__ import annotations

from typing import Iterator

__all__ = ["parse_properties", "store_properties"]

_COMMENT_CHARS = ("#", "!")
_SEPARATORS = {"=", ":"}
_WHITESPACE = " \t\f"
_SPECIAL_CHARS = {"=", ":", "#", "!"}
_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = set("0123456789abcdefABCDEF")


def _logical_lines(text: str) -> Iterator[str]:
    """Yield logical lines: comments and blanks dropped, ``\\`` continuations joined."""
    pending: str | None = None
    for raw_line in text.splitlines():
        line = raw_line.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line.startswith(_COMMENT_CHARS):
                continue
            pending = ""
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = None
    if pending:
        yield pending


def _unescape(text: str, strip_trailing: bool = False) -> str:
    out: list[str] = []
    keep = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            if i + 1 >= len(text):
                break
            nxt = text[i + 1]
            hex_digits = text[i + 2 : i + 6]
            if nxt == "u" and len(hex_digits) == 4 and set(hex_digits) <= _HEX_DIGITS:
                out.append(chr(int(hex_digits, 16)))
                i += 6
            else:
                out.append(_UNESCAPES.get(nxt, nxt))
                i += 2
            keep = len(out)
            continue
        out.append(ch)
        i += 1
        if ch not in _WHITESPACE:
            keep = len(out)
    if strip_trailing:
        out = out[:keep]
    # \uXXXX pairs may spell UTF-16 surrogates; fold them into single characters
    return "".join(out).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _split_line(line: str) -> tuple[str, str]:
    idx = 0
    while idx < len(line):
        ch = line[idx]
        if ch == "\\":
            idx += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        idx += 1
    key = line[:idx]

    rest = line[idx:].lstrip(_WHITESPACE)
    if rest[:1] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``.properties`` text into a dict.

    Blank lines and lines starting with ``#`` or ``!`` are ignored, and a line
    ending in an unescaped ``\\`` continues on the next one. The key ends at the
    first unescaped ``=``, ``:`` or whitespace. Backslash escapes, ``\\uXXXX``
    included, are decoded in keys and values. Unescaped trailing whitespace of a
    value is dropped. Later duplicates win.
    """
    result: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_line(line)
        result[_unescape(key)] = _unescape(value, strip_trailing=True)
    return result


def _escape(text: str, is_key: bool) -> str:
    out: list[str] = []
    last = len(text) - 1
    for i, ch in enumerate(text):
        if ch == "\\":
            out.append("\\\\")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ch == " " and (is_key or i == 0 or i == last):
            out.append("\\ ")
        elif ch in _SPECIAL_CHARS:
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) > 0x7E:
            units = ch.encode("utf-16-be", "surrogatepass")
            for j in range(0, len(units), 2):
                out.append(f"\\u{int.from_bytes(units[j : j + 2], 'big'):04X}")
        else:
            out.append(ch)
    return "".join(out)


def store_properties(values: dict[str, str], comment: str | None = None) -> str:
    """Serialize ``values`` in insertion order, with an optional leading comment.

    Output is escaped the way ``java.util.Properties`` expects, with characters
    outside the Basic Multilingual Plane written as surrogate pairs. A trailing
    space is escaped too, so :func:`parse_properties` reads every value back
    unchanged. No timestamp line is written, so equal input always gives equal
    output.
    """
    lines: list[str] = []
    if comment:
        lines.append("#" + comment)
    for key, value in values.items():
        lines.append(f"{_escape(key, True)}={_escape(value, False)}")
    return "\n".join(lines) + "\n"
