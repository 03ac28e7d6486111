"""URI parsing into scheme, userinfo, host, port, path, query and fragment."""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_PORT = 65536
"""Largest port number accepted by the parser."""

# Leading C whitespace, an optional sign and decimal digits, as an
# unsigned base-10 conversion reads them.
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def _span_until(text: str, start: int, chars: str) -> int:
    """Return the index of the first character of ``chars`` at or after ``start``."""
    return next(
        (i for i in range(start, len(text)) if text[i] in chars), len(text)
    )


def _parse_port(text: str, start: int) -> tuple[str, int]:
    """Read a port number at ``start``; return its text and where it ends."""
    match = _NUMBER.match(text, start)
    if match is None:
        return "", start
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-" and value != 0:
        raise ValueError(f"invalid port in {text!r}")
    if value > MAX_PORT:
        raise ValueError(f"port {value} out of range in {text!r}")
    return text[start:match.end()], match.end()


@dataclass(frozen=True)
class Uri:
    """A parsed URI (RFC 3986 layout).

    ``text`` is the full URI as reassembled from its parts; the other
    fields hold each component without its delimiter, or an empty string
    when the component is absent.
    """

    text: str
    scheme: str
    userinfo: str
    host: str
    port: str
    path: str
    query: str
    fragment: str

    def __str__(self) -> str:
        return self.text

    @classmethod
    def parse(cls, text: str) -> "Uri":
        """Parse ``text``; raises ValueError if it is not a valid URI."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        colon = text.find(":")
        if colon == -1:
            raise ValueError(f"missing scheme in {text!r}")

        scheme = text[:colon]
        pos = colon + 1
        authority = text.startswith("//", pos)
        userinfo = host = port = ""
        has_userinfo = has_port = False

        if authority:
            pos += 2

            at = text.find("@", pos)
            if at != -1:
                userinfo = text[pos:at]
                has_userinfo = True
                pos = at + 1

            if text.startswith("[", pos):
                close = text.find("]", pos)
                if close == -1:
                    raise ValueError(f"unterminated IP literal in {text!r}")
                end = close + 1
            else:
                end = _span_until(text, pos, ":/?#")
            host = text[pos:end]
            pos = end

            colon = text.find(":", pos)
            if colon != -1:
                if colon + 1 == len(text):
                    raise ValueError(f"empty port in {text!r}")
                port, pos = _parse_port(text, colon + 1)
                has_port = True

        end = _span_until(text, pos, "?#")
        path = text[pos:end]
        pos = end

        query = ""
        has_query = False
        mark = text.find("?", pos)
        if mark != -1:
            end = _span_until(text, mark, "#")
            query = text[mark + 1:end]
            has_query = True
            pos = end

        fragment = ""
        has_fragment = pos < len(text) and text[pos] == "#"
        if has_fragment:
            fragment = text[pos + 1:]

        full = "".join(
            (
                scheme,
                ":",
                "//" if authority else "",
                userinfo + "@" if has_userinfo else "",
                host,
                ":" + port if has_port else "",
                path,
                "?" + query if has_query else "",
                "#" + fragment if has_fragment else "",
            )
        )

        return cls(
            text=full,
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )


def parse_uri(text: str) -> Uri:
    """Parse ``text`` into a :class:`Uri`; raises ValueError on error."""
    return Uri.parse(text)