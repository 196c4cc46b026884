"""Structural URL validation restricted to the http/https schemes."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Characters a URL parser refuses inside a host name.
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>\\^|\"`{}%]")
# Leading/trailing C0 controls and spaces are discarded before parsing.
_EDGE_JUNK = "".join(chr(code) for code in range(0x21))


def validate(raw: object) -> bool:
    """Return True when ``raw`` is a well-formed http(s) URL with a host."""
    if not isinstance(raw, str):
        return False
    candidate = raw.strip(_EDGE_JUNK)
    if not candidate:
        return False
    try:
        parts = urlsplit(candidate)
        # Accessing .port raises ValueError for out-of-range or non-numeric ports.
        parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        return False
    host = parts.hostname or ""
    if not host or _FORBIDDEN_HOST_CHARS.search(host):
        return False
    return True
