"""
=============================================================================
HEADER KEY NORMALIZER
=============================================================================

Turns an HTTP header name into a lower-camel-case field name:

    Content-Type            →  contentType
    X-Cache                 →  xCache
    content-security-policy →  contentSecurityPolicy
    Alt-Svc/Extra           →  altSvcExtra
    Server                  →  server

=============================================================================
ALGORITHM
=============================================================================

    "Content-Type"
         │  1. "-" and "/" become spaces
         ▼
    "Content Type"
         │  2. Title-case each word (first char upper, rest lower)
         ▼
    "Content Type"
         │  3. Lower-case the first word
         ▼
    "content Type"
         │  4. Drop the spaces
         ▼
    "contentType"

Consecutive separators produce empty words, which contribute nothing.
Casing is Python's str.upper()/str.lower(), which never depends on locale.

A key that is already a normalized field name is returned untouched, so
normalize_key(normalize_key(k)) == normalize_key(k).

=============================================================================
"""

import re


_SEPARATORS = str.maketrans({"-": " ", "/": " "})
_NORMALIZED = re.compile(r"[a-z][A-Za-z0-9]*")


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def normalize_key(key: str) -> str:
    """
    Normalize a raw header key into a lower-camel-case field name.

    Never raises; an empty key normalizes to an empty string.

    Example:
        normalize_key("X-Frame-Options")  # "xFrameOptions"
    """
    if _NORMALIZED.fullmatch(key):
        return key

    words = [_title(word) for word in key.translate(_SEPARATORS).split(" ")]
    words[0] = words[0].lower()
    return "".join(words)
