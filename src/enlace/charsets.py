"""Byte classes for O(1) classification.

All sets are frozensets of byte values for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classification follows the C locale: only ASCII bytes belong to a class.
Bytes >= 0x80 (UTF-8 continuation and lead bytes) are never alphanumeric,
punctuation or whitespace, so a multi-byte character never starts or ends
a link on its own.

Usage:
    from enlace.charsets import ALNUM

    if data[i] in ALNUM:  # O(1) lookup
        ...
"""

import string

ALPHA: frozenset[int] = frozenset(string.ascii_letters.encode("ascii"))

ALNUM: frozenset[int] = ALPHA | frozenset(string.digits.encode("ascii"))

# C ispunct(): printable, not alphanumeric, not space
PUNCT: frozenset[int] = frozenset(string.punctuation.encode("ascii"))

# C isspace(): space, \t, \n, \v, \f, \r
SPACE: frozenset[int] = frozenset(b" \t\n\v\f\r")

# Local part of an email address, walked backward from "@"
EMAIL_LOCAL: frozenset[int] = ALNUM | frozenset(b".+-_")

# Sentence punctuation dropped from the end of a link
TRAILING_PUNCT: frozenset[int] = frozenset(b"?!.,:")

# Closing character -> opening character for the bracket balance rule
BRACKET_PAIRS: dict[int, int] = {
    ord('"'): ord('"'),
    ord("'"): ord("'"),
    ord(")"): ord("("),
    ord("]"): ord("["),
    ord("}"): ord("{"),
}

AT = ord("@")
COLON = ord(":")
SLASH = ord("/")
DOT = ord(".")
DASH = ord("-")
UNDERSCORE = ord("_")
SEMICOLON = ord(";")
AMPERSAND = ord("&")
LT = ord("<")
GT = ord(">")
