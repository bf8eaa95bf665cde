"""Trailing delimiter trimming.

Link boundaries in prose are ambiguous. A tentative link runs up to the
next whitespace, which usually drags along sentence punctuation, a closing
parenthesis that belongs to the surrounding text, or an HTML character
reference. trim_delimiters() pulls the end of the span back past those.

Rules, in order:
1. An embedded ``<`` ends the link (an HTML tag starts there).
2. Repeatedly drop a trailing ``? ! . , :``, or a trailing ``;`` together
   with the character reference it terminates (``&amp;``).
3. Once, after the loop: drop a trailing ``" ' ) ] }`` unless the span
   holds as many matching openers as closers.

Examples:
    foo http://www.pokemon.com/Pikachu_(Electric) bar
        => http://www.pokemon.com/Pikachu_(Electric)

    foo (http://www.pokemon.com/Pikachu_(Electric)) bar
        => http://www.pokemon.com/Pikachu_(Electric)

    foo http://www.pokemon.com/Pikachu_(Electric)) bar
        => http://www.pokemon.com/Pikachu_(Electric))

Thread Safety:
Pure function over an immutable buffer.

"""

from __future__ import annotations

from enlace.charsets import ALPHA, AMPERSAND, BRACKET_PAIRS, SEMICOLON, TRAILING_PUNCT
from enlace.span import Span


def trim_delimiters(data: bytes | bytearray, span: Span) -> Span | None:
    """Shrink ``span`` so it no longer ends in surrounding punctuation.

    The span is only ever narrowed from the right; ``start`` never moves.
    Running the trimmer on its own output returns the same span.

    Args:
        data: Text buffer the span points into
        span: Tentative link covering everything up to the next whitespace

    Returns:
        The trimmed span, or None if nothing is left of it
    """
    start, end = span.start, span.end

    lt = data.find(b"<", start, end)
    if lt != -1:
        end = lt

    while end > start:
        c = data[end - 1]

        if c in TRAILING_PUNCT:
            end -= 1

        elif c == SEMICOLON:
            # Possible character reference: &name;
            ref = end - 2
            while ref > start and data[ref] in ALPHA:
                ref -= 1

            if start <= ref < end - 2 and data[ref] == AMPERSAND:
                end = ref
            else:
                end -= 1

        else:
            break

    if end == start:
        return None

    closer = data[end - 1]
    opener = BRACKET_PAIRS.get(closer)
    if opener is not None:
        opening = data.count(opener, start, end)
        # Quotes open and close with the same byte; every one counts as an
        # opener, so a trailing quote never balances.
        closing = 0 if opener == closer else data.count(closer, start, end)
        if opening != closing:
            end -= 1

    if end == start:
        return None
    return Span(start, end)
