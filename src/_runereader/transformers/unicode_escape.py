import string
from dataclasses import replace

from _runereader.errors import PositionalError
from _runereader.transformers.transformer import (
    BACKSLASH,
    Transformer,
    read_source_rune,
    unread_source_rune,
)

HEX_DIGITS = 4


def parse_unicode_escape(literal):
    """
    Parses a unicode escape literal of the form '\\uXXXX'.

    >>> parse_unicode_escape("'\\\\u0058'")
    'X'

    :param literal: The escape sequence enclosed in single quotes.
    :raises ValueError: If the digits are not a four digit hexadecimal
        number naming a valid (non-surrogate) code point.
    :returns: The rune the literal names.
    """
    digits = literal[3:-1]
    if len(digits) != HEX_DIGITS or any(d not in string.hexdigits for d in digits):
        raise ValueError("invalid syntax")
    code_point = int(digits, 16)
    if 0xD800 <= code_point <= 0xDFFF:
        raise ValueError("invalid syntax")
    return chr(code_point)


class UnicodeEscape(Transformer):
    """
    Transforms the rune sequence '\\uXXXX' into the rune with code point
    XXXX (hexadecimal). Any other backslash is left as is, for the benefit
    of transformers later in the pipeline. The resulting Char is not marked
    as escaped.
    """

    def transform(self, source, char):
        if char.rune != BACKSLASH:
            return char
        try:
            rune, pos = read_source_rune(source)
        except EOFError:
            raise PositionalError(
                source.position, "unexpected EOF reading unicode escape"
            ) from None
        if rune != "u":
            # May be a rune escape
            unread_source_rune(source, pos)
            return char

        digits = []
        for _ in range(HEX_DIGITS):
            try:
                rune, _ = read_source_rune(source, error_pos=char.pos)
            except EOFError:
                raise PositionalError(
                    char.pos, "unexpected EOF reading unicode escape"
                ) from None
            digits.append(rune)

        literal = "'\\u" + "".join(digits) + "'"
        try:
            rune = parse_unicode_escape(literal)
        except ValueError as err:
            raise PositionalError(
                char.pos, f"error parsing unicode escaped rune {literal}: {err}"
            ) from err
        return replace(char, rune=rune)
