from dataclasses import replace

from _runereader.errors import PositionalError
from _runereader.transformers.transformer import (
    BACKSLASH,
    Transformer,
    read_source_rune,
)


class RuneEscape(Transformer):
    """
    Transforms the rune sequence '\\<rune>' into a single escaped Char. If
    <rune> is a key in escapes, the Char holds the mapped rune, otherwise
    it holds <rune> itself, ie. with escapes={"t": "\\t"} the sequence
    '\\t' becomes a tab and '\\\\' becomes a backslash.
    """

    def __init__(self, escapes):
        """
        :param escapes: Mapping from escaped rune to the rune it represents.
        """
        for from_rune, to_rune in escapes.items():
            if len(from_rune) != 1 or len(to_rune) != 1:
                raise ValueError(
                    f"Rune escapes must map single runes, got {from_rune!r}: {to_rune!r}"
                )
        self.escapes = dict(escapes)

    def transform(self, source, char):
        if char.rune != BACKSLASH:
            return char
        try:
            rune, _ = read_source_rune(source, error_pos=char.pos)
        except EOFError:
            raise PositionalError(
                char.pos, "unexpected EOF reading rune escape"
            ) from None
        return replace(char, rune=self.escapes.get(rune, rune), escaped=True)
