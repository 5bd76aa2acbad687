from dataclasses import replace

from _runereader.transformers.transformer import (
    Transformer,
    read_source_rune,
    unread_source_rune,
)

LINE_FEED = "\u000A"
CARRIAGE_RETURN = "\u000D"


class NormalizeNewline(Transformer):
    """
    Transforms the newline sequences LF, CR and CR+LF into a single
    LF, and moves the source position to the start of the next row.
    """

    def transform(self, source, char):
        if char.rune == LINE_FEED:
            source.newline()
        elif char.rune == CARRIAGE_RETURN:
            char = replace(char, rune=LINE_FEED)
            source.newline()
            try:
                rune, pos = read_source_rune(source)
            except EOFError:
                return char
            if rune == LINE_FEED:
                # The LF of CR+LF, already accounted for by the newline above
                source.step(-1)
            else:
                unread_source_rune(source, pos)
        return char
