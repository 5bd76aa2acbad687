from abc import ABC, abstractmethod

from _runereader.errors import PositionalError, PushbackError

BACKSLASH = "\\"


class Transformer(ABC):
    @abstractmethod
    def transform(self, source, char):
        """
        :param source: The RuneSource the char was read from, positioned
            after the char.
        :param char: The Char to transform.
        :returns: The transformed Char.
        """
        pass


def read_source_rune(source, error_pos=None):
    """
    Reads a rune from the source, converting stream failures into
    PositionalError. EOFError is not converted.

    :param error_pos: Position reported for stream failures, defaults to
        the position of the rune that could not be read.
    :returns: Tuple of the rune and its position.
    """
    pos = source.position
    try:
        return source.read_rune()
    except (OSError, ValueError) as err:
        raise PositionalError(
            error_pos or pos, f"error reading rune from source: {err}"
        ) from err


def unread_source_rune(source, pos):
    """
    Pushes back the last read rune, converting a failing push back into
    PositionalError at pos.
    """
    try:
        source.unread_rune()
    except PushbackError as err:
        raise PositionalError(pos, f"error unreading rune from source: {err}") from err
