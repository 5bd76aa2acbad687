from dataclasses import dataclass

from _runereader.position import Position


@dataclass(frozen=True)
class Char:
    """
    A logical character read by a Reader: the rune, the source position of
    the (first) raw rune it was read from and whether it was given as an
    escape sequence, ie. '\\t'.
    """

    rune: str
    pos: Position
    escaped: bool = False

    def __str__(self):
        escape = "\\" if self.escaped else ""
        return f"<{escape}{self.rune},[{self.pos}]>"
