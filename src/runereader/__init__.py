import runereader.version
from _runereader.builder import Builder, make_reader, open_reader
from _runereader.char import Char
from _runereader.errors import (
    BufferStateError,
    IllegalStateError,
    PositionalError,
    PushbackError,
    ReaderError,
    ZeroStateError,
)
from _runereader.position import Position
from _runereader.reader import Reader, State
from _runereader.transformers import Transformer

__author__ = """RuneReader developers"""

__version__ = runereader.version.version

__all__ = [
    "BufferStateError",
    "Builder",
    "Char",
    "IllegalStateError",
    "Position",
    "PositionalError",
    "PushbackError",
    "Reader",
    "ReaderError",
    "State",
    "Transformer",
    "ZeroStateError",
    "make_reader",
    "open_reader",
]
