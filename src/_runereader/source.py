"""
The rune source reads runes (single unicode code points) from a stream and
keeps track of the position of the next rune to be read.

Both byte streams and text streams are supported. Byte streams are decoded
incrementally, so the source never has to read more of the stream than
what has been asked for (plus one chunk).

A rune source supports pushing back exactly one rune, which lets a
transformer look at the rune following the current one and return it to
the source if it turns out not to be part of the sequence it looks for.
"""

import codecs

from _runereader.errors import PushbackError
from _runereader.position import START_POSITION, Position

DEFAULT_CHUNK_SIZE = 4096


class RuneSource:
    def __init__(
        self, stream, encoding="utf-8", errors="replace", chunk_size=None
    ):
        """
        :param stream: Any object with a read(size) method returning either
            bytes or str.
        :param encoding: The encoding used to decode a byte stream, not used
            for text streams.
        :param errors: The error handler for decoding, see codecs. The
            default replaces malformed input with U+FFFD.
        :param chunk_size: Number of bytes/characters requested from the
            stream in each read.
        """
        self._stream = stream
        self._encoding = encoding
        self._errors = errors
        self._chunk_size = chunk_size or DEFAULT_CHUNK_SIZE
        self._decoder = None
        self._chunk = ""
        self._index = 0
        self._exhausted = False
        self._undecoded = b""
        self._decode_error = None
        self._last = None
        self._pushed_back = None
        self._pos = START_POSITION

    @property
    def position(self):
        """
        The position of the next rune to be read.
        """
        return self._pos

    def read_rune(self):
        """
        Read the next rune from the source.

        :raises EOFError: When there are no more runes in the stream.
        :returns: Tuple of the rune and its position.
        """
        self._last = None
        if self._pushed_back is not None:
            rune = self._pushed_back
            self._pushed_back = None
        else:
            rune = self._read_from_stream()
        self._last = rune
        return rune, self.step(1)

    def unread_rune(self):
        """
        Push back the last read rune, so that it is returned by the next call
        to read_rune. Only the single last read rune can be pushed back.

        :raises PushbackError: If there is no read rune to push back.
        """
        if self._last is None:
            raise PushbackError("unread_rune called without a preceding read_rune")
        self._pushed_back = self._last
        self._last = None
        self.step(-1)

    def step(self, delta):
        """
        Moves the position delta columns.

        :returns: The position before the move.
        """
        pos = self._pos
        row = pos.row
        col = pos.col + delta
        if col < 0:
            if row > 0:
                row -= 1
            col = 0
        self._pos = Position(row, col)
        return pos

    def newline(self):
        """
        Moves the position to the start of the next row.
        """
        self._pos = Position(self._pos.row + 1, START_POSITION.col)

    def _read_from_stream(self):
        while self._index >= len(self._chunk):
            if self._decode_error is not None:
                err, self._decode_error = self._decode_error, None
                raise err
            if self._exhausted and not self._undecoded:
                raise EOFError("end of rune source")
            self._fill()
        rune = self._chunk[self._index]
        self._index += 1
        return rune

    def _fill(self):
        if self._undecoded:
            data, self._undecoded = self._undecoded, b""
        else:
            data = self._stream.read(self._chunk_size)
        if isinstance(data, (bytes, bytearray)):
            text = self._decode(data)
        else:
            text = data or ""
        if not data:
            self._exhausted = True
        self._chunk = text
        self._index = 0

    def _decode(self, data):
        """
        Decodes data, the runes before a malformed sequence are returned and
        the error is kept until those runes have been read. Decoding then
        continues after the malformed sequence.
        """
        if self._decoder is None:
            self._decoder = codecs.getincrementaldecoder(self._encoding)(
                errors=self._errors
            )
        try:
            return self._decoder.decode(data, final=not data)
        except UnicodeDecodeError as err:
            self._decoder.reset()
            self._decode_error = err
            self._undecoded = bytes(err.object[err.end :])
            return self._decoder.decode(err.object[: err.start])
