from dataclasses import dataclass, field

from _runereader.buffer import BufferState
from _runereader.char import Char
from _runereader.errors import ReaderError
from _runereader.transformers.transformer import read_source_rune


@dataclass(frozen=True)
class State:
    """
    A saved read state of a Reader, see Reader.state and Reader.rollback.
    State() is the zero state, which a Reader refuses to roll back to.
    """

    buffer_state: BufferState = field(default_factory=BufferState)


class Reader:
    """
    Reads Chars from a rune source. Each rune read from the source is passed
    through the configured transformers (see Builder), so a Char may
    represent a sequence of runes in the source, ie. an escape sequence.
    Therefore the positions of consecutive Chars are not necessarily
    consecutive positions.

    The source is treated as a two-dimensional document of rows and
    columns, and each Char carries the position of the (first) rune it was
    read from. Only a newline transformer moves the position to a new row.

    The reader supports two models of lookahead:

    * Single Char lookahead with next/consume. Reader.next returns the next
      unconsumed Char, and keeps returning it until Reader.consume is
      called.
    * Multiple Char lookahead with state/rollback. Reader.rollback moves the
      reader back to a state saved with Reader.state, after which the Chars
      consumed since the state was saved are returned again (without
      reading or transforming them again).

    As consumed Chars are kept for rollbacks, Reader.commit should be called
    whenever the caller no longer needs to roll back to earlier states.

    >>> reader = Builder().with_source(io.StringIO("ab")).reader()
    >>> reader.next()
    Char(rune='a', pos=Position(row=1, col=1), escaped=False)
    >>> reader.consume()
    >>> reader.next().rune
    'b'
    """

    def __init__(self, source, buffer, transformers=()):
        """
        :param source: The RuneSource to read from.
        :param buffer: The CheckpointBuffer holding read Chars.
        :param transformers: Transformers to apply to each read rune,
            in order.
        """
        self._source = source
        self._buffer = buffer
        self._transformers = tuple(transformers)

    @property
    def position(self):
        """
        The position of the next rune to be read from the source. Note that
        this is ahead of the position of Reader.next() when Chars
        have been read ahead.
        """
        return self._source.position

    @property
    def transformers(self):
        return self._transformers

    def __iter__(self):
        """
        Iterates over (and consumes) the remaining Chars.
        """
        while True:
            try:
                char = self.next()
            except EOFError:
                return
            yield char
            self.consume()

    def next(self):
        """
        :raises EOFError: If there are no more runes in the source. Every
            subsequent call raises EOFError again.
        :raises PositionalError: If the source could not be read, or
            a transformer failed.
        :returns: The next unconsumed Char.
        """
        if self._buffer.buffered() == 0:
            self._buffer_char()
        char, ok = self._buffer.next()
        if not ok:
            # Not expected, a char is buffered above when the buffer is empty
            raise ReaderError("unexpected empty buffer")
        return char

    def consume(self):
        """
        Consumes the Char returned by Reader.next.
        """
        self._buffer.consume()

    def state(self):
        """
        :returns: The current read state, to be given to Reader.rollback.
        """
        return State(self._buffer.state())

    def rollback(self, state):
        """
        Resets the reader to the given state, so that the next Char is
        the one that was next when the state was saved.

        :raises ZeroStateError: If given the zero state, State().
        :raises IllegalStateError: If the reader has been committed
            since the state was saved.
        """
        self._buffer.rollback(state.buffer_state)

    def commit(self):
        """
        Releases consumed Chars held for rollbacks. States saved before the
        commit can no longer be rolled back to.
        """
        self._buffer.commit()

    def _buffer_char(self):
        rune, pos = read_source_rune(self._source)
        char = Char(rune, pos)
        for transformer in self._transformers:
            char = transformer.transform(self._source, char)
        self._buffer.write(char)
