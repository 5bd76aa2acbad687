"""
A CheckpointBuffer is an append only queue with a read cursor which can be
saved and restored. Elements are written at the end of the buffer and read
(peeked and consumed) at the read cursor. As consumed elements are kept
until the buffer is committed, the read cursor can be moved back to any
saved state, making all elements consumed since that state readable again.

Elements are stored in rows of fixed size. The rows are numpy object arrays
which are allocated up front, and rows released by a commit are reused
for new elements.
"""

import logging
from dataclasses import dataclass

import numpy as np

from _runereader.errors import IllegalStateError, ZeroStateError

logger = logging.getLogger(__name__)

DEFAULT_ROW_SIZE = 100
DEFAULT_ROWS = 10


@dataclass(frozen=True)
class BufferState:
    """
    A saved read cursor of a CheckpointBuffer. The index is the absolute
    index of the element at the cursor, counting every element ever
    written, and generation is the number of commits the buffer had
    seen when the state was saved. BufferState() is the zero state, which
    can not be rolled back to.
    """

    index: int = -1
    generation: int = -1

    @property
    def is_zero(self):
        return self.index < 0


class CheckpointBuffer:
    def __init__(self, row_size=DEFAULT_ROW_SIZE, rows=DEFAULT_ROWS):
        """
        :param row_size: Number of elements in each row.
        :param rows: Number of rows allocated initially. More rows
            are allocated when needed.
        """
        if row_size < 1 or rows < 1:
            raise ValueError(
                f"Buffer sizes must be positive, got row_size={row_size}, rows={rows}"
            )
        self._row_size = row_size
        self._rows = []
        self._spare_rows = [self._allocate_row() for _ in range(rows)]
        # absolute index of the first element of self._rows[0]
        self._offset = 0
        self._read = 0
        self._write = 0
        self._generation = 0

    def _allocate_row(self):
        return np.empty(self._row_size, dtype=object)

    def _locate(self, index):
        return divmod(index - self._offset, self._row_size)

    def __len__(self):
        """
        :returns: Number of elements retained by the buffer, consumed
            or not.
        """
        return self._write - self._offset

    def buffered(self):
        """
        :returns: Number of written elements not yet consumed.
        """
        return self._write - self._read

    def write(self, element):
        row, col = self._locate(self._write)
        if row == len(self._rows):
            if self._spare_rows:
                self._rows.append(self._spare_rows.pop())
            else:
                self._rows.append(self._allocate_row())
        self._rows[row][col] = element
        self._write += 1

    def next(self):
        """
        :returns: Tuple of the element at the read cursor and True, or
            (None, False) if there is no unconsumed element.
        """
        if self._read >= self._write:
            return None, False
        row, col = self._locate(self._read)
        return self._rows[row][col], True

    def consume(self):
        """
        Moves the read cursor past the next element. Does nothing if there
        is no unconsumed element.
        """
        if self._read < self._write:
            self._read += 1

    def state(self):
        return BufferState(index=self._read, generation=self._generation)

    def rollback(self, state):
        """
        Moves the read cursor back (or forward) to the given state.

        :raises ZeroStateError: If state is the zero state.
        :raises IllegalStateError: If the buffer has been committed since
            the state was saved, or the state is otherwise not a valid
            read cursor for this buffer.
        """
        if state.is_zero:
            raise ZeroStateError()
        if (
            state.generation != self._generation
            or not self._offset <= state.index <= self._write
        ):
            raise IllegalStateError(
                f"rollback to illegal state (index {state.index}, generation "
                f"{state.generation}), buffer is at generation {self._generation}"
            )
        logger.debug("Rolling back read cursor from %d to %d", self._read, state.index)
        self._read = state.index

    def commit(self):
        """
        Releases the rows before the row of the read cursor, so that they
        can be reused. All states saved before the commit become illegal.
        """
        released, _ = self._locate(self._read)
        for row in self._rows[:released]:
            row.fill(None)
            self._spare_rows.append(row)
        del self._rows[:released]
        self._offset += released * self._row_size
        self._generation += 1
        logger.debug(
            "Committed buffer, released %d rows, generation is now %d",
            released,
            self._generation,
        )
