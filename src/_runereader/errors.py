class ReaderError(Exception):
    """
    Base class of all errors raised by a Reader. Note that end of stream
    is not a ReaderError, it is signaled by the builtin EOFError.
    """

    pass


class PositionalError(ReaderError):
    """
    Raised when reading or transforming the source failed at a given
    position, ie. a malformed escape sequence or a failing stream.
    The underlying error, if any, is available as __cause__.
    """

    def __init__(self, position, message):
        super().__init__(position, message)
        self.position = position
        self.message = message

    @property
    def row(self):
        return self.position.row

    @property
    def col(self):
        return self.position.col

    def __str__(self):
        return f"{self.position}: {self.message}"


class PushbackError(ReaderError):
    """
    Raised when a rune is pushed back to the source without there being
    a read rune to push back.
    """

    pass


class BufferStateError(ReaderError):
    """
    Raised when rolling back to a state that can not be restored.
    """

    pass


class ZeroStateError(BufferStateError):
    """
    Thrown when rolling back to a state that was not created by
    the buffer (or reader) it is given to.
    """

    def __init__(self, message="rollback to zero state"):
        super().__init__(message)


class IllegalStateError(BufferStateError):
    """
    Thrown when rolling back to a state which refers to history that
    has since been committed.
    """

    def __init__(self, message="rollback to illegal state"):
        super().__init__(message)
