import pathlib
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, replace

from _runereader.buffer import DEFAULT_ROW_SIZE, DEFAULT_ROWS, CheckpointBuffer
from _runereader.reader import Reader
from _runereader.source import RuneSource
from _runereader.transformers import (
    NormalizeNewline,
    RuneEscape,
    UnicodeEscape,
)


@dataclass(frozen=True)
class Builder:
    """
    Builds a Reader. Every method returns a new Builder, so a partially
    configured builder can be reused for several sources.

    >>> reader = (
    ...     Builder()
    ...     .with_source(io.StringIO("a\\\\tb"))
    ...     .with_normalize_newline()
    ...     .with_rune_escape({"t": "\\t"})
    ...     .reader()
    ... )
    """

    source: object = None
    row_size: int = DEFAULT_ROW_SIZE
    rows: int = DEFAULT_ROWS
    transformers: tuple = ()
    encoding: str = "utf-8"
    errors: str = "replace"

    def with_source(self, source):
        """
        :param source: A byte or text stream, ie. io.BytesIO(b"abc")
            or open("file.txt").
        """
        return replace(self, source=source)

    def with_size(self, row_size, rows):
        """
        Sets the number of initial rows, and the size of each row, of the
        buffer holding read Chars. The buffer grows as needed, so this is
        only a performance hint.
        """
        return replace(self, row_size=row_size, rows=rows)

    def with_encoding(self, encoding, errors="replace"):
        """
        Sets the encoding used to decode byte sources, and the decoding
        error handler (see codecs).
        """
        return replace(self, encoding=encoding, errors=errors)

    def with_transformer(self, transformer):
        return replace(self, transformers=self.transformers + (transformer,))

    def with_normalize_newline(self):
        """
        Adds a newline normalizer, transforming CR and CR+LF to LF
        and moving the position to a new row for each newline.
        """
        return self.with_transformer(NormalizeNewline())

    def with_unicode_escape(self):
        """
        Adds a unicode escape transformer, transforming '\\uXXXX' into the
        rune with the hexadecimal code point XXXX.
        """
        return self.with_transformer(UnicodeEscape())

    def with_rune_escape(self, escapes):
        """
        Adds a rune escape transformer, transforming '\\<rune>' into
        escapes[<rune>] if present, otherwise <rune>. In both cases the
        Char is marked as escaped.

        :param escapes: Mapping from escaped rune to resulting rune,
            ie. {"t": "\\t", "n": "\\n"}.
        """
        return self.with_transformer(RuneEscape(escapes))

    def reader(self):
        """
        :raises ValueError: If no source has been given.
        :returns: The configured Reader.
        """
        if self.source is None:
            raise ValueError("Cannot build a Reader without a source, see with_source")
        check_transformer_order(self.transformers)
        return Reader(
            RuneSource(self.source, encoding=self.encoding, errors=self.errors),
            CheckpointBuffer(self.row_size, self.rows),
            self.transformers,
        )


def check_transformer_order(transformers):
    rune_escape_seen = False
    for transformer in transformers:
        if isinstance(transformer, RuneEscape):
            rune_escape_seen = True
        elif isinstance(transformer, UnicodeEscape) and rune_escape_seen:
            warnings.warn(
                "Rune escape transformer is applied before unicode escape "
                "transformer, '\\uXXXX' will be read as the escaped rune 'u' "
                "followed by XXXX."
            )
            return


def make_reader(source):
    """
    :returns: A Reader for the given source with default buffer size and
        no transformers.
    """
    return Builder().with_source(source).reader()


@contextmanager
def open_reader(filelike, builder=None):
    """
    Context manager for a Reader of the given file.

    >>> with open_reader("file.txt", Builder().with_normalize_newline()) as reader:
    ...     text = "".join(c.rune for c in reader)

    :param filelike: Either a path to the file, which is opened in binary
        mode and closed on exit, or an open stream.
    :param builder: The Builder configuring the reader, the source is
        replaced by the file.
    """
    if builder is None:
        builder = Builder()
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rb") as stream:
            yield builder.with_source(stream).reader()
    else:
        yield builder.with_source(filelike).reader()
