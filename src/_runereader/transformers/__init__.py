"""
A transformer takes a Char freshly read from a rune source and returns the
Char the reader should produce in its place. Transformers are applied one
after the other, in the order they are installed, each given the output
of the one before.

A transformer may read further runes from the source in order to decide
what to return, ie. a unicode escape transformer reads the 'uXXXX'
following a backslash. A rune that was read but is not part of the
sequence the transformer looks for must be pushed back, so that the
source (and its position) is left exactly as the transformer found it.
"""

from .normalize_newline import NormalizeNewline
from .rune_escape import RuneEscape
from .transformer import Transformer
from .unicode_escape import UnicodeEscape

__all__ = ["NormalizeNewline", "RuneEscape", "Transformer", "UnicodeEscape"]
