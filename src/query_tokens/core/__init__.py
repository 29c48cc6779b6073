"""
Core Package

The token sequence and the cursors that navigate and edit it.

**CURSOR VALIDITY:**

Cursors hold coordinates plus a reference to their sequence. They are
never rebased, so a cursor is only valid until the next structural
mutation of its sequence. Chain edits through the RangeCursor that each
mutation returns:

    >>> seq = TokenSequence("a = 1 and b = 2")
    >>> written = seq.find("and").replace("or")
    >>> written.first().select_next().replace("c")
    RangeCursor(start=4, end=5)
    >>> str(seq)
    'a = 1 or c = 2'
"""

from .cursors import ItemCursor, RangeCursor
from .replacement import LiteralReplacement, TransformReplacement, as_replacement
from .sequence import TokenSequence

__all__ = [
    "TokenSequence",
    "ItemCursor",
    "RangeCursor",
    "LiteralReplacement",
    "TransformReplacement",
    "as_replacement",
]
