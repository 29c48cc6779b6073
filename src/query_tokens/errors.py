"""
Module: errors

Purpose:
    Exception types raised by the token editing engine.

    Lookups that find nothing (``find``, a selection whose first step
    fails) are not errors: they return ``None`` and callers check for it.

Key Classes:
    - TokenEditError: Base class for all engine errors
    - InvalidArgumentError: Bad payload, predicate, step or replacement
    - EmptySequenceError: first()/last() requested on an empty sequence
    - StaleCursorError: Item cursor points outside its sequence

Used By:
    - core.sequence, core.cursors, core.selection, core.replacement
    - config: LexerConfig validation
"""

from __future__ import annotations


class TokenEditError(Exception):
    """Base class for token editing errors."""
    pass


class InvalidArgumentError(TokenEditError, ValueError):
    """An operation was given an argument it cannot act on."""
    pass


class EmptySequenceError(TokenEditError, IndexError):
    """A boundary cursor was requested from an empty token sequence."""
    pass


class StaleCursorError(TokenEditError, IndexError):
    """
    An item cursor was dereferenced outside its sequence bounds.
    
    Usually means the cursor outlived a structural mutation of the
    sequence, or was advanced past the last token.
    """
    pass
