"""
Module: core.replacement

Purpose:
    Replacement payloads for cursor edits. Callers may pass a literal
    string, a ready token list, or a transform function; the payload is
    resolved once into one of two variants at the cursor boundary, and
    the variant produces the tokens to splice in.

Key Classes:
    - LiteralReplacement: Fixed tokens
    - TransformReplacement: Function of a copy of the tokens being replaced

Key Functions:
    - as_replacement(): Resolve a caller payload into a Replacement

Dependencies:
    - copy (std): Deep copies handed to transforms

Used By:
    - core.cursors: ItemCursor.replace, RangeCursor.replace
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple, Union

from query_tokens.errors import InvalidArgumentError

Tokenize = Callable[[str], List[str]]


def _as_tokens(value: Any, tokenize: Tokenize) -> List[Any]:
    """Strings are lexed; other iterables are taken as token lists."""
    if value is None:
        return []
    if isinstance(value, str):
        return tokenize(value)
    if isinstance(value, Iterable):
        return list(value)
    raise InvalidArgumentError(
        f"Replacement must be a string or a token list, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class LiteralReplacement:
    """
    Replacement by a fixed token run.

    Attributes:
        tokens: Tokens to splice in (None / empty entries are dropped later)
    """

    tokens: Tuple[Any, ...]

    def tokens_for(self, read_current: Callable[[], Any], tokenize: Tokenize) -> List[Any]:
        """Return the literal tokens; the current tokens are never read."""
        return list(self.tokens)


@dataclass(frozen=True)
class TransformReplacement:
    """
    Replacement computed from the tokens being replaced.

    The transform receives a deep copy (a single token for item cursors,
    a list for range cursors) so it can never reach the live sequence.
    A string result is lexed; a list result is used as-is.

    Attributes:
        transform: Callable returning a string or token list
    """

    transform: Callable[[Any], Any]

    def tokens_for(self, read_current: Callable[[], Any], tokenize: Tokenize) -> List[Any]:
        """Run the transform over a copy of what ``read_current`` returns."""
        result = self.transform(copy.deepcopy(read_current()))
        return _as_tokens(result, tokenize)


Replacement = Union[LiteralReplacement, TransformReplacement]


def as_replacement(value: Any, tokenize: Tokenize) -> Replacement:
    """
    Resolve a caller payload into a Replacement.

    Args:
        value: Replacement instance, callable, string (lexed now), token
            iterable, or None (replace with nothing)
        tokenize: Lexer used for string payloads

    Returns:
        LiteralReplacement or TransformReplacement

    Raises:
        InvalidArgumentError: For payloads of any other type

    Example:
        >>> as_replacement("x", str.split)
        LiteralReplacement(tokens=('x',))
        >>> as_replacement(str.upper, str.split).tokens_for(lambda: "and", str.split)
        ['AND']
    """
    if isinstance(value, (LiteralReplacement, TransformReplacement)):
        return value
    if callable(value):
        return TransformReplacement(value)
    return LiteralReplacement(tuple(_as_tokens(value, tokenize)))
