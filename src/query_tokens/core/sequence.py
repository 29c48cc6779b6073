"""
Module: core.sequence

Purpose:
    The mutable token list at the centre of the engine. A TokenSequence
    owns its tokens; cursors only hold coordinates plus a reference back
    to the sequence, so an edit made through any cursor is seen by all of
    them. Every structural mutation goes through the three splice
    primitives defined here.

Key Classes:
    - TokenSequence: Owned token list with lookup, selection and splicing

Dependencies:
    - logging (std)
    - query_tokens.lexing: Lexer for string sources

Used By:
    - core.cursors: ItemCursor and RangeCursor delegate to it

Cursor Validity:
    Splicing shifts every index at or after the splice point by the change
    in length. Cursors are not rebased, so a cursor is only valid up to the
    next structural mutation of its sequence. Continue editing from the
    RangeCursor a mutation returns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Iterator, List, Optional, Union

from query_tokens.errors import EmptySequenceError, StaleCursorError
from query_tokens.lexing import Lexer, LexerConfig

from .cursors import ItemCursor, RangeCursor
from .selection import normalize_predicate, scan_run

logger = logging.getLogger(__name__)

TokenRun = Union[str, Iterable, None]


def normalize_token_run(tokens: TokenRun) -> List[str]:
    """
    Normalize a splice payload into a list of tokens.

    A single string is a one-element run and is NOT lexed here. None and
    empty entries are dropped; anything else is coerced with str(), as the
    lexer does for primitives.

    Example:
        >>> normalize_token_run("x")
        ['x']
        >>> normalize_token_run(["a", None, "", "b"])
        ['a', 'b']
        >>> normalize_token_run(["limit", 0])
        ['limit', '0']
    """
    if tokens is None:
        return []
    if isinstance(tokens, str):
        items: List[Any] = [tokens]
    else:
        items = list(tokens)
    return [str(item) for item in items if item is not None and item != ""]


class TokenSequence:
    """
    Ordered, mutable sequence of token strings.

    Built from raw text (lexed) or from an iterable of tokens (copied
    verbatim, bypassing the lexer).

    Example:
        >>> seq = TokenSequence("a<=b")
        >>> seq.tokens
        ['a', '<=', 'b']
        >>> seq.find("<=").replace("<>")
        RangeCursor(start=1, end=2)
        >>> str(seq)
        'a <> b'
    """

    def __init__(
        self,
        source: Union[str, Iterable[str]],
        config: Optional[LexerConfig] = None,
    ) -> None:
        self.lexer = Lexer(config)
        if isinstance(source, str):
            self._tokens: List[str] = self.tokenize(source)
        else:
            self._tokens = [None if token is None else str(token) for token in source]

    # ─────────────────────────────────────────────────────────────────────────
    # Container protocol
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def tokens(self) -> List[str]:
        """Copy of the current token list."""
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __getitem__(self, index: Union[int, slice]) -> Union[str, List[str]]:
        return self._tokens[index]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TokenSequence({self._tokens!r})"

    # ─────────────────────────────────────────────────────────────────────────
    # Lexing and serialization
    # ─────────────────────────────────────────────────────────────────────────

    def tokenize(self, text: str) -> List[str]:
        """Lex ``text`` with this sequence's lexer."""
        return self.lexer.tokenize(text)

    def to_string(self) -> str:
        """
        Join the tokens with single spaces, skipping empty entries.

        Lossy: original spacing is not reconstructed.
        """
        return " ".join(token for token in self._tokens if token)

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup
    # ─────────────────────────────────────────────────────────────────────────

    def find(
        self,
        value: str,
        case_sensitive: bool = False,
        start_index: int = 0,
    ) -> Optional[ItemCursor]:
        """
        Find the first token equal to ``value`` at or after ``start_index``.

        Args:
            value: Token text to look for
            case_sensitive: Compare exactly instead of case-insensitively
            start_index: First index to examine

        Returns:
            ItemCursor at the match, or None if there is none
        """
        wanted = value if case_sensitive else value.lower()
        for i in range(max(start_index, 0), len(self._tokens)):
            token = self._tokens[i]
            if token is None:
                continue
            if (token if case_sensitive else token.lower()) == wanted:
                return ItemCursor(i, self)
        return None

    def first(self) -> ItemCursor:
        """
        Cursor at the first token.

        Raises:
            EmptySequenceError: If the sequence has no tokens
        """
        if not self._tokens:
            raise EmptySequenceError("first() called on an empty token sequence")
        return ItemCursor(0, self)

    def last(self) -> ItemCursor:
        """
        Cursor at the last token.

        Raises:
            EmptySequenceError: If the sequence has no tokens
        """
        if not self._tokens:
            raise EmptySequenceError("last() called on an empty token sequence")
        return ItemCursor(len(self._tokens) - 1, self)

    def select_range(self, start: int, step: int, until: Any = None) -> Optional[RangeCursor]:
        """
        Select the contiguous run matching ``until`` from ``start``.

        Args:
            start: First index to test
            step: 1 to grow forward, -1 to grow backward
            until: None (only ``start``), token string, or
                ``(token, index) -> bool`` callable

        Returns:
            RangeCursor over the run, or None if ``start`` does not match
        """
        predicate = normalize_predicate(until, start)
        bounds = scan_run(self._tokens, start, step, predicate)
        if bounds is None:
            return None
        return RangeCursor(bounds[0], bounds[1], self)

    # ─────────────────────────────────────────────────────────────────────────
    # Structural mutation
    # ─────────────────────────────────────────────────────────────────────────

    def replace_range(self, start: int, end: int, tokens: TokenRun) -> RangeCursor:
        """
        Replace tokens ``[start, end)`` with ``tokens``.

        Returns:
            RangeCursor over the inserted tokens (empty if none were given)

        Raises:
            StaleCursorError: If the bounds fall outside the sequence
        """
        self._check_bounds(start, end)
        normalized = normalize_token_run(tokens)
        return self._splice(start, end - start, normalized)

    def replace_at_index(self, index: int, tokens: TokenRun) -> RangeCursor:
        """
        Replace the single token at ``index`` with ``tokens``.

        Raises:
            StaleCursorError: If ``index`` does not address a token
        """
        if not 0 <= index < len(self._tokens):
            raise StaleCursorError(
                f"Cannot replace index {index} in sequence of length {len(self._tokens)}"
            )
        normalized = normalize_token_run(tokens)
        return self._splice(index, 1, normalized)

    def insert_at_index(self, index: int, tokens: TokenRun) -> Optional[RangeCursor]:
        """
        Insert ``tokens`` before ``index`` without removing anything.

        Returns:
            RangeCursor over the inserted tokens, or None (and no mutation)
            if the payload normalizes to nothing

        Raises:
            StaleCursorError: If ``index`` is outside 0..len
        """
        self._check_bounds(index, index)
        normalized = normalize_token_run(tokens)
        if not normalized:
            return None
        return self._splice(index, 0, normalized)

    def _check_bounds(self, start: int, end: int) -> None:
        """Reject splice bounds outside 0 <= start <= end <= len before mutating."""
        if not 0 <= start <= end <= len(self._tokens):
            raise StaleCursorError(
                f"Splice bounds [{start}, {end}) outside sequence of length {len(self._tokens)}"
            )

    def _splice(self, index: int, remove: int, normalized: List[str]) -> RangeCursor:
        self._tokens[index:index + remove] = normalized
        logger.debug(
            f"Spliced at {index}: removed {remove}, inserted {len(normalized)} "
            f"(length now {len(self._tokens)})"
        )
        return RangeCursor(index, index + len(normalized), self)
