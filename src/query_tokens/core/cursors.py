"""
Module: core.cursors

Purpose:
    Lightweight handles into a TokenSequence. An ItemCursor addresses one
    token, a RangeCursor a contiguous run. Neither owns token data: both
    hold coordinates and a reference to the shared sequence, and every
    edit is delegated to the sequence's splice primitives.

Key Classes:
    - ItemCursor: (index, sequence); lookup, navigation, point edits
    - RangeCursor: (start, end, sequence); growth and bulk replace

Dependencies:
    - core.selection: predicate normalization
    - core.replacement: replacement payload resolution

Used By:
    - core.sequence.TokenSequence (creates cursors)

Note:
    Cursors are not rebased after a structural mutation. A cursor is
    valid only up to the next mutation of its sequence made through any
    other cursor; re-derive cursors from the RangeCursor each edit
    returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from query_tokens.errors import InvalidArgumentError, StaleCursorError

from .replacement import as_replacement

if TYPE_CHECKING:
    from .sequence import TokenSequence


class ItemCursor:
    """
    Cursor addressing exactly one token.

    Attributes:
        index: Position in the sequence (mutated in place by next())
        sequence: Owning TokenSequence

    Example:
        >>> seq = TokenSequence(["select", "*", "from", "t"])
        >>> seq.find("from").select_next().replace("x")
        RangeCursor(start=3, end=4)
        >>> str(seq)
        'select * from x'
    """

    def __init__(self, index: int, sequence: TokenSequence) -> None:
        self.index = index
        self.sequence = sequence

    def __repr__(self) -> str:
        return f"ItemCursor(index={self.index})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemCursor):
            return NotImplemented
        return self.index == other.index and self.sequence is other.sequence

    # ─────────────────────────────────────────────────────────────────────────
    # Reading
    # ─────────────────────────────────────────────────────────────────────────

    def token(self) -> str:
        """
        Token at the cursor.

        Raises:
            StaleCursorError: If the index is outside the sequence
        """
        if not 0 <= self.index < len(self.sequence):
            raise StaleCursorError(
                f"Cursor index {self.index} outside sequence of length {len(self.sequence)}"
            )
        return self.sequence[self.index]

    def peek(self, count: int = 1) -> str:
        """Join ``count`` tokens starting at the cursor, without moving it."""
        window = self.sequence[self.index:self.index + count]
        return " ".join(token for token in window if token is not None)

    def next(self, token: Optional[str] = None, case_sensitive: bool = False) -> Optional[ItemCursor]:
        """
        Move forward.

        With no ``token``, advance this cursor by one position and return
        it. With a ``token``, search for it after the cursor and return a
        new cursor (or None); this cursor does not move.
        """
        if token is not None:
            return self.sequence.find(token, case_sensitive, self.index + 1)
        self.index += 1
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Editing
    # ─────────────────────────────────────────────────────────────────────────

    def replace(self, replacement: Any) -> RangeCursor:
        """
        Replace the token at the cursor.

        Args:
            replacement: String (lexed), token list (used verbatim), or a
                callable given a copy of the current token and returning
                either of those

        Returns:
            RangeCursor over the tokens written
        """
        resolved = as_replacement(replacement, self.sequence.tokenize)
        tokens = resolved.tokens_for(self.token, self.sequence.tokenize)
        return self.sequence.replace_at_index(self.index, tokens)

    def insert_before(self, tokens: Any) -> Optional[RangeCursor]:
        """
        Insert tokens before the cursor.

        Raises:
            InvalidArgumentError: If no tokens are given
        """
        return self.sequence.insert_at_index(self.index, self._insert_payload(tokens))

    def insert_after(self, tokens: Any) -> Optional[RangeCursor]:
        """
        Insert tokens after the cursor.

        Raises:
            InvalidArgumentError: If no tokens are given
        """
        return self.sequence.insert_at_index(self.index + 1, self._insert_payload(tokens))

    def _insert_payload(self, tokens: Any) -> List[Any]:
        if isinstance(tokens, str):
            tokens = self.sequence.tokenize(tokens)
        elif tokens is not None:
            tokens = list(tokens)
        if not tokens:
            raise InvalidArgumentError("Expected to find at least one token")
        return tokens

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def select(self, until: Any = None) -> Optional[RangeCursor]:
        """Select forward from this token (just this token if ``until`` is None)."""
        return self.sequence.select_range(self.index, 1, until)

    def select_prev(self, until: Any = None) -> Optional[RangeCursor]:
        """Select backward from the token before this one."""
        return self.sequence.select_range(self.index - 1, -1, until)

    def select_next(self, until: Any = None) -> Optional[RangeCursor]:
        """Select forward from the token after this one."""
        return self.sequence.select_range(self.index + 1, 1, until)


class RangeCursor:
    """
    Cursor addressing the run ``[start, end)``; may be empty.

    Attributes:
        start: First index in the run
        end: Index one past the last token in the run
        sequence: Owning TokenSequence
    """

    def __init__(self, start: int, end: int, sequence: TokenSequence) -> None:
        if end < start:
            raise InvalidArgumentError(f"end must be >= start: {end} < {start}")
        self.start = start
        self.end = end
        self.sequence = sequence

    def __repr__(self) -> str:
        return f"RangeCursor(start={self.start}, end={self.end})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return (
            self.start == other.start
            and self.end == other.end
            and self.sequence is other.sequence
        )

    @property
    def length(self) -> int:
        """Number of tokens in the run."""
        return self.end - self.start

    def tokens(self) -> List[str]:
        """Copy of the tokens in the run."""
        return self.sequence[self.start:self.end]

    def first(self) -> ItemCursor:
        """Cursor at the start of the run."""
        return ItemCursor(self.start, self.sequence)

    def last(self) -> ItemCursor:
        """
        Cursor at the end boundary of the run.

        The boundary is exclusive: this addresses the token just past the
        run, not the last token inside it. Use ``ItemCursor(r.end - 1, ...)``
        for the last included token.
        """
        return ItemCursor(self.end, self.sequence)

    def extend_left(self, until: Any = None) -> Optional[RangeCursor]:
        """
        Grow the run leftward, keeping the right edge fixed.

        Scans backward starting at the run's own first token.

        Returns:
            New RangeCursor, or None if the scan matched nothing
        """
        extension = self.sequence.select_range(self.start, -1, until)
        if extension is not None:
            extension.end = self.end
        return extension

    def extend_right(self, until: Any = None) -> Optional[RangeCursor]:
        """
        Grow the run rightward, keeping the left edge fixed.

        Scans forward starting just past the run.

        Returns:
            New RangeCursor, or None if the scan matched nothing
        """
        extension = self.sequence.select_range(self.end, 1, until)
        if extension is not None:
            extension.start = self.start
        return extension

    def replace(self, replacement: Any) -> RangeCursor:
        """
        Replace the whole run.

        Args:
            replacement: String (lexed), token list (used verbatim), or a
                callable given a copy of the run's token list

        Returns:
            RangeCursor over the tokens written
        """
        resolved = as_replacement(replacement, self.sequence.tokenize)
        tokens = resolved.tokens_for(self.tokens, self.sequence.tokenize)
        return self.sequence.replace_range(self.start, self.end, tokens)
