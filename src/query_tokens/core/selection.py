"""
Module: core.selection

Purpose:
    The predicate-driven scan shared by item and range cursors. A scan
    walks from a starting index in one direction and grows a single
    contiguous run for as long as the predicate keeps matching. It is not
    a filter: the first miss ends the scan.

Key Functions:
    - normalize_predicate(): Turn None / str / callable into a predicate
    - scan_run(): Grow a [start, end) run from an index

Dependencies:
    - query_tokens.errors: InvalidArgumentError

Used By:
    - core.sequence.TokenSequence.select_range
    - core.cursors: ItemCursor.select*, RangeCursor.extend_*
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Tuple

from query_tokens.errors import InvalidArgumentError

# Predicates receive the token and its index in the sequence
Predicate = Callable[[str, int], bool]


def take_one_at(index: int) -> Predicate:
    """Predicate matching exactly one position, whatever the token."""
    def predicate(_token: str, i: int) -> bool:
        return i == index
    return predicate


def normalize_predicate(until: Any, anchor: int) -> Predicate:
    """
    Build a scan predicate from a selection argument.

    Args:
        until: None to take only the token at ``anchor``, a string to
            match tokens by exact (case-sensitive) equality, or a callable
            ``(token, index) -> bool`` used as-is
        anchor: Index matched when ``until`` is None

    Returns:
        Predicate suitable for scan_run()

    Raises:
        InvalidArgumentError: If ``until`` is of any other type
    """
    if until is None:
        return take_one_at(anchor)
    if isinstance(until, str):
        return lambda token, _i: token == until
    if callable(until):
        return until
    raise InvalidArgumentError(
        f"Invalid predicate supplied: {until!r}. Expected function or token"
    )


def scan_run(
    tokens: Sequence[str],
    start: int,
    step: int,
    predicate: Predicate,
) -> Optional[Tuple[int, int]]:
    """
    Grow a contiguous run of matching tokens from ``start``.

    Visits ``start``, ``start + step``, ... while the index stays inside
    ``tokens``. A match at or before ``start`` moves the run's start to it;
    a match at or after ``start`` moves the run's end past it. The first
    miss stops the scan.

    Args:
        tokens: Token list to scan
        start: First index visited (may be out of bounds)
        step: 1 to scan forward, -1 to scan backward
        predicate: ``(token, index) -> bool``

    Returns:
        (start, end_exclusive) of the run, or None if the first visited
        index did not match or was out of bounds

    Raises:
        InvalidArgumentError: If step is not 1 or -1

    Example:
        >>> scan_run(["a", "b", "b", "c"], 1, 1, lambda t, i: t == "b")
        (1, 3)
        >>> scan_run(["a", "b", "b", "c"], 2, -1, lambda t, i: t == "b")
        (1, 3)
    """
    if step not in (1, -1):
        raise InvalidArgumentError(f"step must be 1 or -1: {step}")

    run_start: Optional[int] = None
    run_end: Optional[int] = None
    i = start
    while 0 <= i < len(tokens):
        if not predicate(tokens[i], i):
            break
        if i <= start:
            run_start = i
        if i >= start:
            run_end = i + 1
        i += step

    if run_start is None or run_end is None:
        return None
    return run_start, run_end
