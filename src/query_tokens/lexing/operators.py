"""
Module: lexing.operators

Purpose:
    Table of compound operator spellings recognised while lexing.
    Membership is an exact string test: the merge step in lexing.lexer
    asks whether two adjacent primitives, joined with or without a space,
    spell a known operator.

Key Constants:
    - SYMBOL_OPERATORS: Punctuation operators (e.g. "<=", "!~*")
    - KEYWORD_OPERATORS: Multi-word operators (e.g. "NOT IN")
    - DEFAULT_OPERATORS: Union of both, keywords in upper and lower case

Key Functions:
    - is_operator(): Membership test against DEFAULT_OPERATORS
    - keyword_spellings(): Case variants for keyword operators

Used By:
    - config.LexerConfig: default operator table
"""

from __future__ import annotations

from typing import FrozenSet, Iterable

# Every spelling longer than two primitives must have its prefix in the
# table too, since merging only ever joins the previous token with one more.
SYMBOL_OPERATORS: FrozenSet[str] = frozenset({
    "=", "==", "!=", "<>",
    "<", "<=", ">", ">=",
    "||", "&&", "::",
    "!~", "~*", "!~*",
    "<<", ">>", "~=",
    "->", "->>", "#>", "#>>",
    "@>", "<@", "@@", "&<", "&>",
})

KEYWORD_OPERATORS: FrozenSet[str] = frozenset({
    "IS NOT",
    "NOT IN",
    "NOT LIKE",
    "NOT ILIKE",
    "NOT BETWEEN",
    "NOT EXISTS",
})


def keyword_spellings(keywords: Iterable[str]) -> FrozenSet[str]:
    """
    Expand keyword operators to the casings accepted by the lexer.

    Only the all-upper and all-lower forms are produced; mixed case such
    as "Not In" is left unfused.

    Args:
        keywords: Keyword operator spellings in any case

    Returns:
        Frozen set holding the upper and lower case form of each keyword
    """
    spellings = set()
    for keyword in keywords:
        spellings.add(keyword.upper())
        spellings.add(keyword.lower())
    return frozenset(spellings)


DEFAULT_OPERATORS: FrozenSet[str] = SYMBOL_OPERATORS | keyword_spellings(KEYWORD_OPERATORS)


def is_operator(spelling: str) -> bool:
    """Check whether ``spelling`` is a default compound operator."""
    return spelling in DEFAULT_OPERATORS
