"""
Module: lexing.primitive

Purpose:
    Default character-level lexer. Splits raw query text into primitive
    token strings without any knowledge of compound operators; fusing
    adjacent primitives is done afterwards by lexing.lexer.

Key Functions:
    - primitive_tokens(): Iterate over primitive tokens in a string

Dependencies:
    - re: Token pattern

Used By:
    - config.LexerConfig: default primitive_lexer
    - lexing.lexer.Lexer
"""

from __future__ import annotations

import re
from typing import Iterator

# Order matters: earlier alternatives win at the same position.
_TOKEN_RE = re.compile(
    r"""
      (?P<string>
          '(?:[^'\\]|\\.|'')*(?:'|$)
        | "(?:[^"\\]|\\.|"")*(?:"|$)
        | `(?:[^`\\]|\\.|``)*(?:`|$)
      )
    | (?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?(?![\w$@#.]))
    | (?P<word>[\w$@#.]+)
    | (?P<symbol>\S)
    """,
    re.VERBOSE | re.DOTALL,
)


def primitive_tokens(text: str) -> Iterator[str]:
    """
    Iterate over the primitive tokens of ``text``.

    Whitespace only separates tokens and is never emitted. Quoted strings
    keep their quotes; an unterminated quote runs to the end of input.
    Any other non-space character that is not part of a word or number
    becomes a single-character token.

    Args:
        text: Raw input text

    Yields:
        Primitive token strings in source order

    Example:
        >>> list(primitive_tokens("a<=b"))
        ['a', '<', '=', 'b']
        >>> list(primitive_tokens("name = 'O''Brien'"))
        ['name', '=', "'O''Brien'"]
    """
    for match in _TOKEN_RE.finditer(text):
        yield match.group(0)
