"""
Module: lexing.lexer

Purpose:
    Turns raw text into the initial token list. Primitive tokens come
    from the configured character-level lexer; adjacent primitives that
    spell a compound operator are fused on the way in.

Key Classes:
    - Lexer: Configured lexer with tokenize()

Key Functions:
    - merge_tokens(): The one-token-lookback merge over primitive tokens

Dependencies:
    - logging (std)

Used By:
    - core.sequence.TokenSequence: lexing of string sources and literals
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from .config import LexerConfig

logger = logging.getLogger(__name__)


def merge_tokens(
    primitives: Iterable[str],
    is_operator: Callable[[str], bool],
) -> List[str]:
    """
    Fuse adjacent primitives that spell a compound operator.

    Each incoming primitive is first tried against the previously emitted
    token, joined directly and then with a single space. The first join
    that ``is_operator`` accepts replaces the previous token in place;
    otherwise the primitive is appended. Only the immediately preceding
    token is ever considered, so a three-part operator forms in two steps
    and needs its two-part prefix in the operator table.

    Args:
        primitives: Primitive token strings in source order
        is_operator: Membership test for operator spellings

    Returns:
        List of tokens with operators fused

    Example:
        >>> merge_tokens(["a", "<", "=", "b"], {"<="}.__contains__)
        ['a', '<=', 'b']
        >>> merge_tokens(["x", "NOT", "IN", "y"], {"NOT IN"}.__contains__)
        ['x', 'NOT IN', 'y']
    """
    tokens: List[str] = []
    for primitive in primitives:
        token = str(primitive)
        if tokens:
            previous = tokens[-1]
            for combined in (previous + token, previous + " " + token):
                if is_operator(combined):
                    logger.debug(f"Merged {previous!r} + {token!r} -> {combined!r}")
                    tokens[-1] = combined
                    break
            else:
                tokens.append(token)
        else:
            tokens.append(token)
    return tokens


class Lexer:
    """
    Lexer for query fragments.

    Example:
        >>> Lexer().tokenize("a<=b")
        ['a', '<=', 'b']
        >>> Lexer().tokenize("x not in (1, 2)")
        ['x', 'not in', '(', '1', ',', '2', ')']
    """

    def __init__(self, config: Optional[LexerConfig] = None) -> None:
        self.config = config or LexerConfig()

    def primitives(self, text: str) -> List[str]:
        """Run only the character-level lexer over ``text``."""
        return [str(token) for token in self.config.primitive_lexer(text)]

    def tokenize(self, text: str) -> List[str]:
        """
        Lex ``text`` into tokens, fusing compound operators.

        Args:
            text: Raw input text

        Returns:
            Ordered list of token strings
        """
        primitives = self.config.primitive_lexer(text)
        if not self.config.merge_operators:
            return [str(token) for token in primitives]
        return merge_tokens(primitives, self.config.is_operator)
