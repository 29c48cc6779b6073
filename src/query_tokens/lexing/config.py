"""
Module: lexing.config

Purpose:
    Configuration dataclass for the lexer. Immutable configuration with
    validation on construction.

Key Classes:
    - LexerConfig: Primitive lexer, operator table and merge switch

Dependencies:
    - dataclasses (std)

Used By:
    - lexing.lexer.Lexer
    - core.sequence.TokenSequence
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, FrozenSet, Iterable

from query_tokens.errors import InvalidArgumentError

from .operators import DEFAULT_OPERATORS
from .primitive import primitive_tokens


@dataclass(frozen=True)
class LexerConfig:
    """
    Configuration for lexing raw text into tokens (immutable).

    Attributes:
        operators: Compound operator spellings; adjacent primitives are
            fused when they spell one of these
        primitive_lexer: Callable turning text into primitive token strings
        merge_operators: Whether to fuse compound operators at all

    Example:
        >>> config = LexerConfig().with_operators(["=>"])
        >>> "=>" in config.operators
        True
    """

    operators: FrozenSet[str] = field(default=DEFAULT_OPERATORS)
    primitive_lexer: Callable[[str], Iterable[str]] = field(default=primitive_tokens)
    merge_operators: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if isinstance(self.operators, str):
            raise InvalidArgumentError(
                f"operators must be a collection of spellings, not a string: {self.operators!r}"
            )
        if not isinstance(self.operators, frozenset):
            # Accept any iterable but keep the stored table immutable
            object.__setattr__(self, "operators", frozenset(self.operators))
        if not callable(self.primitive_lexer):
            raise InvalidArgumentError(
                f"primitive_lexer must be callable: {self.primitive_lexer!r}"
            )

    def is_operator(self, spelling: str) -> bool:
        """Check whether ``spelling`` is a known compound operator."""
        return spelling in self.operators

    def with_operators(self, extra: Iterable[str]) -> LexerConfig:
        """
        Return a copy of this config with additional operator spellings.

        Args:
            extra: Spellings to add to the operator table

        Returns:
            New LexerConfig; this instance is unchanged
        """
        return replace(self, operators=self.operators | frozenset(extra))
