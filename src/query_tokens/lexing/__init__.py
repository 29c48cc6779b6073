"""
Lexing Module.

Turns raw query text into tokens: a character-level pass produces
primitive tokens, then adjacent primitives spelling a compound operator
are fused.
"""

from .config import LexerConfig
from .lexer import Lexer, merge_tokens
from .operators import DEFAULT_OPERATORS, is_operator
from .primitive import primitive_tokens

__all__ = [
    "LexerConfig",
    "Lexer",
    "merge_tokens",
    "DEFAULT_OPERATORS",
    "is_operator",
    "primitive_tokens",
]
