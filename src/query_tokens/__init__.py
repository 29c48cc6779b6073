"""Top-level package for query_tokens.

Lexes query fragments into tokens and edits them in place through
cursors.

Provides subpackages:
- query_tokens.lexing – primitive lexer, operator table and merge step
- query_tokens.core – TokenSequence, ItemCursor and RangeCursor
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path
    
    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass
    
    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import PackageNotFoundError, version as pkg_version
        return pkg_version("query_tokens")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .errors import (
    TokenEditError,
    InvalidArgumentError,
    EmptySequenceError,
    StaleCursorError,
)
from .lexing import Lexer, LexerConfig
from .core import ItemCursor, RangeCursor, TokenSequence

__all__: list[str] = [
    "__version__",
    "TokenSequence",
    "ItemCursor",
    "RangeCursor",
    "Lexer",
    "LexerConfig",
    "TokenEditError",
    "InvalidArgumentError",
    "EmptySequenceError",
    "StaleCursorError",
]
