import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import query_tokens
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from query_tokens import TokenSequence


# Common test fixtures
@pytest.fixture
def select_tokens():
    """Return a simple tokenized query."""
    return ["select", "*", "from", "t"]


@pytest.fixture
def select_seq(select_tokens):
    """TokenSequence built from pre-tokenized input."""
    return TokenSequence(select_tokens)


@pytest.fixture
def where_seq():
    """TokenSequence lexed from a filter with compound operators."""
    return TokenSequence("a <= 1 and b not in (2, 3) or c != 'x'")
