"""
Log line tokenizer.

Splits raw lines on a fixed set of punctuation characters and drops tokens
that carry no structure (empty or purely numeric).
"""

import re
import unicodedata
from typing import List


SEPARATORS = ' /,.:"(){}[]'


def is_numeric(token: str) -> bool:
    """
    True if every character is in a Unicode number category (Nd, Nl, No).

    Ideographs that merely carry a numeric value, such as 一 or 万, are words.
    The empty string counts as numeric.
    """
    return all(unicodedata.category(char).startswith("N") for char in token)


class LineTokenizer:
    """Tokenizer producing the normalized tokens a template is built from."""

    def __init__(self, separators: str = SEPARATORS):
        self.separators = separators
        self._split_pattern = re.compile("[" + re.escape(separators) + "]")

    def tokenize(self, line: str) -> List[str]:
        """Split a log line into tokens, dropping empty and numeric pieces."""
        return [
            token for token in self._split_pattern.split(line)
            if not is_numeric(token)
        ]

    __call__ = tokenize


_default_tokenizer = LineTokenizer()


def tokenize(line: str) -> List[str]:
    """Tokenize with the default separator set."""
    return _default_tokenizer.tokenize(line)
