"""
Whitespace normalization of captured element text.

Leading and trailing whitespace is trimmed and every interior run of
whitespace collapses to a single space. The whitespace class defaults to
the ASCII set and can be configured per deployment (Settings.whitespace).
"""

import re
from functools import lru_cache
from typing import Optional, Pattern

DEFAULT_WHITESPACE = ' \t\n\r\f\v'


@lru_cache(maxsize=16)
def _compile_run(whitespace: str) -> Pattern[str]:
    return re.compile(f"[{re.escape(whitespace)}]+")


class Normalizer:
    """
    Callable normalizer for one whitespace class.

    Args:
        whitespace: Characters treated as whitespace (default: ASCII set)

    Example:
        >>> Normalizer()('  a   b  ')
        'a b'
    """

    def __init__(self, whitespace: str = DEFAULT_WHITESPACE):
        if not whitespace:
            raise ValueError("Whitespace class cannot be empty")
        self.whitespace = whitespace
        self._run = _compile_run(whitespace)

    def __call__(self, text: Optional[str]) -> str:
        if not text:
            return ''
        trimmed = text.strip(self.whitespace)
        if not trimmed:
            return ''
        return self._run.sub(' ', trimmed)


def normalize(text: Optional[str], whitespace: str = DEFAULT_WHITESPACE) -> str:
    """
    Trim text and collapse whitespace runs to single spaces.

    Args:
        text: Captured content (None is treated as empty)
        whitespace: Characters treated as whitespace

    Returns:
        Normalized text, '' if text was empty or all whitespace.
        Never longer than the input.

    Example:
        >>> normalize('  a   b  ')
        'a b'
        >>> normalize('   ')
        ''
    """
    return Normalizer(whitespace)(text)
