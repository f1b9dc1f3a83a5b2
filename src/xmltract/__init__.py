"""
xmltract: extract the normalized text of selected XML elements.

Main package exports for user-facing API.
"""

from xmltract.models import MatchCriteria, TraversalMode, BatchPolicy, ErrorKind
from xmltract.parsers import matches, normalize, iter_stream_matches, iter_tree_matches
from xmltract.api import Extractor

__version__ = '0.1.0'

__all__ = [
    'MatchCriteria',
    'TraversalMode',
    'BatchPolicy',
    'ErrorKind',
    'matches',
    'normalize',
    'iter_stream_matches',
    'iter_tree_matches',
    'Extractor',
    'extract',
]


def extract(name: str, sources=None, prefix: str = None, case_insensitive: bool = False, **options) -> int:
    """
    Extract matching element text from sources to standard output.

    Convenience wrapper around Extractor for one-off use.

    Args:
        name: Target element local name
        sources: File paths (None or empty reads standard input)
        prefix: Namespace prefix to require as well
        case_insensitive: Ignore case of name and prefix
        **options: Extractor keyword arguments (mode, encoding, batch_policy, output)

    Returns:
        Process exit status (0 on success)

    Example:
        >>> from xmltract import extract
        >>> extract('title', ['books.xml'], mode='tree')
        0
    """
    criteria = MatchCriteria(name=name, prefix=prefix, case_insensitive=case_insensitive)
    return Extractor(criteria, **options).run(sources).exit_code
