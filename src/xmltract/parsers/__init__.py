"""
Element matching, whitespace normalization and the two traversals.

- stream: single pass, immediate text of each matched element
- tree: retained subtrees, full descendant text of each matched element
"""

from .matcher import matches, ElementMatcher
from .normalizer import normalize, Normalizer, DEFAULT_WHITESPACE
from .stream import iter_stream_matches, immediate_text
from .tree import build_retained_tree, walk_retained_tree, iter_tree_matches

__all__ = [
    # Matching
    'matches',
    'ElementMatcher',
    # Normalization
    'normalize',
    'Normalizer',
    'DEFAULT_WHITESPACE',
    # Traversals
    'iter_stream_matches',
    'immediate_text',
    'build_retained_tree',
    'walk_retained_tree',
    'iter_tree_matches',
]
