"""
User-facing API for xmltract.

Extractor runs the selected traversal over files or standard input and
reports per-source outcomes.
"""

from xmltract.api.extractor import Extractor, get_traversal, STDIN_SOURCE

__all__ = [
    'Extractor',
    'get_traversal',
    'STDIN_SOURCE',
]
