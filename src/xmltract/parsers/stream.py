"""
Single-pass streaming extraction.

The document is scanned once with lxml.etree.iterparse. For each element
whose (prefix, local name) satisfies the criteria, the element's immediate
text is captured: its own text plus the tails of its direct children, i.e.
the text nodes directly inside it, never descendant markup or descendant
text. Captured text is normalized and yielded as soon as it is known.

Cursor states map onto the generator protocol:
- Scanning: advancing iterparse and matching start tags
- Emitting: ``yield`` of a normalized line
- Done: the generator returns at end of input
- Failed: lxml.etree.XMLSyntaxError (or OSError from the reader) propagates;
  there is no recovery of a malformed document

Lines are emitted in the document order of the matched start tags. A match
nested inside another open match is held until the outer one closes.
"""

import logging
from collections import deque
from typing import BinaryIO, Deque, Iterator, List, Optional, Union

from lxml import etree

from xmltract.models.criteria import MatchCriteria
from xmltract.parsers.matcher import ElementMatcher
from xmltract.parsers.normalizer import Normalizer

logger = logging.getLogger(__name__)

Source = Union[str, BinaryIO]


class _PendingMatch:
    __slots__ = ('element', 'text')

    def __init__(self, element: etree._Element):
        self.element = element
        self.text: Optional[str] = None


def immediate_text(element: etree._Element) -> str:
    """
    Concatenate the text nodes that are direct children of element.

    Example:
        >>> immediate_text(etree.fromstring('<b>one <i>two</i> three</b>'))
        'one  three'
    """
    parts = [element.text or '']
    parts.extend(child.tail or '' for child in element)
    return ''.join(parts)


def release_processed(element: etree._Element) -> None:
    """Free an ended element and everything parsed before it at its level."""
    element.clear(keep_tail=True)
    parent = element.getparent()
    if parent is None:
        return
    while element.getprevious() is not None:
        del parent[0]


def iter_stream_matches(
    source: Source,
    criteria: MatchCriteria,
    encoding: Optional[str] = None,
    normalizer: Optional[Normalizer] = None,
    huge_tree: bool = True
) -> Iterator[str]:
    """
    Stream normalized immediate text of matching elements.

    Args:
        source: File path or binary file object
        criteria: Target criteria
        encoding: Input encoding forwarded to the parser (None: detect)
        normalizer: Whitespace normalizer (default: ASCII whitespace)
        huge_tree: Lift libxml2's depth and text size limits

    Yields:
        One non-empty normalized string per matching element

    Raises:
        lxml.etree.XMLSyntaxError: If the document is malformed
        OSError: If the source cannot be read
    """
    matcher = ElementMatcher(criteria)
    normalize = normalizer or Normalizer()

    # All matches in start-tag order, and the subset still open
    pending: Deque[_PendingMatch] = deque()
    open_matches: List[_PendingMatch] = []

    context = etree.iterparse(
        source,
        events=('start', 'end'),
        encoding=encoding,
        huge_tree=huge_tree,
        recover=False
    )

    for event, element in context:
        if event == 'start':
            if matcher.match_element(element):
                match = _PendingMatch(element)
                pending.append(match)
                open_matches.append(match)
            continue

        if open_matches and open_matches[-1].element is element:
            match = open_matches.pop()
            match.text = normalize(immediate_text(element))
            match.element = None

            while pending and pending[0].text is not None:
                text = pending.popleft().text
                if text:
                    yield text

        if open_matches:
            # Direct children tails of an open match are still needed
            element.clear(keep_tail=True)
        else:
            release_processed(element)

    logger.debug("Stream reached end of input")
