"""
Retained-subtree extraction.

Two phases:
1. Filtering while parsing: only the outermost subtrees whose root local
   name matches the target are kept, as children of a synthetic root, in
   document order. Everything else is released as soon as it is parsed.
2. Pre-order walk of the retained tree with an explicit work stack. Every
   element that satisfies the full criteria (name and prefix) yields its
   entire concatenated descendant text, normalized. Children are always
   visited, so nested matches yield their own lines.

Unlike the streaming traversal, which captures only an element's immediate
text, this one captures all descendant text. The two agree whenever matched
content is flat.
"""

import logging
from copy import deepcopy
from typing import Iterator, List, Optional

from lxml import etree

from xmltract.models.criteria import MatchCriteria
from xmltract.parsers.matcher import ElementMatcher
from xmltract.parsers.normalizer import Normalizer
from xmltract.parsers.stream import Source, release_processed

logger = logging.getLogger(__name__)

RETAINED_ROOT = 'retained'


def build_retained_tree(
    source: Source,
    criteria: MatchCriteria,
    encoding: Optional[str] = None,
    huge_tree: bool = True
) -> etree._Element:
    """
    Parse source keeping only subtrees rooted at name-matching elements.

    The filter compares the local name only (case folding honoured); the
    prefix is checked later, during the walk.

    Args:
        source: File path or binary file object
        criteria: Target criteria
        encoding: Input encoding forwarded to the parser (None: detect)
        huge_tree: Lift libxml2's depth and text size limits

    Returns:
        Synthetic root element whose children are the retained subtrees

    Raises:
        lxml.etree.XMLSyntaxError: If the document is malformed
        OSError: If the source cannot be read
    """
    matcher = ElementMatcher(criteria)
    retained = etree.Element(RETAINED_ROOT)
    open_roots: List[etree._Element] = []

    context = etree.iterparse(
        source,
        events=('start', 'end'),
        encoding=encoding,
        huge_tree=huge_tree,
        recover=False
    )

    for event, element in context:
        if event == 'start':
            if matcher.match_name(etree.QName(element).localname):
                open_roots.append(element)
            continue

        if open_roots and open_roots[-1] is element:
            open_roots.pop()
            if not open_roots:
                subtree = deepcopy(element)
                subtree.tail = None
                retained.append(subtree)

        if not open_roots:
            release_processed(element)

    logger.debug(f"Retained {len(retained)} subtree(s)")
    return retained


def walk_retained_tree(
    root: etree._Element,
    criteria: MatchCriteria,
    normalizer: Optional[Normalizer] = None
) -> Iterator[str]:
    """
    Walk the retained tree in document order and yield matched content.

    The synthetic root itself is never matched. Uses an explicit stack so
    very deep documents do not exhaust the interpreter's recursion limit.

    Args:
        root: Root returned by build_retained_tree()
        criteria: Target criteria (name and prefix)
        normalizer: Whitespace normalizer (default: ASCII whitespace)

    Yields:
        One non-empty normalized string per matching element
    """
    matcher = ElementMatcher(criteria)
    normalize = normalizer or Normalizer()

    stack = list(reversed(root))
    while stack:
        node = stack.pop()
        if not isinstance(node.tag, str):
            continue

        if matcher.match_element(node):
            text = normalize(''.join(node.itertext()))
            if text:
                yield text

        stack.extend(reversed(node))


def iter_tree_matches(
    source: Source,
    criteria: MatchCriteria,
    encoding: Optional[str] = None,
    normalizer: Optional[Normalizer] = None,
    huge_tree: bool = True
) -> Iterator[str]:
    """
    Filter, retain and walk: full descendant text of matching elements.

    Parsing completes before the first line is yielded; a malformed
    document therefore yields nothing.
    """
    root = build_retained_tree(source, criteria, encoding=encoding, huge_tree=huge_tree)
    yield from walk_retained_tree(root, criteria, normalizer=normalizer)
