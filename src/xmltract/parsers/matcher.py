"""
Element Matching

Decides whether an element's (prefix, local name) pair satisfies the
MatchCriteria. Only prefix string identity is compared; namespace URIs
are never resolved.
"""

from typing import Optional
from lxml import etree

from xmltract.models.criteria import MatchCriteria, fold_case


def same(value: Optional[str], other: Optional[str]) -> bool:
    """
    Null-safe string equality.

    Two absent values are equal, an absent value never equals a present one.
    """
    if value is None or other is None:
        return value is other
    return value == other


def matches(
    candidate_prefix: Optional[str],
    candidate_name: str,
    criteria: MatchCriteria
) -> bool:
    """
    Check a candidate element against the criteria.

    Args:
        candidate_prefix: Element prefix as reported by the parser (or None)
        candidate_name: Element local name
        criteria: Target criteria

    Returns:
        True if the name matches and, when criteria.prefix is set, the
        prefix matches as well

    Example:
        >>> matches('a', 'x', MatchCriteria(name='x'))
        True
        >>> matches('a', 'x', MatchCriteria(name='x', prefix='b'))
        False
    """
    if criteria.case_insensitive:
        # Fold local copies; the parser's values are left untouched
        candidate_name = fold_case(candidate_name)
        candidate_prefix = fold_case(candidate_prefix)

    if not same(candidate_name, criteria.folded_name):
        return False

    if criteria.prefix is None:
        return True

    return same(candidate_prefix, criteria.folded_prefix)


class ElementMatcher:
    """
    Matcher bound to one MatchCriteria, with lxml element helpers.

    Args:
        criteria: Target criteria
    """

    def __init__(self, criteria: MatchCriteria):
        self.criteria = criteria

    def match(self, prefix: Optional[str], name: str) -> bool:
        return matches(prefix, name, self.criteria)

    def match_name(self, name: str) -> bool:
        """Compare the local name only (prefix not considered)."""
        if self.criteria.case_insensitive:
            name = fold_case(name)
        return name == self.criteria.folded_name

    def match_element(self, element: etree._Element) -> bool:
        """Match an lxml element; comments and processing instructions never match."""
        if not isinstance(element.tag, str):
            return False
        return self.match(element.prefix, etree.QName(element).localname)
