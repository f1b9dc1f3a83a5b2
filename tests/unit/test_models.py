"""
Unit tests for Pydantic criteria and outcome models.
"""

import pytest
from pydantic import ValidationError


class TestMatchCriteria:
    """Test suite for MatchCriteria."""

    def test_create_with_name_only(self):
        """Prefix defaults to None and matching to case sensitive."""
        from xmltract.models import MatchCriteria

        criteria = MatchCriteria(name='title')

        assert criteria.prefix is None
        assert criteria.case_insensitive is False
        assert criteria.folded_name == 'title'
        assert criteria.folded_prefix is None

    def test_folded_copies_when_case_insensitive(self):
        """Folded values are precomputed; original values are preserved."""
        from xmltract.models import MatchCriteria

        criteria = MatchCriteria(name='Title', prefix='DC', case_insensitive=True)

        assert criteria.name == 'Title'
        assert criteria.prefix == 'DC'
        assert criteria.folded_name == 'title'
        assert criteria.folded_prefix == 'dc'

    def test_no_folding_when_case_sensitive(self):
        """Case-sensitive criteria compare the values as given."""
        from xmltract.models import MatchCriteria

        criteria = MatchCriteria(name='Title', prefix='DC')

        assert criteria.folded_name == 'Title'
        assert criteria.folded_prefix == 'DC'

    def test_is_immutable(self):
        """Criteria cannot be modified after construction."""
        from xmltract.models import MatchCriteria

        criteria = MatchCriteria(name='title')

        with pytest.raises(ValidationError):
            criteria.name = 'other'

    @pytest.mark.parametrize('name', ['', 'dc:title', 'two words'])
    def test_invalid_names(self, name):
        """Empty, qualified or space-containing names are rejected."""
        from xmltract.models import MatchCriteria

        with pytest.raises(ValidationError):
            MatchCriteria(name=name)

    @pytest.mark.parametrize('prefix', ['', 'a:b', ' p'])
    def test_invalid_prefixes(self, prefix):
        """A present prefix must be a single non-empty token."""
        from xmltract.models import MatchCriteria

        with pytest.raises(ValidationError):
            MatchCriteria(name='title', prefix=prefix)

    def test_from_qname_with_prefix(self):
        """'p:name' splits into prefix and local name."""
        from xmltract.models import MatchCriteria

        criteria = MatchCriteria.from_qname('dc:title')

        assert criteria.prefix == 'dc'
        assert criteria.name == 'title'

    def test_from_qname_without_prefix(self):
        """A plain name leaves the prefix unset."""
        from xmltract.models import MatchCriteria

        criteria = MatchCriteria.from_qname('Title', case_insensitive=True)

        assert criteria.prefix is None
        assert criteria.folded_name == 'title'

    def test_from_qname_empty_prefix_rejected(self):
        """':name' has an empty prefix and is invalid."""
        from xmltract.models import MatchCriteria

        with pytest.raises(ValidationError):
            MatchCriteria.from_qname(':title')


class TestProcessOutcome:
    """Test outcome aggregation."""

    def test_empty_run_succeeds(self):
        """No attempted sources and nothing skipped is a success."""
        from xmltract.models import ProcessOutcome

        assert ProcessOutcome().exit_code == 0

    def test_any_failure_fails_the_run(self):
        """One failed source makes the run fail."""
        from xmltract.models import ErrorKind, ProcessOutcome, TraversalOutcome

        outcome = ProcessOutcome(outcomes=[
            TraversalOutcome(source='a.xml', success=False, error=ErrorKind.PARSE),
            TraversalOutcome(source='b.xml', success=True, matches=4),
        ])

        assert outcome.success is False
        assert outcome.exit_code == 1
        assert [o.source for o in outcome.failures] == ['a.xml']
        assert outcome.matches == 4

    def test_skipped_sources_fail_the_run(self):
        """Sources skipped after a failure are not successes."""
        from xmltract.models import ProcessOutcome, TraversalOutcome

        outcome = ProcessOutcome(
            outcomes=[TraversalOutcome(source='a.xml', success=True)],
            skipped=['b.xml']
        )

        assert outcome.success is False

    def test_traversal_outcome_is_frozen(self):
        """Per-source outcomes are immutable records."""
        from xmltract.models import TraversalOutcome

        outcome = TraversalOutcome(source='a.xml', success=True)

        with pytest.raises(ValidationError):
            outcome.success = False
