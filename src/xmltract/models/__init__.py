"""
Pydantic models for match criteria and extraction outcomes.
"""

from xmltract.models.criteria import MatchCriteria, fold_case
from xmltract.models.outcome import (
    TraversalMode,
    BatchPolicy,
    ErrorKind,
    TraversalOutcome,
    ProcessOutcome,
)

__all__ = [
    'MatchCriteria',
    'fold_case',
    'TraversalMode',
    'BatchPolicy',
    'ErrorKind',
    'TraversalOutcome',
    'ProcessOutcome',
]
