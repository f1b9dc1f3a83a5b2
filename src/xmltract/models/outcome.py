"""
Traversal modes, batch policies and per-source / per-process outcomes.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class TraversalMode(str, Enum):
    """Traversal strategy used to extract matched content."""

    STREAM = 'stream'
    TREE = 'tree'


class BatchPolicy(str, Enum):
    """What the extractor does after a source fails."""

    FAIL_FAST = 'fail-fast'
    CONTINUE = 'continue'


class ErrorKind(str, Enum):
    """Why a source traversal failed."""

    SOURCE_OPEN = 'source_open'
    PARSE = 'parse'


class TraversalOutcome(BaseModel):
    """
    Result of extracting from a single input source.

    Attributes:
        source: Source identity (file path or '<stdin>')
        success: True if the source was read to the end without error
        error: Failure kind (None on success)
        message: Error message from the failing reader/parser
        matches: Number of lines emitted from this source
    """

    source: str
    success: bool
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    matches: int = 0

    model_config = {"frozen": True}


class ProcessOutcome(BaseModel):
    """
    Aggregated result over all sources of one run.

    A run succeeds only if every source was attempted and succeeded.
    Sources never attempted (fail-fast after an earlier failure) are
    listed in ``skipped``.
    """

    outcomes: List[TraversalOutcome] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.skipped and all(o.success for o in self.outcomes)

    @property
    def failures(self) -> List[TraversalOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def matches(self) -> int:
        return sum(o.matches for o in self.outcomes)

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 on success, 1 otherwise."""
        return 0 if self.success else 1
