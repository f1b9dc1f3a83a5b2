"""
Extraction driver.

Extractor coordinates one run over its input sources:
- No sources: standard input is read as a single streaming source
- File sources: processed in the given order, each opened, traversed and
  closed before the next one is opened
- Matched lines are written to the output as soon as they are produced

Failures are source-local (TraversalOutcome). The batch policy decides
whether the run stops at the first failure (default) or logs it and
continues. Either way the run only succeeds if every source succeeded.
"""

import logging
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional, Sequence, TextIO, Union

from lxml import etree

from xmltract.config import Settings, get_settings
from xmltract.models.criteria import MatchCriteria
from xmltract.models.outcome import (
    BatchPolicy,
    ErrorKind,
    ProcessOutcome,
    TraversalMode,
    TraversalOutcome,
)
from xmltract.parsers.normalizer import Normalizer
from xmltract.parsers.stream import iter_stream_matches
from xmltract.parsers.tree import iter_tree_matches

STDIN_SOURCE = '<stdin>'

Traversal = Callable[..., Iterator[str]]
SourcePath = Union[str, Path]


def get_traversal(mode: Union[TraversalMode, str]) -> Traversal:
    """
    Select the traversal generator for a mode.

    Raises:
        ValueError: If mode is not a known TraversalMode
    """
    mode = TraversalMode(mode)
    if mode is TraversalMode.TREE:
        return iter_tree_matches
    return iter_stream_matches


class Extractor:
    """
    Runs one traversal over a sequence of input sources.

    Args:
        criteria: Target element criteria
        settings: Defaults (default: get_settings())
        mode: Traversal mode override
        encoding: Input encoding override
        batch_policy: Failure policy override
        output: Text stream for matched lines (default: sys.stdout at run time)
        input_stream: Binary stream used when no sources are given
                      (default: sys.stdin.buffer at run time)
        logger: Logger receiving progress and failure messages

    Example:
        >>> extractor = Extractor(MatchCriteria(name='title'))
        >>> outcome = extractor.run(['books.xml'])
        >>> outcome.exit_code
        0
    """

    def __init__(
        self,
        criteria: MatchCriteria,
        settings: Optional[Settings] = None,
        mode: Optional[Union[TraversalMode, str]] = None,
        encoding: Optional[str] = None,
        batch_policy: Optional[Union[BatchPolicy, str]] = None,
        output: Optional[TextIO] = None,
        input_stream: Optional[BinaryIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        settings = settings or get_settings()

        self.criteria = criteria
        self.mode = TraversalMode(mode or settings.mode)
        self.encoding = encoding or settings.encoding
        self.batch_policy = BatchPolicy(batch_policy or settings.batch_policy)
        self.huge_tree = settings.huge_tree

        self._traversal = get_traversal(self.mode)
        self._normalizer = Normalizer(settings.whitespace)
        self._output = output
        self._input_stream = input_stream
        self._logger = logger or logging.getLogger(__name__)

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def run(self, sources: Optional[Sequence[SourcePath]] = None) -> ProcessOutcome:
        """
        Extract from every source in order.

        Args:
            sources: File paths; empty or None reads standard input

        Returns:
            ProcessOutcome with one TraversalOutcome per attempted source
        """
        if self.criteria.case_insensitive:
            self._logger.info(f"matching '{self.criteria.name}' ignoring case")
        else:
            self._logger.info(f"matching '{self.criteria.name}' case sensitive")

        if not sources:
            self._logger.info(f"{self.encoding} streaming mode")
            stream = self._input_stream
            if stream is None:
                stream = sys.stdin.buffer
            return ProcessOutcome(outcomes=[self.run_stream(stream)])

        result = ProcessOutcome()
        for position, source in enumerate(sources):
            outcome = self.run_source(source)
            result.outcomes.append(outcome)

            if not outcome.success and self.batch_policy is BatchPolicy.FAIL_FAST:
                result.skipped.extend(str(s) for s in sources[position + 1:])
                if result.skipped:
                    self._logger.error(
                        f"Stopping after failure of '{outcome.source}', "
                        f"{len(result.skipped)} source(s) not processed"
                    )
                break

        self._logger.info(
            f"Extracted {result.matches} line(s) from {len(result.outcomes)} source(s), "
            f"{len(result.failures)} failed"
        )
        return result

    def run_source(self, source: SourcePath) -> TraversalOutcome:
        """
        Open a file, extract from it and close it.

        Returns:
            TraversalOutcome (SOURCE_OPEN error if the file cannot be opened)
        """
        name = str(source)
        try:
            handle = open(source, 'rb')
        except OSError as e:
            self._logger.error(f"could not open '{name}' for reading: {e}")
            return TraversalOutcome(
                source=name,
                success=False,
                error=ErrorKind.SOURCE_OPEN,
                message=str(e)
            )

        with handle:
            self._logger.info(f"parsing '{name}'")
            return self.run_stream(handle, name=name)

    def run_stream(self, stream: BinaryIO, name: str = STDIN_SOURCE) -> TraversalOutcome:
        """
        Extract from an already open binary stream.

        Lines written before a failure stay written; the source is marked
        failed and the error is logged.
        """
        count = 0
        output = self.output
        try:
            for line in self._traversal(
                stream,
                self.criteria,
                encoding=self.encoding,
                normalizer=self._normalizer,
                huge_tree=self.huge_tree
            ):
                output.write(line + '\n')
                count += 1
        except (etree.ParseError, LookupError) as e:
            self._logger.error(f"XML reader failed to parse '{name}': {e}")
            return TraversalOutcome(
                source=name,
                success=False,
                error=ErrorKind.PARSE,
                message=str(e),
                matches=count
            )
        except OSError as e:
            self._logger.error(f"could not read '{name}': {e}")
            return TraversalOutcome(
                source=name,
                success=False,
                error=ErrorKind.SOURCE_OPEN,
                message=str(e),
                matches=count
            )
        finally:
            output.flush()

        self._logger.debug(f"{count} line(s) from '{name}'")
        return TraversalOutcome(source=name, success=True, matches=count)
