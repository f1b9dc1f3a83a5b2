"""
Command-line interface for xmltract.

    xmltract [-hiqv] [-e ENC] [-p PFX] [-m MODE] [-k] NAME [INFILES]...

Prints the normalized content of every NAME element, one line per match,
in document order. Reads standard input when no files are given.
"""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from pydantic import ValidationError

from xmltract.api import Extractor
from xmltract.config import get_settings
from xmltract.logging_setup import setup_logging, verbosity_to_level
from xmltract.models import BatchPolicy, MatchCriteria, TraversalMode

app = typer.Typer(
    name="xmltract",
    help="Extract content for a particular element (name) from XML.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(1)


@app.command()
def main(
    name: str = typer.Argument(..., help="Local name of the elements to extract"),
    infiles: Optional[List[Path]] = typer.Argument(
        None,
        help="XML files to read (default: standard input)",
        show_default=False,
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--encoding",
        "-e",
        metavar="ENC",
        help="Set encoding (default: UTF-8)",
    ),
    prefix: Optional[str] = typer.Option(
        None,
        "--prefix",
        "-p",
        metavar="PFX",
        help="Match prefix, too",
    ),
    ignore_case: bool = typer.Option(
        False,
        "--ignore-case",
        "-i",
        help="Ignore case of name (and prefix)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Quiet logging (errors only)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose logging (default: warnings)",
    ),
    mode: Optional[TraversalMode] = typer.Option(
        None,
        "--mode",
        "-m",
        case_sensitive=False,
        help="Traversal: 'stream' (immediate text) or 'tree' (all descendant text)",
    ),
    keep_going: bool = typer.Option(
        False,
        "--keep-going",
        "-k",
        help="Continue with the remaining files after a failure",
    ),
):
    """Extract content for a particular element (name) from XML."""
    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(f"invalid configuration: {e}")

    logger = setup_logging(verbosity_to_level(quiet, verbose, default=settings.log_level))

    try:
        criteria = MatchCriteria(name=name, prefix=prefix, case_insensitive=ignore_case)
    except ValidationError as e:
        errors = "; ".join(err['msg'] for err in e.errors())
        _fail(f"invalid element criteria: {errors}")

    extractor = Extractor(
        criteria,
        settings=settings,
        mode=mode,
        encoding=encoding,
        batch_policy=BatchPolicy.CONTINUE if keep_going else None,
        logger=logger,
    )
    outcome = extractor.run(infiles)

    raise typer.Exit(outcome.exit_code)


if __name__ == "__main__":
    app()
